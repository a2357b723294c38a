import logging
import os
import socket
import struct
from collections import namedtuple

from .packets import wrap


logger = logging.getLogger(__name__)


RECORD_SIZE = 7
RECORD_MARKER = 0x5C  # '\'
EOT_RECORD = b'EOT\x00\x00\x00'


Endpoint = namedtuple('Endpoint', ['address', 'port'])


def build_getservers_request(protocol, params=()):
    # Params go out as the raw bytes they were given on the command line
    tokens = [str(protocol).encode('ascii')] + [os.fsencode(param) for param in params]
    return wrap('getservers', b' '.join(tokens))


def decode_getservers_response(payload):
    start = payload.find(b'\\')
    if start == -1:
        return []

    records = payload[start:]
    endpoints = []
    for i in range(0, len(records) - RECORD_SIZE + 1, RECORD_SIZE):
        if records[i] != RECORD_MARKER:
            break
        data = records[i + 1:i + RECORD_SIZE]
        if data == EOT_RECORD:
            logger.debug("End of server list reached")
            break
        address = socket.inet_ntoa(data[:4])
        port, = struct.unpack('!H', data[4:])
        endpoints.append(Endpoint(address, port))
    return endpoints


def handle_master_response(payload, source, master):
    if tuple(source[:2]) != tuple(master):
        logger.debug(f"Ignoring getserversResponse from {source[0]}:{source[1]}, expected {master[0]}:{master[1]}")
        return []
    endpoints = decode_getservers_response(payload)
    logger.debug(f"Master {master[0]}:{master[1]} reported {len(endpoints)} servers")
    return endpoints
