from dataclasses import dataclass
from enum import Enum


OOB_PREFIX = b'\xFF\xFF\xFF\xFF'

GETSERVERS_RESPONSE = b'getserversResponse'
INFO_RESPONSE = b'infoResponse'


class PacketKind(Enum):
    MASTER_RESPONSE = 'getserversResponse'
    INFO_RESPONSE = 'infoResponse'
    UNRECOGNIZED = 'unrecognized'
    NOT_OUT_OF_BAND = 'not out-of-band'


@dataclass(frozen=True)
class Packet:
    kind: PacketKind
    payload: bytes


def is_out_of_band(datagram):
    # Marker followed by at least one letter
    return (len(datagram) > len(OOB_PREFIX)
            and datagram.startswith(OOB_PREFIX)
            and datagram[4:5].isalpha())


def strip_prefix(datagram):
    if datagram.startswith(OOB_PREFIX):
        return datagram[len(OOB_PREFIX):]
    return datagram


def wrap(command, body=b''):
    data = command.encode('ascii')
    if body:
        data += b' ' + body
    return OOB_PREFIX + data


def classify(datagram):
    if not is_out_of_band(datagram):
        return Packet(PacketKind.NOT_OUT_OF_BAND, datagram)

    payload = strip_prefix(datagram)
    if payload.startswith(GETSERVERS_RESPONSE):
        return Packet(PacketKind.MASTER_RESPONSE, payload)
    if payload.startswith(INFO_RESPONSE):
        return Packet(PacketKind.INFO_RESPONSE, payload)
    return Packet(PacketKind.UNRECOGNIZED, payload)
