import logging
import socket
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .errors import ResolutionError, TransportError
from .master import build_getservers_request, handle_master_response
from .packets import PacketKind, classify
from .serverinfo import build_getinfo_request, decode_info_response
from .settings import BUFFER_SIZE, UDP_TIMEOUT


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QueryRequest:
    master_host: str
    master_port: int
    protocol: int
    params: tuple = ()


@dataclass(frozen=True)
class SessionContext:
    sock: socket.socket
    master_address: str
    master_port: int
    protocol: int
    params: tuple = ()

    @property
    def master(self):
        return (self.master_address, self.master_port)


@dataclass(frozen=True)
class ServerEntry:
    endpoint: tuple
    info: dict = field(default_factory=dict)
    ping: Optional[float] = None


class SessionState(Enum):
    SENDING = 'sending'
    LISTENING = 'listening'
    DONE = 'done'


def resolve_host(hostname):
    try:
        return socket.gethostbyname(hostname)
    except (socket.gaierror, UnicodeError) as e:
        raise ResolutionError(f"DNS resolution failed for {hostname}: {e}") from e


def create_socket(timeout):
    try:
        sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    except OSError as e:
        raise TransportError(f"Could not create UDP socket: {e}") from e
    sock.settimeout(timeout)
    return sock


def open_session(request, timeout=UDP_TIMEOUT):
    # Resolve first so a bad hostname never opens a socket
    master_address = resolve_host(request.master_host)
    sock = create_socket(timeout)
    return SessionContext(sock, master_address, request.master_port,
                          request.protocol, tuple(request.params))


class QuerySession:
    def __init__(self, context, on_record, timeout=UDP_TIMEOUT, buffer_size=BUFFER_SIZE):
        self.context = context
        self.on_record = on_record
        self.timeout = timeout
        self.buffer_size = buffer_size
        self.state = SessionState.SENDING
        self.pending = {}
        self.servers_found = 0
        self.records_received = 0

    def run(self):
        try:
            while self.state is not SessionState.DONE:
                if self.state is SessionState.SENDING:
                    self._send_getservers()
                    self.state = SessionState.LISTENING
                else:
                    self._listen()
        finally:
            self.state = SessionState.DONE
            self.context.sock.close()
        logger.info(f"Query finished: {self.records_received} of {self.servers_found} servers answered")
        return self.records_received

    def _sendto(self, data, address):
        try:
            self.context.sock.sendto(data, address)
        except OSError as e:
            raise TransportError(f"Failed to send to {address[0]}:{address[1]}: {e}") from e

    def _send_getservers(self):
        ctx = self.context
        logger.info(f"Sending getservers {ctx.protocol} to {ctx.master_address}:{ctx.master_port}")
        self._sendto(build_getservers_request(ctx.protocol, ctx.params), ctx.master)

    def _send_getinfo(self, endpoint):
        logger.debug(f"Sending getinfo request to {endpoint.address}:{endpoint.port}")
        self._sendto(build_getinfo_request(), tuple(endpoint))
        self.pending[tuple(endpoint)] = time.time()

    def _listen(self):
        self.context.sock.settimeout(self.timeout)
        try:
            data, source = self.context.sock.recvfrom(self.buffer_size)
        except socket.timeout:
            logger.debug(f"No traffic for {self.timeout}s, stopping")
            self.state = SessionState.DONE
            return
        except (ConnectionResetError, ConnectionRefusedError) as e:
            # ICMP port unreachable from a server that is down
            logger.debug(f"Ignoring receive error: {e}")
            return
        except OSError as e:
            logger.warning(f"Receive failed, stopping: {e}")
            self.state = SessionState.DONE
            return
        self.dispatch(data, source)

    def dispatch(self, data, source):
        packet = classify(data)
        if packet.kind is PacketKind.MASTER_RESPONSE:
            endpoints = handle_master_response(packet.payload, source, self.context.master)
            self.servers_found += len(endpoints)
            for endpoint in endpoints:
                self._send_getinfo(endpoint)
        elif packet.kind is PacketKind.INFO_RESPONSE:
            info = decode_info_response(packet.payload)
            if info is None:
                return
            endpoint = tuple(source[:2])
            sent = self.pending.pop(endpoint, None)
            ping = (time.time() - sent) * 1000 if sent is not None else None
            if ping is not None:
                logger.debug(f"infoResponse from {endpoint[0]}:{endpoint[1]} in {ping:.2f} ms")
            self.records_received += 1
            self.on_record(ServerEntry(endpoint, info, ping))
        else:
            logger.debug(f"Ignoring {packet.kind.value} packet from {source[0]}:{source[1]} ({len(data)} bytes)")
