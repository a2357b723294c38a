"""
Fake UDP network used by the session and CLI tests
"""

import socket
import struct

import pytest

from q3serverlist import session


OOB = b'\xFF\xFF\xFF\xFF'


def endpoint_record(address, port):
    return b'\\' + socket.inet_aton(address) + struct.pack('!H', port)


class FakeSocket:
    """Replies are produced by per-address responders when a datagram is sent."""

    def __init__(self, responders=None):
        self.responders = responders or {}
        self.inbox = []
        self.sent = []
        self.timeouts = []
        self.closed = False

    def settimeout(self, timeout):
        self.timeouts.append(timeout)

    def sendto(self, data, address):
        self.sent.append((data, address))
        responder = self.responders.get(tuple(address))
        if responder:
            for reply in responder(data):
                self.inbox.append((reply, tuple(address)))
        return len(data)

    def recvfrom(self, bufsize):
        if not self.inbox:
            raise socket.timeout('timed out')
        reply = self.inbox.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply

    def close(self):
        self.closed = True


@pytest.fixture
def fake_socket():
    return FakeSocket()


@pytest.fixture
def fake_network(monkeypatch):
    """Route host resolution and socket creation to a FakeSocket."""
    sock = FakeSocket()
    hosts = {}

    def resolve(hostname):
        if hostname not in hosts:
            raise session.ResolutionError(f"DNS resolution failed for {hostname}")
        return hosts[hostname]

    monkeypatch.setattr(session, 'resolve_host', resolve)
    monkeypatch.setattr(session, 'create_socket', lambda timeout: sock)
    sock.hosts = hosts
    return sock
