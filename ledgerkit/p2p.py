"""UDP peer network exchanging JSON-encoded messages."""

from __future__ import annotations

import enum
import json
import socket
from dataclasses import dataclass
from typing import Union

Address = tuple[str, int]
Payload = Union[bytes, Address, None]

RECV_BUFFER = 4096


class MessageKind(enum.Enum):
    """Kinds of peer messages."""

    NEW_BLOCK = "NewBlock"
    NEW_TRANSACTION = "NewTransaction"
    REQUEST_CHAIN = "RequestChain"
    RESPONSE_CHAIN = "ResponseChain"
    PEER_DISCOVERY = "PeerDiscovery"


_BYTE_KINDS = {MessageKind.NEW_BLOCK, MessageKind.NEW_TRANSACTION, MessageKind.RESPONSE_CHAIN}


@dataclass(frozen=True)
class P2PMessage:
    """A message: bytes for blocks, transactions and chains; an address for discovery."""

    kind: MessageKind
    payload: Payload = None


def _format_address(addr: Address) -> str:
    host, port = addr
    return f"[{host}]:{port}" if ":" in host else f"{host}:{port}"


def _parse_address(text: str) -> Address:
    host, sep, port = text.rpartition(":")
    if not sep or not host or not port.isdigit() or int(port) > 0xFFFF:
        raise ValueError(f"invalid socket address: {text!r}")
    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]
    return host, int(port)


def encode_message(msg: P2PMessage) -> bytes:
    """Encode ``msg`` as compact JSON."""
    if msg.kind is MessageKind.REQUEST_CHAIN:
        body: object = msg.kind.value
    elif msg.kind is MessageKind.PEER_DISCOVERY:
        if not isinstance(msg.payload, tuple):
            raise ValueError("peer discovery needs an address")
        body = {msg.kind.value: _format_address(msg.payload)}
    else:
        if not isinstance(msg.payload, (bytes, bytearray)):
            raise ValueError(f"{msg.kind.value} needs a bytes payload")
        body = {msg.kind.value: list(msg.payload)}
    return json.dumps(body, separators=(",", ":")).encode("utf-8")


def decode_message(data: bytes) -> P2PMessage:
    """Decode a message; raises ValueError when malformed."""
    body = json.loads(bytes(data).decode("utf-8"))
    if isinstance(body, str):
        kind = MessageKind(body)
        if kind is not MessageKind.REQUEST_CHAIN:
            raise ValueError(f"{body} requires a payload")
        return P2PMessage(kind)
    if not isinstance(body, dict) or len(body) != 1:
        raise ValueError("message must be a tag or a single-key object")
    ((tag, value),) = body.items()
    kind = MessageKind(tag)
    if kind is MessageKind.REQUEST_CHAIN:
        raise ValueError("RequestChain carries no payload")
    if kind is MessageKind.PEER_DISCOVERY:
        if not isinstance(value, str):
            raise ValueError("peer address must be a string")
        return P2PMessage(kind, _parse_address(value))
    if not isinstance(value, list) or not all(isinstance(b, int) for b in value):
        raise ValueError("payload must be a list of bytes")
    return P2PMessage(kind, bytes(value))


class P2PNetwork:
    """A UDP node that broadcasts to its known peers."""

    def __init__(self, addr: Address) -> None:
        host, port = addr
        family = socket.AF_INET6 if ":" in host else socket.AF_INET
        self.socket = socket.socket(family, socket.SOCK_DGRAM)
        try:
            self.socket.bind((host, port))
        except OSError:
            self.socket.close()
            raise
        bound = self.socket.getsockname()
        self.node_addr: Address = (bound[0], bound[1])
        self.peers: set[Address] = set()

    def add_peer(self, peer: Address) -> None:
        """Remember ``peer``."""
        self.peers.add((peer[0], peer[1]))

    def broadcast(self, msg: P2PMessage) -> None:
        """Send ``msg`` to every peer; delivery failures are ignored."""
        data = encode_message(msg)
        for peer in self.peers:
            try:
                self.socket.sendto(data, peer)
            except OSError:
                pass

    def listen(self) -> tuple[P2PMessage, Address]:
        """Wait for one message and return it with its sender."""
        data, src = self.socket.recvfrom(RECV_BUFFER)
        return decode_message(data), (src[0], src[1])

    def peer_count(self) -> int:
        """Number of known peers."""
        return len(self.peers)

    def close(self) -> None:
        """Close the socket."""
        self.socket.close()

    def __enter__(self) -> P2PNetwork:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()