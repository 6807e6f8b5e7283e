import pytest

from ledgerkit.p2p import MessageKind, P2PMessage, P2PNetwork, decode_message, encode_message


def test_encode_request_chain():
    assert encode_message(P2PMessage(MessageKind.REQUEST_CHAIN)) == b'"RequestChain"'


def test_encode_new_block():
    assert encode_message(P2PMessage(MessageKind.NEW_BLOCK, b"\x01\x02\x03")) == b'{"NewBlock":[1,2,3]}'


def test_encode_peer_discovery():
    msg = P2PMessage(MessageKind.PEER_DISCOVERY, ("127.0.0.1", 8080))
    assert encode_message(msg) == b'{"PeerDiscovery":"127.0.0.1:8080"}'


@pytest.mark.parametrize(
    "msg",
    [
        P2PMessage(MessageKind.NEW_BLOCK, b"block"),
        P2PMessage(MessageKind.NEW_TRANSACTION, b""),
        P2PMessage(MessageKind.RESPONSE_CHAIN, bytes(range(256))),
        P2PMessage(MessageKind.REQUEST_CHAIN),
        P2PMessage(MessageKind.PEER_DISCOVERY, ("10.0.0.5", 9000)),
        P2PMessage(MessageKind.PEER_DISCOVERY, ("::1", 9000)),
    ],
)
def test_round_trip(msg):
    assert decode_message(encode_message(msg)) == msg


@pytest.mark.parametrize(
    "data",
    [b"not json", b'"NewBlock"', b'{"Unknown":[1]}', b'{"NewBlock":[300]}', b'{"PeerDiscovery":"nohost"}', b"[]"],
)
def test_decode_rejects_malformed(data):
    with pytest.raises(ValueError):
        decode_message(data)


def test_encode_rejects_missing_payload():
    with pytest.raises(ValueError):
        encode_message(P2PMessage(MessageKind.NEW_BLOCK))


def test_peer_count_deduplicates():
    with P2PNetwork(("127.0.0.1", 0)) as node:
        node.add_peer(("127.0.0.1", 9001))
        node.add_peer(("127.0.0.1", 9001))
        node.add_peer(("127.0.0.1", 9002))
        assert node.peer_count() == 2


def test_broadcast_and_listen():
    with P2PNetwork(("127.0.0.1", 0)) as sender, P2PNetwork(("127.0.0.1", 0)) as receiver:
        receiver.socket.settimeout(5)
        sender.add_peer(receiver.node_addr)
        msg = P2PMessage(MessageKind.NEW_TRANSACTION, b"tx-bytes")
        sender.broadcast(msg)
        received, src = receiver.listen()
        assert received == msg
        assert src == sender.node_addr