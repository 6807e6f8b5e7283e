from ledgerkit.bridge import CrossChainBridge, CrossChainTx


def _tx(target="ETH", amount=5, nonce=1):
    return CrossChainTx("LOCAL", target, "alice", "bob", amount, nonce)


def test_lock_supported_chain():
    bridge = CrossChainBridge(1)
    assert bridge.lock_asset(_tx()) is True
    assert len(bridge.pending_txs) == 1


def test_lock_unsupported_chain():
    bridge = CrossChainBridge(1)
    assert bridge.lock_asset(_tx(target="DOGE")) is False
    assert not bridge.pending_txs


def test_lock_zero_amount():
    assert CrossChainBridge(1).lock_asset(_tx(amount=0)) is False


def test_unlock_matches_nonce():
    bridge = CrossChainBridge(1)
    bridge.lock_asset(_tx(nonce=3))
    assert bridge.unlock_asset(_tx(nonce=3)) is True
    assert bridge.unlock_asset(_tx(nonce=4)) is False


def test_process_pending_drains_in_order():
    bridge = CrossChainBridge(1)
    txs = [_tx(target="BSC", nonce=1), _tx(target="SOL", nonce=2), _tx(target="TRON", nonce=3)]
    for tx in txs:
        bridge.lock_asset(tx)
    assert bridge.process_pending() == txs
    assert bridge.process_pending() == []
    assert bridge.unlock_asset(txs[0]) is False


def test_relayers():
    bridge = CrossChainBridge(1)
    bridge.add_relayer("relayer-a")
    bridge.add_relayer("relayer-b")
    assert bridge.relayers == ["relayer-a", "relayer-b"]