from ledgerkit.chain import Block, Blockchain, GENESIS_HASH


def _next_block(chain, hash_value="h1", data="payload"):
    latest = chain.latest_block
    return Block(latest.index + 1, 1, latest.hash, hash_value, data, 0)


def test_new_chain_has_genesis():
    chain = Blockchain()
    assert len(chain) == 1
    genesis = chain.latest_block
    assert genesis.index == 0
    assert genesis.prev_hash == "0" * 64
    assert genesis.hash == GENESIS_HASH
    assert genesis.data == "genesis-block-initialized"


def test_add_linked_block():
    chain = Blockchain()
    block = _next_block(chain)
    assert chain.add_block(block)
    assert len(chain) == 2
    assert chain.latest_block is block


def test_reject_wrong_prev_hash():
    chain = Blockchain()
    block = Block(1, 1, "wrong", "h1", "x", 0)
    assert not chain.add_block(block)
    assert len(chain) == 1


def test_reject_wrong_index():
    chain = Blockchain()
    block = Block(5, 1, chain.latest_block.hash, "h1", "x", 0)
    assert not chain.add_block(block)
    assert len(chain) == 1


def test_reject_genesis_readded():
    chain = Blockchain()
    assert not chain.add_block(chain.latest_block)


def test_valid_chain():
    chain = Blockchain()
    chain.add_block(_next_block(chain, "h1"))
    chain.add_block(_next_block(chain, "h2"))
    assert chain.is_valid()


def test_duplicate_hash_makes_chain_invalid():
    chain = Blockchain()
    chain.blocks.append(Block(1, 1, GENESIS_HASH, GENESIS_HASH, "x", 0))
    assert not chain.is_valid()


def test_broken_link_makes_chain_invalid():
    chain = Blockchain()
    chain.blocks.append(Block(1, 1, "other", "h1", "x", 0))
    assert not chain.is_valid()