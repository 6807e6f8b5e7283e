from dataclasses import replace

import pytest

from ledgerkit.chain import Block
from ledgerkit.pow import PowConsensus


@pytest.fixture
def block():
    return Block(1, 1700000000000, "prev", "", "data", 0)


def test_mined_block_meets_target(block):
    pow_ = PowConsensus(2)
    mined = pow_.mine_block(block)
    assert mined.hash.startswith("00")
    assert mined.hash == pow_.block_hash(mined)
    assert pow_.validate_block(mined)


def test_mining_does_not_change_input(block):
    PowConsensus(1).mine_block(block)
    assert block.hash == ""
    assert block.nonce == 0


def test_zero_difficulty_uses_first_nonce(block):
    mined = PowConsensus(0).mine_block(block)
    assert mined.nonce == 0
    assert len(mined.hash) == 64


def test_tampered_block_fails(block):
    pow_ = PowConsensus(1)
    mined = pow_.mine_block(block)
    assert not pow_.validate_block(replace(mined, data="other"))


def test_hash_depends_on_nonce(block):
    pow_ = PowConsensus(1)
    assert pow_.block_hash(block) != pow_.block_hash(replace(block, nonce=1))


def test_validate_requires_prefix(block):
    pow_ = PowConsensus(64)
    unmined = replace(block, hash=pow_.block_hash(block))
    assert not pow_.validate_block(unmined)


@pytest.mark.parametrize(
    "index, expected",
    [(0, 3), (5, 3), (10, 4), (20, 4), (21, 3)],
)
def test_adjust_difficulty(index, expected):
    assert PowConsensus(3).adjust_difficulty(index) == expected