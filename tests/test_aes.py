import pytest

from ledgerkit.aes import NONCE_SIZE, AesCrypto, generate_key


@pytest.fixture
def crypto():
    return AesCrypto(generate_key())


def test_round_trip(crypto):
    assert crypto.decrypt(crypto.encrypt(b"ledger data")) == b"ledger data"


def test_empty_round_trip(crypto):
    assert crypto.decrypt(crypto.encrypt(b"")) == b""


def test_ciphertext_layout(crypto):
    sealed = crypto.encrypt(b"abcdef")
    assert len(sealed) == NONCE_SIZE + len(b"abcdef") + 16


def test_random_nonce(crypto):
    sealed = [crypto.encrypt(b"same") for _ in range(8)]
    nonces = {item[:NONCE_SIZE] for item in sealed}
    assert len(nonces) == 8
    assert [crypto.decrypt(item) for item in sealed] == [b"same"] * 8


def test_too_short_returns_none(crypto):
    assert crypto.decrypt(b"\x00" * (NONCE_SIZE - 1)) is None


def test_tampered_returns_none(crypto):
    sealed = bytearray(crypto.encrypt(b"payload"))
    sealed[-1] ^= 0x01
    assert crypto.decrypt(bytes(sealed)) is None


def test_wrong_key_returns_none(crypto):
    sealed = crypto.encrypt(b"payload")
    assert AesCrypto(generate_key()).decrypt(sealed) is None


def test_generated_key_size():
    key = generate_key()
    assert len(key) == 32
    assert key != generate_key()


def test_wrong_key_size_rejected():
    with pytest.raises(ValueError):
        AesCrypto(b"\x00" * 16)