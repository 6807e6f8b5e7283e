import pytest

from ledgerkit.ed25519 import Ed25519Crypto

RFC_SEED = "9d61b19deffd5a60ba844af492ec2cc44449c5697b326919703bac031cae7f60"
RFC_PUBLIC = "d75a980182b10ab7d54bfed3c964073a0ee172f3daa62325af021a68f707511a"
RFC_SIGNATURE = (
    "e5564300c360ac729086e2cc806e828a84877f1eb8e5d974d873e065224901555"
    "fb8821590a33bacc61e39701cf9b46bd25bf5f0595bbe24655141438e7a100b"
)
PKCS8_PREFIX = "302e020100300506032b657004220420"


@pytest.fixture
def crypto():
    return Ed25519Crypto()


def test_known_vector(crypto):
    keypair = bytes.fromhex(PKCS8_PREFIX + RFC_SEED)
    assert crypto.public_key(keypair).hex() == RFC_PUBLIC
    assert crypto.sign(keypair, b"").hex() == RFC_SIGNATURE
    assert crypto.verify(bytes.fromhex(RFC_PUBLIC), b"", bytes.fromhex(RFC_SIGNATURE))


def test_sign_verify_round_trip(crypto):
    keypair = crypto.generate_keypair()
    signature = crypto.sign(keypair, b"hello")
    assert crypto.verify(crypto.public_key(keypair), b"hello", signature) is True


def test_tampered_message_fails(crypto):
    keypair = crypto.generate_keypair()
    signature = crypto.sign(keypair, b"hello")
    assert crypto.verify(crypto.public_key(keypair), b"hellO", signature) is False


def test_other_key_fails(crypto):
    signer = crypto.generate_keypair()
    other = crypto.generate_keypair()
    signature = crypto.sign(signer, b"msg")
    assert crypto.verify(crypto.public_key(other), b"msg", signature) is False


def test_malformed_public_key_fails(crypto):
    keypair = crypto.generate_keypair()
    signature = crypto.sign(keypair, b"msg")
    assert crypto.verify(b"short", b"msg", signature) is False


def test_signatures_are_deterministic(crypto):
    keypair = crypto.generate_keypair()
    assert crypto.sign(keypair, b"abc") == crypto.sign(keypair, b"abc")
    assert len(crypto.sign(keypair, b"abc")) == 64


def test_public_key_is_raw_32_bytes(crypto):
    assert len(crypto.public_key(crypto.generate_keypair())) == 32


def test_bad_keypair_raises(crypto):
    with pytest.raises(ValueError):
        crypto.sign(b"not a key", b"msg")