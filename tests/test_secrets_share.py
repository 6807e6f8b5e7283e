import pytest

from ledgerkit.secrets_share import ShamirSecretSharing

SECRET = b"secret"


def test_threshold_above_total_rejected():
    with pytest.raises(ValueError):
        ShamirSecretSharing(4, 3)


def test_split_numbers_shares():
    shares = ShamirSecretSharing(2, 5).split_secret(SECRET)
    assert [number for number, _ in shares] == [1, 2, 3, 4, 5]
    assert all(len(data) == len(SECRET) for _, data in shares)


def test_threshold_shares_hold_secret():
    shares = ShamirSecretSharing(3, 5).split_secret(SECRET)
    assert [data for _, data in shares[:3]] == [SECRET] * 3


def test_reconstruct_with_enough_shares():
    scheme = ShamirSecretSharing(2, 4)
    shares = scheme.split_secret(SECRET)
    assert scheme.reconstruct_secret(shares[:2]) == SECRET


def test_reconstruct_with_too_few_shares():
    scheme = ShamirSecretSharing(3, 4)
    shares = scheme.split_secret(SECRET)
    assert scheme.reconstruct_secret(shares[:2]) is None


def test_reconstruct_with_no_shares():
    assert ShamirSecretSharing(0, 2).reconstruct_secret([]) is None


@pytest.mark.parametrize(
    ("share", "expected"),
    [
        ((1, b"x"), True),
        ((3, b"x"), True),
        ((0, b"x"), False),
        ((4, b"x"), False),
        ((2, b""), False),
    ],
)
def test_validate_share(share, expected):
    assert ShamirSecretSharing(2, 3).validate_share(share) is expected