import string

import pytest

from tikapi.crypto import hash_password

CHALLENGE = "0123456789abcdef0123456789abcdef"
PASSWORD = "password"


def test_result_is_lower_case_hex_of_md5_size():
    result = hash_password(PASSWORD, CHALLENGE)
    assert len(result) == 32
    assert set(result) <= set(string.hexdigits.lower())


def test_challenge_case_does_not_matter():
    assert hash_password(PASSWORD, CHALLENGE.upper()) == hash_password(
        PASSWORD, CHALLENGE
    )


def test_bytes_and_str_password_agree():
    assert hash_password(PASSWORD.encode(), CHALLENGE) == hash_password(
        PASSWORD, CHALLENGE
    )


def test_different_passwords_give_different_hashes():
    assert hash_password("secret", CHALLENGE) != hash_password(PASSWORD, CHALLENGE)


def test_different_challenges_give_different_hashes():
    other = "f" * 32
    assert hash_password(PASSWORD, other) != hash_password(PASSWORD, CHALLENGE)


def test_empty_password_is_accepted():
    result = hash_password("", CHALLENGE)
    assert len(result) == 32
    assert result != hash_password(PASSWORD, CHALLENGE)


@pytest.mark.parametrize("challenge", ["", "abc", CHALLENGE[:-1], CHALLENGE + "0"])
def test_invalid_challenge_size_raises(challenge):
    with pytest.raises(ValueError, match="Invalid challenge size"):
        hash_password(PASSWORD, challenge)


@pytest.mark.parametrize("bad", ["g", "z", " ", "-"])
def test_invalid_hex_character_raises(bad):
    challenge = bad + CHALLENGE[1:]
    with pytest.raises(ValueError, match="Invalid hex string"):
        hash_password(PASSWORD, challenge)