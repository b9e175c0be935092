from __future__ import annotations

import hashlib

import pytest

from src.event_registration.event_registration.accounts.passwords import hash_password, new_salt, verify_password


@pytest.mark.parametrize("password", ["right", "", "mật khẩu dài có dấu", "p@ss w0rd;--"])
def test_verify_accepts_matching_password(password):
    salt = new_salt()
    assert verify_password(password, hash_password(password, salt), salt) is True


def test_verify_rejects_other_password():
    salt = new_salt()
    stored = hash_password("right", salt)

    assert verify_password("wrong", stored, salt) is False
    assert verify_password("Right", stored, salt) is False
    assert verify_password("right ", stored, salt) is False


def test_verify_uses_the_stored_salt():
    stored = hash_password("right", "salt-a")
    assert verify_password("right", stored, "salt-b") is False


def test_hash_is_sha256_of_password_plus_salt():
    assert hash_password("pw", "NaCl") == hashlib.sha256(b"pwNaCl").hexdigest()


@pytest.mark.parametrize("stored_hash", ["CHANGE_ME", "", "không-phải-hex", None])
def test_corrupted_stored_hash_is_mismatch_not_error(stored_hash):
    assert verify_password("pw", stored_hash, "salt") is False


def test_new_salt_length_and_randomness():
    a, b = new_salt(), new_salt()
    assert len(a) == 16
    assert a != b
    assert len(new_salt(32)) == 32
