"""Tests for password hashing."""

from board.util.security import hash_password, verify_password


class TestPasswordHashing:
    def test_hash_verifies(self):
        hashed = hash_password("correct horse")

        assert hashed.startswith("$argon2")
        assert verify_password("correct horse", hashed)

    def test_wrong_password(self):
        assert not verify_password("wrong", hash_password("right"))

    def test_hashes_are_salted(self):
        assert hash_password("same") != hash_password("same")

    def test_garbage_hash(self):
        assert not verify_password("pw", "not-a-hash")
