"""Tests for password hashing."""

from civic_pulse_api.app.core.security import hash_password, verify_password


class TestPasswordHashing:

    def test_hash_verifies(self):
        hashed = hash_password("s3cret")
        assert hashed != "s3cret"
        assert verify_password("s3cret", hashed)
        assert not verify_password("wrong", hashed)

    def test_salt_differs_per_hash(self):
        assert hash_password("s3cret") != hash_password("s3cret")

    def test_malformed_hash_does_not_verify(self):
        assert not verify_password("s3cret", "not-a-hash")
