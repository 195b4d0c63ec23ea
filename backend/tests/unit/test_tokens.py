"""Unit tests for access token minting."""

import time
from unittest.mock import patch

import jwt
import pytest

from issuer.config import MAX_ALLOWED_SESSION_DURATION
from issuer.tokens import mint_access_token


def decode(token: str, secret: str = "test-api-key-secret") -> dict:
    return jwt.decode(token, secret, algorithms=["HS256"], leeway=10)


class TestMintAccessToken:
    """Tests for mint_access_token."""

    def test_token_is_signed_with_api_key_secret(self, issuer_config):
        token = mint_access_token(issuer_config, "alice", "r1")

        payload = decode(token)
        assert payload["iss"] == issuer_config.api_key_sid
        assert payload["sub"] == issuer_config.account_sid

    def test_wrong_secret_fails_verification(self, issuer_config):
        token = mint_access_token(issuer_config, "alice", "r1")

        with pytest.raises(jwt.InvalidSignatureError):
            decode(token, secret="other-secret")

    def test_grants_identity_and_room(self, issuer_config):
        payload = decode(mint_access_token(issuer_config, "alice", "r1"))

        assert payload["grants"]["identity"] == "alice"
        assert payload["grants"]["video"] == {"room": "r1"}

    def test_ttl_is_four_hours(self, issuer_config):
        now = int(time.time())
        with patch("time.time", return_value=now):
            token = mint_access_token(issuer_config, "alice", "r1")

        payload = decode(token)
        assert payload["exp"] == now + MAX_ALLOWED_SESSION_DURATION
        assert MAX_ALLOWED_SESSION_DURATION == 14400

    def test_tokens_issued_at_different_times_differ(self, issuer_config):
        now = int(time.time())
        with patch("time.time", return_value=now):
            first = mint_access_token(issuer_config, "alice", "r1")
        with patch("time.time", return_value=now + 1):
            second = mint_access_token(issuer_config, "alice", "r1")

        assert first != second
        first_payload, second_payload = decode(first), decode(second)
        assert first_payload["grants"] == second_payload["grants"]
        assert second_payload["exp"] == first_payload["exp"] + 1
