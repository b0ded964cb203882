from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt

from app.core.errors import InvalidToken
from app.core.security import (
    TokenConfig,
    build_claims,
    create_access_token,
    decode_access_token,
    encode_token,
    hash_password,
    verify_password,
)

NOW = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture()
def config():
    return TokenConfig(secret="unit-test-secret", algorithm="HS256", expire_minutes=60)


# ---------------------------------------------------------------------------
# Passwords
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("password", ["pw123456", "correct horse battery staple", "ünïcødé-p@ss"])
def test_password_round_trip(password):
    hashed = hash_password(password)
    assert hashed != password
    assert verify_password(password, hashed) is True
    assert verify_password(password + "x", hashed) is False


def test_hash_is_salted():
    assert hash_password("same-password") != hash_password("same-password")


def test_hash_is_bcrypt():
    assert hash_password("pw123456").startswith("$2")


def test_verify_password_rejects_missing_or_garbage_hash():
    assert verify_password("pw123456", None) is False
    assert verify_password("pw123456", "") is False
    assert verify_password("pw123456", "not-a-hash") is False


# ---------------------------------------------------------------------------
# Tokens
# ---------------------------------------------------------------------------


def test_token_round_trip_reproduces_claims(config):
    claims = build_claims(config, subject_id="u1", email="a@x.com", role="employee", now=NOW)
    token = encode_token(config, claims)

    decoded = decode_access_token(config, token, now=NOW + timedelta(minutes=5))
    assert decoded == claims
    assert decoded.expires_at - decoded.issued_at == 60 * 60


def test_token_payload_shape(config):
    token = create_access_token(config, subject_id="u1", email="a@x.com", role="employer", now=NOW)
    payload = jwt.get_unverified_claims(token)
    assert payload == {
        "sub": "u1",
        "email": "a@x.com",
        "role": "employer",
        "iat": int(NOW.timestamp()),
        "exp": int((NOW + timedelta(hours=1)).timestamp()),
    }


def test_expired_token_is_invalid(config):
    token = create_access_token(config, subject_id="u1", email="a@x.com", role="employee", now=NOW)

    with pytest.raises(InvalidToken):
        decode_access_token(config, token, now=NOW + timedelta(hours=1))
    with pytest.raises(InvalidToken):
        decode_access_token(config, token, now=NOW + timedelta(days=30))


def test_token_expired_against_real_clock(config):
    long_ago = datetime.now(timezone.utc) - timedelta(days=2)
    token = create_access_token(config, subject_id="u1", email="a@x.com", role="employee", now=long_ago)
    with pytest.raises(InvalidToken):
        decode_access_token(config, token)


def test_tampered_signature_is_invalid(config):
    token = create_access_token(config, subject_id="u1", email="a@x.com", role="employee", now=NOW)
    header, payload, signature = token.split(".")
    flipped = ("A" if signature[0] != "A" else "B") + signature[1:]

    with pytest.raises(InvalidToken):
        decode_access_token(config, f"{header}.{payload}.{flipped}", now=NOW)


def test_forged_role_is_invalid(config):
    forged = jwt.encode(
        {"sub": "u1", "email": "a@x.com", "role": "employer", "iat": 1, "exp": 4102444800},
        "some-other-secret",
        algorithm="HS256",
    )
    with pytest.raises(InvalidToken):
        decode_access_token(config, forged, now=NOW)


@pytest.mark.parametrize("token", ["", "garbage", "a.b.c", "Bearer x.y.z"])
def test_malformed_token_is_invalid(config, token):
    with pytest.raises(InvalidToken):
        decode_access_token(config, token, now=NOW)


def test_token_missing_claim_is_invalid(config):
    token = jwt.encode({"sub": "u1", "exp": 4102444800, "iat": 1}, config.secret, algorithm="HS256")
    with pytest.raises(InvalidToken):
        decode_access_token(config, token, now=NOW)


def test_expired_and_tampered_share_one_message(config):
    expired = create_access_token(config, subject_id="u1", email="a@x.com", role="employee", now=NOW)
    messages = set()
    for token, now in ((expired, NOW + timedelta(days=1)), ("x.y.z", NOW)):
        with pytest.raises(InvalidToken) as exc_info:
            decode_access_token(config, token, now=now)
        messages.add(exc_info.value.message)
    assert messages == {"Invalid token"}


def test_token_config_is_immutable(config):
    with pytest.raises(Exception):
        config.secret = "changed"  # type: ignore[misc]
