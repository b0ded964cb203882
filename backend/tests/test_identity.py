# tests/test_identity.py
"""
Unit tests for the Identity model built by the access gate.

Tests do NOT require a database.
"""
from __future__ import annotations

import pytest

from app.auth.identity import Identity
from app.core.security import TokenClaims


def _claims(role: str = "employee") -> TokenClaims:
    return TokenClaims(subject_id="u-42", email="ann@example.com", role=role, issued_at=100, expires_at=200)


def test_unauthenticated_identity():
    identity = Identity.unauthenticated()

    assert identity.user_id is None
    assert identity.email is None
    assert identity.role is None
    assert identity.is_authenticated is False
    assert identity.has_role("employee") is False


def test_identity_from_claims():
    identity = Identity.from_claims(_claims())

    assert identity.user_id == "u-42"
    assert identity.email == "ann@example.com"
    assert identity.role == "employee"
    assert identity.is_authenticated is True
    assert identity.expires_at == 200


def test_has_role():
    identity = Identity.from_claims(_claims(role="employer"))

    assert identity.has_role("employer") is True
    assert identity.has_role("employee", "employer") is True
    assert identity.has_role("employee") is False
    assert identity.has_role() is False


def test_to_debug_dict_has_no_token_data():
    debug = Identity.from_claims(_claims()).to_debug_dict()

    assert debug == {
        "user_id": "u-42",
        "email": "ann@example.com",
        "role": "employee",
        "is_authenticated": True,
    }


def test_identity_is_frozen():
    identity = Identity.from_claims(_claims())

    with pytest.raises(Exception):
        identity.role = "employer"  # type: ignore[misc]
