# app/auth/__init__.py
"""
Authentication modules for the job board API.

This package contains:
- identity.py: Canonical authenticated identity model attached to each request
"""
from app.auth.identity import Identity

__all__ = ["Identity"]
