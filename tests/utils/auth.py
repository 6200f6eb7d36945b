"""Helpers that stand in for the identity provider in tests."""

from heathen_index.core.authentication import create_access_token


def make_token(sub: str = "user-1", **claims: str) -> str:
    """Issue a signed token for ``sub`` with optional profile claims."""
    return create_access_token({"sub": sub, **claims})


def auth_headers(sub: str = "user-1", **claims: str) -> dict[str, str]:
    """Authorization header for a request made as ``sub``."""
    return {"Authorization": f"Bearer {make_token(sub, **claims)}"}
