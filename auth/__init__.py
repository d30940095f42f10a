"""Password hashing and bearer-token helpers.

Auth is stateless: a successful register/login returns an HS256 JWT whose
``sub`` is the user id. Clients send it back as ``Authorization: Bearer <token>``.
"""

from .security import create_access_token, decode_access_token, hash_password, verify_password

__all__ = [
    "create_access_token",
    "decode_access_token",
    "hash_password",
    "verify_password",
]
