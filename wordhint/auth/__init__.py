from .passwords import hash_password, verify_password
from .tokens import TokenSigner
from .users import User, UserStore
from .gate import AuthGate, bearer_token

__all__ = [
    "hash_password",
    "verify_password",
    "TokenSigner",
    "User",
    "UserStore",
    "AuthGate",
    "bearer_token",
]
