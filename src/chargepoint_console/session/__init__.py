"""Session module: identity of the console user."""

from .cache import IdentityCache, get_current_user, get_identity_cache
from .roles import UNKNOWN_ROLE_LABEL, ApiRole, role_label
from .schemas import SessionIdentity

__all__ = [
    "UNKNOWN_ROLE_LABEL",
    "ApiRole",
    "IdentityCache",
    "SessionIdentity",
    "get_current_user",
    "get_identity_cache",
    "role_label",
]
