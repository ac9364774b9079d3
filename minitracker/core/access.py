"""
List access control.

Every read or write of a list, one of its items, or an item's metadata is
decided here from three facts: the list's owner, its public flag, and who is
asking. Items and metadata are first resolved to their parent list (see
services.access_service) so there is one ownership rule for all three.
"""

from dataclasses import dataclass
from enum import Enum

from minitracker.core.errors import Forbidden


@dataclass(frozen=True)
class Identity:
    """Who is asking. user_id is None for anonymous callers."""

    user_id: int | None = None
    is_admin: bool = False

    @property
    def is_authenticated(self) -> bool:
        return self.user_id is not None


ANONYMOUS = Identity()


class AccessDecision(str, Enum):
    OWNER = "owner"
    PUBLIC_READ = "public_read"
    DENIED = "denied"


def decide_access(owner_id: int, is_public: bool, requester_id: int | None) -> AccessDecision:
    """Owner beats public; anonymous requesters are never the owner."""
    if requester_id is not None and requester_id == owner_id:
        return AccessDecision.OWNER
    if is_public:
        return AccessDecision.PUBLIC_READ
    return AccessDecision.DENIED


def can_read(decision: AccessDecision) -> bool:
    return decision in (AccessDecision.OWNER, AccessDecision.PUBLIC_READ)


def can_write(decision: AccessDecision) -> bool:
    return decision is AccessDecision.OWNER


def require_read(decision: AccessDecision, message: str = "Access denied. This list is private.") -> None:
    if not can_read(decision):
        raise Forbidden(message)


def require_write(
    decision: AccessDecision, message: str = "Access denied. You can only modify your own lists."
) -> None:
    if not can_write(decision):
        raise Forbidden(message)
