"""Ownership references and the single place where they are compared."""

import logging
from dataclasses import dataclass
from typing import Any

from app.core.errors import AuthorizationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OwnerId:
    """
    Canonical form of a user reference.

    Ids reach us as ints from the ORM and as strings from token claims and
    path parameters; both are reduced to their string form so that
    OwnerId.of(5) == OwnerId.of("5").
    """

    value: str

    @classmethod
    def of(cls, raw: Any) -> "OwnerId":
        if raw is None:
            raise ValueError("owner reference must not be None")
        value = str(raw).strip()
        if not value:
            raise ValueError("owner reference must not be empty")
        return cls(value)

    def __str__(self) -> str:
        return self.value


def owns(owner: OwnerId, resource: Any) -> bool:
    """True if resource.user_id refers to owner."""
    stored = getattr(resource, "user_id", None)
    if stored is None:
        return False
    return OwnerId.of(stored) == owner


def ensure_owner(owner: OwnerId, resource: Any, action: str, kind: str) -> None:
    """Raise AuthorizationError unless owner owns resource."""
    if owns(owner, resource):
        return
    logger.warning(
        "Ownership check failed",
        extra={
            "kind": kind,
            "action": action,
            "resource_id": getattr(resource, "id", None),
            "caller_id": owner.value,
        },
    )
    raise AuthorizationError(
        f"Current user with ID: {owner} is not authorised to {action} the {kind}."
    )
