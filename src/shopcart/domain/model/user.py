"""Shop users.

Shoppers and administrators are the same record; the ``role`` field
tells them apart.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Role(Enum):
    USER = "User"
    ADMIN = "Admin"


@dataclass(frozen=True)
class User:
    username: str = "guest"
    email: str = ""
    role: Role = Role.USER

    @property
    def can_manage_catalog(self) -> bool:
        """Only administrators may change prices and stock levels."""
        return self.role is Role.ADMIN
