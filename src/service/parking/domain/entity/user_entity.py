from enum import StrEnum
from typing import Optional

import attrs

from src.platform.exception.exceptions import DomainError


class KnownRole(StrEnum):
    """Roles the campus issues today; the role column itself is free text."""

    STUDENT = 'student'
    STAFF = 'staff'
    VISITOR = 'visitor'
    SECURITY = 'security'


@attrs.define
class UserEntity:
    name: str
    role: str
    id: Optional[int] = None

    @classmethod
    def create(cls, *, name: str, role: str) -> 'UserEntity':
        name, role = (name or '').strip(), (role or '').strip()
        if not name or not role:
            raise DomainError('name and role required')
        return cls(name=name, role=role)
