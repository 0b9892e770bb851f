from dataclasses import dataclass
from typing import Any, Dict, Optional

from .base import text


@dataclass(frozen=True)
class Session:
    """The currently authenticated user, as persisted under ``loggedInUser``."""
    username: str
    role: str
    full_name: str = ''

    @classmethod
    def from_dict(cls, data: Any) -> Optional['Session']:
        """Return None for a cleared or unreadable session record."""
        if not isinstance(data, dict):
            return None
        username = text(data.get('username'))
        role = text(data.get('role'))
        if not username or not role:
            return None
        return cls(username=username, role=role, full_name=text(data.get('fullName')))

    def to_dict(self) -> Dict[str, Any]:
        return {
            'username': self.username,
            'role': self.role,
            'fullName': self.full_name,
        }

    @property
    def display_name(self) -> str:
        return self.full_name or self.username
