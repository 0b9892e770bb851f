from dataclasses import dataclass, field
from typing import Any, Dict

from .base import text, split_extra, require_fields, require_choice
from .session import Session

# Possible values for User.role
ROLES = ('Administrator', 'Doctor', 'Nurse')

_FIELDS = ('username', 'password', 'role', 'fullName')


@dataclass
class User:
    username: str
    password: str
    role: str
    full_name: str = ''
    extra: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @property
    def id(self):
        return self.username

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'User':
        return cls(
            username=text(data.get('username')),
            password=text(data.get('password')),
            role=text(data.get('role')),
            full_name=text(data.get('fullName')),
            extra=split_extra(data, _FIELDS),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            **self.extra,
            'username': self.username,
            'password': self.password,
            'role': self.role,
            'fullName': self.full_name,
        }

    def validate(self):
        require_fields('User', [
            ('username', self.username),
            ('password', self.password),
            ('role', self.role),
        ])
        require_choice('role', self.role, ROLES)

    def to_session(self) -> Session:
        """Project the user onto the fields kept for the logged-in session."""
        return Session(username=self.username, role=self.role, full_name=self.full_name)

    def __repr__(self):
        return f"<User {self.username} ({self.full_name}) - {self.role}>"
