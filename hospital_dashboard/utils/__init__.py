from .permissions import Action, can_perform, permissions_for, DENIAL_MESSAGES

# Route decorators live in .decorators; they depend on the services package,
# which itself imports this package, so they are not re-exported here.

__all__ = [
    # Authorization policy
    "Action",
    "can_perform",
    "permissions_for",
    "DENIAL_MESSAGES",
]
