"""
Persistent Store
Key/value persistence of whole collections as JSON documents.
Reads never fail: a missing or unreadable key yields the caller's default.
"""
import copy
import json
import logging
from typing import Any

from sqlalchemy.exc import SQLAlchemyError

from hospital_dashboard.extensions import db
from hospital_dashboard.models import StoreEntry

logger = logging.getLogger(__name__)

# Logical keys
USERS_KEY = 'users'
PATIENTS_KEY = 'patients'
APPOINTMENTS_KEY = 'appointments'
SESSION_KEY = 'loggedInUser'
# Highest appointment id number ever issued
APPOINTMENT_SEQ_KEY = 'appointmentSeq'

_EMPTY_LIST = object()


class Store:
    """
    JSON-document store over the ``store_entries`` table.

    Each key is written independently; there are no cross-key transactions.
    Concurrent writers on one database file are last-writer-wins.
    """

    def __init__(self, session=None):
        self.session = session or db.session

    def get(self, key: str, default: Any = _EMPTY_LIST) -> Any:
        """
        Return the deserialized value for ``key``.

        Missing keys, malformed JSON and database errors all return ``default``
        (an empty list when not given).
        """
        if default is _EMPTY_LIST:
            default = []
        try:
            entry = self.session.get(StoreEntry, key)
        except SQLAlchemyError as e:
            logger.error('Error reading store item "%s": %s', key, e)
            self.session.rollback()
            return copy.deepcopy(default)

        if entry is None:
            return copy.deepcopy(default)

        try:
            return json.loads(entry.value)
        except (TypeError, ValueError) as e:
            logger.error('Error parsing store item "%s": %s', key, e)
            return copy.deepcopy(default)

    def set(self, key: str, value: Any) -> bool:
        """
        Serialize ``value`` and overwrite ``key``.

        Returns False (and leaves the prior value in place) when the value is
        not JSON-serializable or the write fails.
        """
        try:
            payload = json.dumps(value)
        except (TypeError, ValueError) as e:
            logger.error('Error serializing store item "%s": %s', key, e)
            return False

        try:
            entry = self.session.get(StoreEntry, key)
            if entry is None:
                self.session.add(StoreEntry(key=key, value=payload))
            else:
                entry.value = payload
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error('Error setting store item "%s": %s', key, e)
            return False
        return True

    def delete(self, key: str) -> bool:
        try:
            entry = self.session.get(StoreEntry, key)
            if entry is not None:
                self.session.delete(entry)
                self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error('Error deleting store item "%s": %s', key, e)
            return False
        return True

    def raw(self, key: str):
        """Stored JSON text for ``key`` (None when absent)."""
        entry = self.session.get(StoreEntry, key)
        return entry.value if entry is not None else None


def get_store() -> Store:
    """Store bound to the current application's database session."""
    return Store(db.session)
