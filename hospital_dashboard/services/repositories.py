"""
Record Repositories
CRUD over one store collection each. Store order is insertion order.
"""
import logging
import time
from typing import Callable, Generic, List, Optional, Type, TypeVar

from hospital_dashboard.exceptions import (
    DuplicateId,
    DuplicateUsername,
    InvalidFormat,
    NotFound,
    StorageUnavailable,
)
from hospital_dashboard.models import User, Patient, Appointment
from hospital_dashboard.models.base import text
from .store import Store, USERS_KEY, PATIENTS_KEY, APPOINTMENTS_KEY, APPOINTMENT_SEQ_KEY

logger = logging.getLogger(__name__)

T = TypeVar('T')


class Repository(Generic[T]):
    """Generic CRUD over the collection stored under ``key``."""

    key: str = ''
    record_type: Type = None
    label: str = 'Record'

    def __init__(self, store: Store):
        self.store = store

    # --- reads ---

    def _load(self) -> List[T]:
        raw = self.store.get(self.key, [])
        if not isinstance(raw, list):
            logger.warning('Store item "%s" is not a list; treating it as empty', self.key)
            return []
        records = []
        for item in raw:
            if isinstance(item, dict):
                records.append(self.record_type.from_dict(item))
            else:
                logger.warning('Skipping malformed %s entry in "%s"', self.label.lower(), self.key)
        return records

    def _save(self, records: List[T]) -> None:
        if not self.store.set(self.key, [r.to_dict() for r in records]):
            raise StorageUnavailable()

    def list(self) -> List[T]:
        return self._load()

    def find(self, record_id: str) -> Optional[T]:
        for record in self._load():
            if record.id == record_id:
                return record
        return None

    def count(self) -> int:
        return len(self._load())

    # --- writes ---

    def create(self, record: T) -> T:
        records = self._load()
        if any(r.id == record.id for r in records):
            raise DuplicateId(f'{self.label} ID already exists! Please use a unique ID.')
        record.validate()
        records.append(record)
        self._save(records)
        logger.info('%s %s created', self.label, record.id)
        return record

    def update(self, record_id: str, record: T) -> T:
        """Replace the whole record stored under ``record_id``."""
        if record.id != record_id:
            raise InvalidFormat(f'{self.label} ID cannot be changed')
        record.validate()
        records = self._load()
        for index, existing in enumerate(records):
            if existing.id == record_id:
                records[index] = record
                self._save(records)
                logger.info('%s %s updated', self.label, record_id)
                return record
        raise NotFound(f'{self.label} not found for update.')

    def delete(self, record_id: str) -> None:
        records = self._load()
        remaining = [r for r in records if r.id != record_id]
        if len(remaining) == len(records):
            raise NotFound(f'{self.label} not found for deletion.')
        self._save(remaining)
        logger.info('%s %s deleted', self.label, record_id)


class UserRepository(Repository[User]):
    key = USERS_KEY
    record_type = User
    label = 'User'

    @staticmethod
    def full_name_from_username(username: str) -> str:
        """'john.doe' -> 'John Doe'"""
        return ' '.join(part[:1].upper() + part[1:] for part in username.split('.'))

    @staticmethod
    def is_valid_username(username: str) -> bool:
        parts = username.split('.')
        return len(parts) >= 2 and all(parts)

    def register(self, username: str, password: str, role: str) -> User:
        username = text(username)
        password = text(password)
        if not self.is_valid_username(username):
            raise InvalidFormat('Username format should be like first.last')
        if self.find(username) is not None:
            raise DuplicateUsername()

        user = User(
            username=username,
            password=password,
            role=text(role),
            full_name=self.full_name_from_username(username),
        )
        user.validate()
        records = self._load()
        records.append(user)
        self._save(records)
        logger.info('Registered user %s (%s)', user.username, user.role)
        return user

    def create(self, record: User) -> User:
        if self.find(record.username) is not None:
            raise DuplicateUsername()
        return super().create(record)

    def find_by_credentials(self, username: str, password: str) -> Optional[User]:
        for user in self._load():
            if user.username == username and user.password == password:
                return user
        return None

    def update_profile(self, username: str, full_name: str, new_password: str = '') -> User:
        user = self.find(username)
        if user is None:
            raise NotFound('Error: User not found for update.')
        user.full_name = text(full_name)
        if new_password:
            user.password = new_password
        return self.update(username, user)


class PatientRepository(Repository[Patient]):
    key = PATIENTS_KEY
    record_type = Patient
    label = 'Patient'


class AppointmentRepository(Repository[Appointment]):
    key = APPOINTMENTS_KEY
    record_type = Appointment
    label = 'Appointment'

    def __init__(self, store: Store, clock: Callable[[], float] = time.time):
        super().__init__(store)
        self._clock = clock

    @staticmethod
    def _id_number(appointment_id: str) -> int:
        prefix, _, number = appointment_id.partition('-')
        if prefix == 'A' and number.isdigit():
            return int(number)
        return 0

    def _high_water(self, records: List[Appointment]) -> int:
        stored = self.store.get(APPOINTMENT_SEQ_KEY, 0)
        if not isinstance(stored, int):
            stored = 0
        return max([stored] + [self._id_number(r.id) for r in records])

    def next_id(self, records: List[Appointment]) -> str:
        """
        Time-derived id ('A-<millis>'), above every id issued so far.

        The highest number issued is persisted under ``appointmentSeq`` so
        deleting the newest appointment never frees its id for reuse.
        """
        token = max(int(self._clock() * 1000), self._high_water(records) + 1)
        if not self.store.set(APPOINTMENT_SEQ_KEY, token):
            raise StorageUnavailable()
        return f"A-{token}"

    def create(self, record: Appointment) -> Appointment:
        """Assign a fresh id to ``record`` and append it."""
        record.validate()
        records = self._load()
        record.id = self.next_id(records)
        records.append(record)
        self._save(records)
        logger.info('Appointment %s scheduled for %s', record.id, record.date)
        return record

    def reschedule(self, record_id: str, start: str) -> Appointment:
        """
        Move an appointment to ``start`` (YYYY-MM-DD or YYYY-MM-DDTHH:MM[:SS]).
        The time is only changed when ``start`` carries one.
        """
        start = text(start)
        new_date, _, new_time = start.partition('T')
        appointment = self.find(record_id)
        if appointment is None:
            raise NotFound('Appointment not found.')
        appointment.date = new_date
        if new_time:
            appointment.time = new_time[:5]
        return self.update(record_id, appointment)
