"""
Session Service
Login/logout, the page guard and profile settings for the single local session.
"""
import logging
from dataclasses import dataclass
from typing import Optional, Union

from hospital_dashboard.exceptions import InvalidCredentials, NotFound, PasswordMismatch, StorageUnavailable
from hospital_dashboard.models import Session
from hospital_dashboard.models.base import text
from hospital_dashboard.utils.permissions import Action, can_perform, permissions_for
from .repositories import UserRepository
from .store import Store, SESSION_KEY

logger = logging.getLogger(__name__)

LOGIN_PAGE = 'login'
HOME_PAGE = 'dashboard'
AUTH_PAGES = ('login', 'register', 'forgot_password')

PAGE_TITLES = {
    'login': 'Login',
    'register': 'Register',
    'forgot_password': 'Forgot Password',
    'dashboard': 'Dashboard',
    'patients': 'Patient Records',
    'appointments': 'Appointments Schedule',
    'analytics': 'Hospital Analytics',
    'settings': 'Settings',
    'help': 'Help & Support',
}


@dataclass(frozen=True)
class Continue:
    pass


@dataclass(frozen=True)
class RedirectTo:
    target: str


GuardResult = Union[Continue, RedirectTo]


def user_initials(full_name: str, username: str = '') -> str:
    """Avatar initials: first letter of the first and last name parts."""
    parts = (full_name or username or '').split()
    initials = ''
    if parts:
        initials += parts[0][:1].upper()
        if len(parts) > 1:
            initials += parts[-1][:1].upper()
    if not initials and username:
        initials = username[:1].upper()
    return initials or 'US'


class SessionService:
    def __init__(self, store: Store):
        self.store = store
        self.users = UserRepository(store)

    def current_session(self) -> Optional[Session]:
        return Session.from_dict(self.store.get(SESSION_KEY, None))

    def login(self, username: str, password: str) -> Session:
        """
        Authenticate against the stored users and persist the session.
        The error does not say which of the two fields was wrong.
        """
        user = self.users.find_by_credentials(text(username), text(password))
        if user is None:
            logger.info('Failed login attempt for "%s"', text(username))
            raise InvalidCredentials()
        session = user.to_session()
        self._write(session)
        logger.info('User %s logged in', session.username)
        return session

    def logout(self) -> None:
        self.store.set(SESSION_KEY, None)

    def require_auth(self, page_kind: str) -> GuardResult:
        """Page guard; must run before any other page logic."""
        session = self.current_session()
        is_auth_page = page_kind in AUTH_PAGES
        if session is None and not is_auth_page:
            return RedirectTo(LOGIN_PAGE)
        if session is not None and is_auth_page:
            return RedirectTo(HOME_PAGE)
        return Continue()

    def page_context(self, page_kind: str) -> dict:
        """Everything a page needs to render its chrome for the current user."""
        session = self.current_session()
        context = {
            'page': page_kind,
            'title': PAGE_TITLES.get(page_kind, PAGE_TITLES[HOME_PAGE]),
            'user': None,
            'permissions': {},
            'showAnalyticsLink': False,
        }
        if session is not None:
            context['user'] = {
                **session.to_dict(),
                'displayName': session.display_name,
                'initials': user_initials(session.full_name, session.username),
            }
            context['permissions'] = permissions_for(session.role)
            context['showAnalyticsLink'] = can_perform(session.role, Action.VIEW_ANALYTICS)
        return context

    def update_profile(self, full_name: Optional[str], new_password: str = '', confirm_password: str = '') -> Session:
        """``full_name`` of None keeps the current name."""
        session = self.current_session()
        if session is None:
            raise NotFound('Error: User not found for update.')
        if full_name is None:
            full_name = session.full_name
        new_password = text(new_password)
        if new_password and new_password != text(confirm_password):
            raise PasswordMismatch()
        user = self.users.update_profile(session.username, full_name, new_password)
        refreshed = user.to_session()
        self._write(refreshed)
        return refreshed

    def recover_password(self, username: str) -> str:
        """Demo-grade recovery: hands back the stored password."""
        user = self.users.find(text(username))
        if user is None:
            raise NotFound('Username not found. Please check the username and try again.')
        return user.password

    def _write(self, session: Session) -> None:
        if not self.store.set(SESSION_KEY, session.to_dict()):
            raise StorageUnavailable()
