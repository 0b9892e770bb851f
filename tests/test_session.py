import pytest

from hospital_dashboard.exceptions import InvalidCredentials, NotFound, PasswordMismatch
from hospital_dashboard.models import Session
from hospital_dashboard.services.session_service import (
    SessionService,
    Continue,
    RedirectTo,
    user_initials,
)
from hospital_dashboard.services.store import SESSION_KEY, USERS_KEY


@pytest.fixture
def service(store, users):
    return SessionService(store)


def test_login_persists_projected_session(service, store):
    session = service.login('emily.white', 'password123')
    assert session == Session('emily.white', 'Doctor', 'Dr. Emily White')
    stored = store.get(SESSION_KEY, None)
    assert stored == {'username': 'emily.white', 'role': 'Doctor', 'fullName': 'Dr. Emily White'}
    assert 'password' not in stored


def test_login_with_wrong_password(service, store):
    with pytest.raises(InvalidCredentials) as excinfo:
        service.login('admin', 'wrong')
    assert excinfo.value.message == 'Invalid username or password.'
    assert service.current_session() is None


def test_login_with_unknown_user_gives_same_error(service):
    with pytest.raises(InvalidCredentials) as excinfo:
        service.login('nobody.here', 'admin123')
    assert excinfo.value.message == 'Invalid username or password.'


def test_failed_login_keeps_existing_session(service):
    service.login('admin', 'admin123')
    with pytest.raises(InvalidCredentials):
        service.login('john.doe', 'nope')
    assert service.current_session().username == 'admin'


def test_logout_clears_session(service, store):
    service.login('admin', 'admin123')
    service.logout()
    assert service.current_session() is None
    assert store.raw(SESSION_KEY) == 'null'


def test_corrupt_session_reads_as_logged_out(service, store):
    store.set(SESSION_KEY, {'username': 'admin'})
    assert service.current_session() is None


@pytest.mark.parametrize('page_kind', ['dashboard', 'patients', 'appointments', 'analytics', 'settings', 'help'])
def test_guard_sends_anonymous_users_to_login(service, page_kind):
    assert service.require_auth(page_kind) == RedirectTo('login')


@pytest.mark.parametrize('page_kind', ['login', 'register', 'forgot_password'])
def test_guard_lets_anonymous_users_reach_auth_pages(service, page_kind):
    assert service.require_auth(page_kind) == Continue()


@pytest.mark.parametrize('page_kind', ['login', 'register', 'forgot_password'])
def test_guard_sends_logged_in_users_home(service, page_kind):
    service.login('john.doe', 'password123')
    assert service.require_auth(page_kind) == RedirectTo('dashboard')


def test_guard_continues_for_logged_in_users(service):
    service.login('john.doe', 'password123')
    assert service.require_auth('patients') == Continue()


def test_page_context_for_doctor(service):
    service.login('emily.white', 'password123')
    context = service.page_context('patients')
    assert context['title'] == 'Patient Records'
    assert context['user']['displayName'] == 'Dr. Emily White'
    assert context['user']['initials'] == 'DW'
    assert context['permissions']['deletePatient'] is False
    assert context['permissions']['editPatient'] is True
    assert context['showAnalyticsLink'] is True


def test_page_context_hides_analytics_for_nurse(service):
    service.login('john.doe', 'password123')
    context = service.page_context('dashboard')
    assert context['showAnalyticsLink'] is False
    assert context['permissions']['deletePatient'] is False
    assert context['permissions']['scheduleAppointment'] is True


def test_page_context_without_session(service):
    context = service.page_context('login')
    assert context['user'] is None
    assert context['permissions'] == {}


def test_update_profile_refreshes_session(service, store):
    service.login('john.doe', 'password123')
    session = service.update_profile('John Doe', 'better', 'better')
    assert session.full_name == 'John Doe'
    assert service.current_session().full_name == 'John Doe'
    users = {u['username']: u for u in store.get(USERS_KEY)}
    assert users['john.doe']['password'] == 'better'


def test_update_profile_rejects_mismatched_passwords(service, store):
    service.login('john.doe', 'password123')
    before = store.raw(USERS_KEY)
    with pytest.raises(PasswordMismatch):
        service.update_profile('John Doe', 'one', 'two')
    assert store.raw(USERS_KEY) == before


def test_update_profile_name_only(service):
    service.login('admin', 'admin123')
    service.update_profile('Head Admin')
    service.logout()
    assert service.login('admin', 'admin123').full_name == 'Head Admin'


def test_update_profile_needs_session(service):
    with pytest.raises(NotFound):
        service.update_profile('Someone')


def test_recover_password(service):
    assert service.recover_password('emily.white') == 'password123'
    with pytest.raises(NotFound):
        service.recover_password('ghost.user')


@pytest.mark.parametrize('full_name, username, expected', [
    ('John Doe, RN', 'john.doe', 'JR'),
    ('System Admin', 'admin', 'SA'),
    ('Cher', 'cher', 'C'),
    ('', 'admin', 'A'),
    ('', '', 'US'),
])
def test_user_initials(full_name, username, expected):
    assert user_initials(full_name, username) == expected


def test_update_profile_without_name_keeps_it(service):
    service.login('john.doe', 'password123')
    session = service.update_profile(None, 'x1', 'x1')
    assert session.full_name == 'John Doe, RN'
