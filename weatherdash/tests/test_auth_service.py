from datetime import datetime, timedelta

import pytest

from weatherdash.services.auth_service import AuthError, AuthService
from weatherdash.utils.scheduler import cleanup_expired_tokens


class FakeClock:
    def __init__(self):
        self.now = datetime(2024, 1, 1, 10, 0, 0)

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += timedelta(seconds=seconds)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def service(clock):
    return AuthService(token_ttl_seconds=60, clock=clock)


def test_password_is_hashed(service):
    user = service.register("Jane", "jane@example.com", "correct-horse")

    assert user.password_hash != "correct-horse"
    assert service.authenticate("JANE@example.com", "correct-horse") is user


def test_ids_are_sequential(service):
    first = service.register("A", "a@example.com", "password1")
    second = service.register("B", "b@example.com", "password2")

    assert (first.id, second.id) == (1, 2)


def test_token_expires(service, clock):
    user = service.register("Jane", "jane@example.com", "correct-horse")
    token = service.issue_token(user)

    assert service.resolve(token) is user

    clock.advance(60)
    with pytest.raises(AuthError):
        service.resolve(token)


def test_purge_expired(service, clock):
    user = service.register("Jane", "jane@example.com", "correct-horse")
    service.issue_token(user)
    clock.advance(30)
    fresh = service.issue_token(user)
    clock.advance(30)

    assert service.purge_expired() == 1
    assert service.token_count() == 1
    assert service.resolve(fresh) is user


def test_cleanup_job(service, clock):
    user = service.register("Jane", "jane@example.com", "correct-horse")
    service.issue_token(user)
    clock.advance(120)

    assert cleanup_expired_tokens(service) == 1
    assert service.token_count() == 0


def test_revoke(service):
    user = service.register("Jane", "jane@example.com", "correct-horse")
    token = service.issue_token(user)

    assert service.revoke(token) is True
    assert service.revoke(token) is False


def test_duplicate_email_is_rejected_on_register(service):
    service.register("Jane", "jane@example.com", "correct-horse")

    with pytest.raises(AuthError) as exc:
        service.register("Other", "JANE@example.com", "another-pass")

    assert exc.value.error_type == "email_taken"
    assert exc.value.status == 422
