"""Unit tests for the session domain."""

import base64
from datetime import timedelta
from unittest.mock import MagicMock

import pytest

from domain.session.core.entities.session import Session
from domain.session.core.value_objects import SESSION_DURATION_DAYS, ExpiresAt, SessionId
from domain.shared.errors import InvalidSessionIdError, SessionExpiredError
from domain.shared.value_objects import UserId


class TestSessionId:
    def test_generate_is_44_char_urlsafe_token(self):
        session_id = SessionId.generate()

        assert len(session_id.value) == 44
        assert len(base64.urlsafe_b64decode(session_id.value)) == 32

    def test_generate_is_unique(self):
        assert SessionId.generate() != SessionId.generate()

    def test_parse_generated(self):
        session_id = SessionId.generate()

        assert SessionId.parse(session_id.value) == session_id

    @pytest.mark.parametrize(
        "raw",
        [
            "",
            "c2hvcnQ=",
            base64.urlsafe_b64encode(b"x" * 31).decode(),
            base64.urlsafe_b64encode(b"x" * 33).decode(),
            base64.b64encode(b"\xff" * 32).decode(),
            "not base64 at all!!",
        ],
    )
    def test_parse_rejects(self, raw):
        with pytest.raises(InvalidSessionIdError):
            SessionId.parse(raw)

    def test_repr_hides_token(self):
        session_id = SessionId.generate()

        assert session_id.value not in repr(session_id)


class TestExpiresAt:
    def test_issue_is_seven_days_ahead(self, clock):
        assert ExpiresAt.issue(clock).value == clock.now() + timedelta(days=SESSION_DURATION_DAYS)

    def test_ensure_not_expired(self, clock):
        expires_at = ExpiresAt.issue(clock)

        expires_at.ensure_not_expired(clock.advanced(days=7))
        with pytest.raises(SessionExpiredError):
            expires_at.ensure_not_expired(clock.advanced(days=7, seconds=1))


class TestSession:
    @pytest.fixture
    def session(self, clock) -> Session:
        return Session.create(UserId.generate(), clock=clock)

    def test_create(self, session, clock):
        assert session.created_at == clock.now()
        assert session.expires_at.value == clock.now() + timedelta(days=7)

    def test_create_reads_clock_once(self, clock):
        ticking = MagicMock()
        ticking.now.side_effect = [clock.now() + timedelta(microseconds=i) for i in range(3)]

        session = Session.create(UserId.generate(), clock=ticking)

        assert ticking.now.call_count == 1
        assert session.expires_at.value - session.created_at == timedelta(days=7)

    def test_valid_until_exact_expiry(self, session, clock):
        assert not session.is_expired(clock)
        assert not session.is_expired(clock.advanced(days=7))

    def test_expired_one_second_after(self, session, clock):
        later = clock.advanced(days=7, seconds=1)

        assert session.is_expired(later)
        with pytest.raises(SessionExpiredError):
            session.ensure_not_expired(later)

    def test_reconstruct(self, session):
        rebuilt = Session.reconstruct(
            id=session.id.value,
            user_id=session.user_id.value,
            expires_at=session.expires_at.value,
            created_at=session.created_at,
        )

        assert rebuilt == session
        assert rebuilt.user_id == session.user_id
        assert rebuilt.expires_at == session.expires_at

    def test_reconstruct_rejects_corrupt_id(self, session):
        with pytest.raises(InvalidSessionIdError):
            Session.reconstruct(
                id="corrupted",
                user_id=session.user_id.value,
                expires_at=session.expires_at.value,
                created_at=session.created_at,
            )
