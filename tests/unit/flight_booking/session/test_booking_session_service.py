import re
from unittest.mock import MagicMock

import pytest

from flight_booking.booking.domain import BookingState, BookingStep
from flight_booking.session.applications import BookingSessionService
from flight_booking.session.domain import SessionRecord
from flight_booking.session.infrastructure import KeyValueSessionStore
from flight_booking.shared.domain import (
    SessionId,
    SessionNotFoundException,
    SessionNotInitializedException,
    SessionPersistenceException,
)

SESSION_ID = SessionId("session_1767225600000_abcdefghijklm")


@pytest.fixture
def mock_store():
    return MagicMock()


@pytest.fixture
def state():
    return BookingState()


@pytest.fixture
def service(mock_store, state):
    return BookingSessionService(store=mock_store, state=state)


class TestBookingSessionService:
    def test_initialize_session_assigns_new_id(self, service, state):
        session_id = service.initialize_session()

        assert re.match(r"^session_\d+_[a-z0-9]{13}$", session_id.value)
        assert state.session_id == session_id

    def test_save_session_initializes_when_needed(self, service, mock_store, state):
        session_id = service.save_session()

        assert state.session_id == session_id
        mock_store.save.assert_called_once_with(session_id, state)

    def test_save_session_reuses_existing_id(self, service, mock_store, state):
        state.assign_session(SESSION_ID)

        assert service.save_session() == SESSION_ID
        mock_store.save.assert_called_once_with(SESSION_ID, state)

    def test_save_session_clears_unsaved_changes(self, service, state):
        state.next_step()
        assert service.has_unsaved_changes()

        service.save_session()

        assert not service.has_unsaved_changes()

    def test_save_failure_propagates_and_keeps_changes(
        self, service, mock_store, state
    ):
        mock_store.save.side_effect = SessionPersistenceException(
            "Failed to save session data"
        )
        state.next_step()

        with pytest.raises(SessionPersistenceException):
            service.save_session()
        assert service.has_unsaved_changes()

    def test_load_session_restores_state(self, service, mock_store, state):
        mock_store.load.return_value = SessionRecord(current_step=BookingStep.SEATS)

        service.load_session(SESSION_ID)

        mock_store.load.assert_called_once_with(SESSION_ID)
        assert state.session_id == SESSION_ID
        assert state.current_step == BookingStep.SEATS
        assert not service.has_unsaved_changes()

    def test_load_missing_session_raises_not_found(self, service, mock_store, state):
        mock_store.load.return_value = None

        with pytest.raises(SessionNotFoundException, match="not found or expired"):
            service.load_session(SESSION_ID)
        assert state.session_id is None

    def test_clear_session(self, service, mock_store, state):
        state.assign_session(SESSION_ID)

        service.clear_session()

        mock_store.clear.assert_called_once_with(SESSION_ID)
        assert state.session_id is None

    def test_clear_without_session_is_noop(self, service, mock_store):
        service.clear_session()
        mock_store.clear.assert_not_called()

    def test_extend_session(self, service, mock_store, state):
        state.assign_session(SESSION_ID)
        service.extend_session()
        mock_store.extend.assert_called_once_with(SESSION_ID)

    def test_is_session_valid(self, service, mock_store, state):
        state.assign_session(SESSION_ID)
        mock_store.is_valid.return_value = True

        assert service.is_session_valid()
        mock_store.is_valid.assert_called_once_with(SESSION_ID)

    @pytest.mark.parametrize("operation", ["extend_session", "is_session_valid"])
    def test_operations_require_session(self, service, mock_store, operation):
        with pytest.raises(SessionNotInitializedException):
            getattr(service, operation)()
        mock_store.extend.assert_not_called()
        mock_store.is_valid.assert_not_called()


class TestBookingSessionServiceWithStore:
    def test_save_then_load_in_new_state(self, kv_store, populated_state):
        store = KeyValueSessionStore(kv_store)
        session_id = BookingSessionService(store, populated_state).save_session()

        restored = BookingState()
        BookingSessionService(store, restored).load_session(session_id)

        assert restored.session_id == session_id
        assert restored.passengers == populated_state.passengers
        assert restored.total_price == populated_state.total_price
        assert restored.current_step == BookingStep.EXTRAS

    def test_expired_session_cannot_be_loaded(self, kv_store, clock, populated_state):
        store = KeyValueSessionStore(kv_store)
        session_id = BookingSessionService(store, populated_state).save_session()

        clock.advance(31 * 60)
        service = BookingSessionService(store, BookingState())

        with pytest.raises(SessionNotFoundException):
            service.load_session(session_id)

    def test_reset_after_clear(self, kv_store, populated_state):
        store = KeyValueSessionStore(kv_store)
        service = BookingSessionService(store, populated_state)
        session_id = service.save_session()

        service.clear_session()
        service.state.reset()

        assert not store.is_valid(session_id)
        assert service.state.total_price == 0
        assert service.state.current_step == BookingStep.SEARCH
