import json
from dataclasses import dataclass
from unittest.mock import MagicMock

import pytest

from flight_booking.booking.domain import BookingState
from flight_booking.session.domain import SessionRecord
from flight_booking.session.handlers import clear, load, save
from flight_booking.session.infrastructure import KeyValueSessionStore
from flight_booking.session.infrastructure.session_record_schema import (
    encode_session_record,
)
from flight_booking.shared.domain import SessionId, SessionPersistenceException

SESSION_ID = "session_1767225600000_abcdefghijklm"


@dataclass
class LambdaContext:
    function_name: str = "booking-session"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = (
        "arn:aws:lambda:ap-northeast-1:123456789012:function:booking-session"
    )
    aws_request_id: str = "da658bd3-2d6f-4e7b-8ec2-937234644fdc"


@pytest.fixture
def lambda_context():
    return LambdaContext()


@pytest.fixture
def session_store(kv_store, monkeypatch):
    store = KeyValueSessionStore(kv_store)
    for module in (save, load, clear):
        monkeypatch.setattr(module, "store", store)
    return store


def _event(session_id=SESSION_ID, body=None):
    return {
        "version": "2.0",
        "routeKey": "PUT /sessions/{session_id}",
        "rawPath": f"/sessions/{session_id}",
        "pathParameters": {"session_id": session_id} if session_id else None,
        "body": body,
        "isBase64Encoded": False,
        "requestContext": {"http": {"method": "PUT"}},
    }


class TestSaveSessionHandler:
    def test_saves_record(self, session_store, populated_state, lambda_context):
        body = encode_session_record(
            SessionRecord.from_booking_state(populated_state)
        ).decode("utf-8")

        response = save.lambda_handler(_event(body=body), lambda_context)

        assert response["statusCode"] == 200
        data = json.loads(response["body"])["data"]
        assert data == {
            "session_id": SESSION_ID,
            "current_step": "extras",
            "total_price": "1155",
            "formatted_total": "$1,155.00",
        }
        assert session_store.is_valid(SessionId(SESSION_ID))

    def test_invalid_body_returns_400(self, session_store, lambda_context):
        response = save.lambda_handler(
            _event(body='{"current_step": "nowhere"}'), lambda_context
        )

        assert response["statusCode"] == 400
        assert json.loads(response["body"])["message"] == "Invalid session record"

    def test_formatted_total_uses_flight_currency(
        self, session_store, create_flight, lambda_context
    ):
        state = BookingState()
        state.set_selected_flight(create_flight(currency="EUR"))
        body = encode_session_record(SessionRecord.from_booking_state(state)).decode(
            "utf-8"
        )

        response = save.lambda_handler(_event(body=body), lambda_context)

        data = json.loads(response["body"])["data"]
        assert data["formatted_total"] == "€850.00"

    def test_non_numeric_amount_returns_400(self, session_store, lambda_context):
        insurance = {"type": "basic", "coverage": "10000", "price": "free"}
        body = json.dumps({"selected_extras": {"insurance": insurance}})

        response = save.lambda_handler(_event(body=body), lambda_context)

        assert response["statusCode"] == 400
        assert not session_store.is_valid(SessionId(SESSION_ID))

    def test_missing_session_id_returns_400(self, session_store, lambda_context):
        response = save.lambda_handler(_event(session_id=None), lambda_context)
        assert response["statusCode"] == 400

    def test_store_failure_returns_503(self, monkeypatch, lambda_context):
        failing_store = MagicMock()
        failing_store.save.side_effect = SessionPersistenceException(
            "Failed to save session data"
        )
        monkeypatch.setattr(save, "store", failing_store)

        response = save.lambda_handler(_event(body="{}"), lambda_context)

        assert response["statusCode"] == 503
        body = json.loads(response["body"])
        assert body["retryable"] is True
        assert body["message"] == "Failed to save session data"


class TestLoadSessionHandler:
    def test_returns_saved_record(
        self, session_store, populated_state, kv_store, clock, lambda_context
    ):
        session_store.save(SessionId(SESSION_ID), populated_state)
        clock.advance(600)

        response = load.lambda_handler(_event(), lambda_context)

        assert response["statusCode"] == 200
        body = json.loads(response["body"])
        assert body["current_step"] == "extras"
        assert len(body["passengers"]) == 2
        assert kv_store.ttl(f"booking:session:{SESSION_ID}") == 30 * 60

    def test_missing_session_returns_404(self, session_store, lambda_context):
        response = load.lambda_handler(_event(), lambda_context)

        assert response["statusCode"] == 404
        assert (
            json.loads(response["body"])["message"] == "Session not found or expired"
        )


class TestClearSessionHandler:
    def test_clears_session(self, session_store, lambda_context):
        session_store.save(SessionId(SESSION_ID), BookingState())

        response = clear.lambda_handler(_event(), lambda_context)

        assert response["statusCode"] == 200
        assert json.loads(response["body"])["status"] == "success"
        assert not session_store.is_valid(SessionId(SESSION_ID))

    def test_clearing_missing_session_succeeds(self, session_store, lambda_context):
        response = clear.lambda_handler(_event(), lambda_context)
        assert response["statusCode"] == 200

