from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from flight_booking.booking.domain import BookingState
from flight_booking.session.handlers.response_models import error_response, to_response
from flight_booking.session.infrastructure import (
    KeyValueSessionStore,
    create_key_value_store,
)
from flight_booking.session.infrastructure.session_record_schema import (
    decode_session_record,
)
from flight_booking.shared.domain import SessionId, SessionPersistenceException
from flight_booking.shared.utils import api_response

logger = Logger()

store = KeyValueSessionStore(create_key_value_store())


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """予約セッション保存 Lambda Handler（PUT /sessions/{session_id}）"""

    path_params = event.path_parameters or {}
    session_id = path_params.get("session_id")

    if not session_id:
        return api_response(400, error_response("session_id is required"))

    logger.info("Received save session request", extra={"session_id": session_id})

    try:
        record = decode_session_record(event.decoded_body or "")
    except ValueError as e:
        logger.warning("Invalid session record", extra={"error": str(e)})
        return api_response(400, error_response("Invalid session record"))

    state = BookingState()
    record.restore_into(state, SessionId(value=session_id))

    try:
        store.save(SessionId(value=session_id), state)
    except SessionPersistenceException:
        return api_response(
            503, error_response("Failed to save session data", retryable=True)
        )

    return api_response(200, to_response(state))
