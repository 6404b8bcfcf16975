from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from flight_booking.session.handlers.response_models import error_response
from flight_booking.session.infrastructure import (
    KeyValueSessionStore,
    create_key_value_store,
)
from flight_booking.session.infrastructure.session_record_schema import (
    SessionRecordModel,
)
from flight_booking.shared.domain import SessionId
from flight_booking.shared.utils import api_response

logger = Logger()

store = KeyValueSessionStore(create_key_value_store())


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """予約セッション取得 Lambda Handler（GET /sessions/{session_id}）

    取得に成功した場合は TTL を延長する（スライディング有効期限）。
    """

    path_params = event.path_parameters or {}
    session_id = path_params.get("session_id")

    if not session_id:
        return api_response(400, error_response("session_id is required"))

    logger.info("Fetching session", extra={"session_id": session_id})

    record = store.load(SessionId(value=session_id))
    if record is None:
        return api_response(404, error_response("Session not found or expired"))

    store.extend(SessionId(value=session_id))
    return api_response(200, SessionRecordModel.from_domain(record).model_dump_json())
