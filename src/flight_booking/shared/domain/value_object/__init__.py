from .currency import Currency as Currency
from .session_id import SessionId as SessionId
