from .session_store import SESSION_TTL_SECONDS as SESSION_TTL_SECONDS
from .session_store import SessionStore as SessionStore
