from .repository import SESSION_TTL_SECONDS as SESSION_TTL_SECONDS
from .repository import SessionStore as SessionStore
from .value_object import SessionRecord as SessionRecord
