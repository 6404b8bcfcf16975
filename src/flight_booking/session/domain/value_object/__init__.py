from .session_record import SessionRecord as SessionRecord
