from .exceptions import (
    BusinessRuleViolationException as BusinessRuleViolationException,
)
from .exceptions import DomainException as DomainException
from .exceptions import ResourceNotFoundException as ResourceNotFoundException
from .exceptions import SessionNotFoundException as SessionNotFoundException
from .exceptions import (
    SessionNotInitializedException as SessionNotInitializedException,
)
from .exceptions import (
    SessionPersistenceException as SessionPersistenceException,
)
