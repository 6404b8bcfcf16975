from .entity import AggregateRoot as AggregateRoot
from .entity import Entity as Entity
from .exception import (
    BusinessRuleViolationException as BusinessRuleViolationException,
)
from .exception import (
    DomainException as DomainException,
)
from .exception import (
    ResourceNotFoundException as ResourceNotFoundException,
)
from .exception import (
    SessionNotFoundException as SessionNotFoundException,
)
from .exception import (
    SessionNotInitializedException as SessionNotInitializedException,
)
from .exception import (
    SessionPersistenceException as SessionPersistenceException,
)
from .value_object import (
    Currency as Currency,
)
from .value_object import (
    SessionId as SessionId,
)
