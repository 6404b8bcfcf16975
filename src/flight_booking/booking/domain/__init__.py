from .entity import BookingState as BookingState
from .enum import BookingStep as BookingStep
from .event import BookingStateChanged as BookingStateChanged
from .service import STEP_ORDER as STEP_ORDER
from .service import NavigationGuard as NavigationGuard
from .service import PriceCalculator as PriceCalculator
