from .navigation_guard import STEP_ORDER as STEP_ORDER
from .navigation_guard import NavigationGuard as NavigationGuard
from .price_calculator import PriceCalculator as PriceCalculator
