from .airport import Airport as Airport
from .extras import BaggageExtra as BaggageExtra
from .extras import InsuranceExtra as InsuranceExtra
from .extras import LoungeExtra as LoungeExtra
from .extras import MealExtra as MealExtra
from .extras import SelectedExtras as SelectedExtras
from .flight import Airline as Airline
from .flight import FareBreakdown as FareBreakdown
from .flight import Flight as Flight
from .flight import FlightPoint as FlightPoint
from .flight import FlightPrice as FlightPrice
from .flight import FlightSegmentDetail as FlightSegmentDetail
from .passenger import ContactInfo as ContactInfo
from .passenger import PassengerInfo as PassengerInfo
from .passenger import PassportInfo as PassportInfo
from .price_breakdown import DetailedPriceBreakdown as DetailedPriceBreakdown
from .price_breakdown import PriceLineItem as PriceLineItem
from .search_criteria import FlightSegment as FlightSegment
from .search_criteria import PassengerCount as PassengerCount
from .search_criteria import SearchCriteria as SearchCriteria
from .seat import Seat as Seat
