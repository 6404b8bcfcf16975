from .booking_step import BookingStep as BookingStep
from .cabin_class import CabinClass as CabinClass
from .insurance_type import InsuranceType as InsuranceType
from .passenger_attributes import Gender as Gender
from .passenger_attributes import PassengerType as PassengerType
from .seat_attributes import SeatPosition as SeatPosition
from .seat_attributes import SeatStatus as SeatStatus
from .seat_attributes import SeatType as SeatType
from .trip_type import TripType as TripType
