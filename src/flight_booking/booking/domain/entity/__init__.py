from .booking_state import BookingState as BookingState
