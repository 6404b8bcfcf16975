from .booking_state_changed import BookingStateChanged as BookingStateChanged
