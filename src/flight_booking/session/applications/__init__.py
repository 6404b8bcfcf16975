from .booking_session_service import BookingSessionService as BookingSessionService
