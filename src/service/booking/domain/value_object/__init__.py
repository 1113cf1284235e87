"""Booking Domain Value Objects"""

from src.service.booking.domain.value_object.booking_user import BookingUser
from src.service.booking.domain.value_object.genre import Genre
from src.service.booking.domain.value_object.time_slot import TimeSlot

__all__ = ['BookingUser', 'Genre', 'TimeSlot']
