"""Import all models so they register on Base.metadata"""

from src.service.booking.driven_adapter.model.booking_model import BookingModel
from src.service.booking.driven_adapter.model.cast_model import CastModel
from src.service.booking.driven_adapter.model.date_time_slot_model import DateTimeSlotModel
from src.service.booking.driven_adapter.model.movie_model import MovieModel
from src.service.booking.driven_adapter.model.show_model import ShowModel

__all__ = ['BookingModel', 'CastModel', 'DateTimeSlotModel', 'MovieModel', 'ShowModel']
