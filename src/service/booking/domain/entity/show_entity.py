from datetime import datetime
from typing import Dict, Iterable, List, Optional

import attrs

from src.service.booking.domain.booking_errors import SeatConflictError
from src.service.booking.domain.entity.movie_entity import Movie
from src.service.booking.domain.enum.seat_status import SeatStatus


# Optimistic occupancy writes re-read the show this many times before giving up.
OCCUPANCY_WRITE_ATTEMPTS = 3


@attrs.define
class Show:
    """
    A single screening with its own price and seat occupancy.

    `version` increments on every occupancy write; writers must present the
    version they read so a concurrent change makes their update miss.
    """

    id: int
    movie_id: int
    show_date_time: datetime
    show_price: float
    occupied_seats: Dict[str, str] = attrs.field(factory=dict)
    version: int = 0
    movie: Optional[Movie] = None

    def is_occupied(self, seat: str) -> bool:
        return self.occupied_seats.get(seat) == SeatStatus.OCCUPIED

    def conflicting_seats(self, seats: Iterable[str]) -> List[str]:
        return [seat for seat in seats if self.is_occupied(seat)]

    def occupy_seats(self, seats: Iterable[str]) -> 'Show':
        """Return a copy with every seat occupied; all-or-nothing."""
        seats = list(seats)
        if conflicts := self.conflicting_seats(seats):
            raise SeatConflictError(conflicts)

        occupied = dict(self.occupied_seats)
        occupied.update({seat: SeatStatus.OCCUPIED.value for seat in seats})
        return attrs.evolve(self, occupied_seats=occupied)

    def release_seats(self, seats: Iterable[str]) -> 'Show':
        occupied = dict(self.occupied_seats)
        for seat in seats:
            if occupied.get(seat) == SeatStatus.OCCUPIED:
                del occupied[seat]
        return attrs.evolve(self, occupied_seats=occupied)
