from enum import StrEnum


class SeatStatus(StrEnum):
    OCCUPIED = 'occupied'
