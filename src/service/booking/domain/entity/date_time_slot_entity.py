from typing import List

import attrs

from src.service.booking.domain.value_object.time_slot import TimeSlot


@attrs.define
class DateTimeSlot:
    id: int
    date: str  # YYYY-MM-DD, grouping key for the schedule view
    slots: List[TimeSlot] = attrs.field(factory=list)
