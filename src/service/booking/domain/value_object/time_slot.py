from datetime import datetime

import attrs


@attrs.frozen
class TimeSlot:
    time: datetime
    show_id: str
