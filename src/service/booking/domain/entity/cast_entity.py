from typing import Optional

import attrs


@attrs.define
class Cast:
    name: str
    profile_path: str
    id: Optional[int] = None  # None when embedded in a movie
