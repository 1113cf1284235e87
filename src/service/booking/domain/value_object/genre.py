import attrs


@attrs.frozen
class Genre:
    id: int
    name: str
