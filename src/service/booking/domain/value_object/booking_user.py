import attrs


@attrs.frozen
class BookingUser:
    """User snapshot copied onto the booking; identity lives in an external auth provider."""

    name: str
    user_id: str
