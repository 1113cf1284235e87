class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str, status_code: int) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class DomainError(CustomBaseError):
    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code)


class NotFoundError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 404)


class ConflictError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 409)


class PersistenceError(CustomBaseError):
    """Store failure surfaced to the client without driver details"""

    def __init__(self, message: str) -> None:
        super().__init__(message, 500)


class UpstreamError(CustomBaseError):
    """Third-party dependency (payment processor) failed"""

    def __init__(self, message: str) -> None:
        super().__init__(message, 502)
