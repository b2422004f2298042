from typing import Optional


class BreachLookupError(RuntimeError):
    """Base for lookup failures. Never leaves the provider's public methods."""


class NetworkFailure(BreachLookupError):
    pass


class UnexpectedStatus(BreachLookupError):
    def __init__(self, status_code: int, message: Optional[str] = None):
        self.status_code = status_code
        super().__init__(message or f"Breach service returned status {status_code}")


class MalformedResponse(BreachLookupError):
    pass
