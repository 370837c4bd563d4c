"""Exceptions raised by fireworks-stand."""

from typing import Iterable, Optional


class FireworksStandError(Exception):
    """Base class for all fireworks-stand errors."""


class UnknownEnvironmentError(FireworksStandError):
    """Raised when an environment name matches no deployment profile.

    Attributes:
        name: The name that was looked up
        known: Names that would have matched
    """

    def __init__(self, name: str, known: Iterable[str] = ()) -> None:
        self.name = name
        self.known = tuple(known)
        message = f"Unknown environment: {name!r}"
        if self.known:
            message += f" (expected one of: {', '.join(self.known)})"
        super().__init__(message)


class ProfileLoadError(FireworksStandError):
    """Raised when the bundled profile data cannot be parsed.

    Attributes:
        message: Description of the failure
        source: File the profiles were read from (optional)
    """

    def __init__(self, message: str, source: Optional[str] = None) -> None:
        super().__init__(message)
        self.source = source
