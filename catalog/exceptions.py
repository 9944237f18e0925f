"""Custom exception hierarchy for the catalog application."""


class CatalogError(Exception):
    """Base exception for all catalog errors."""

    def __init__(self, message: str) -> None:
        """Initialize exception with message."""
        self.message = message
        super().__init__(self.message)


class StoreUnavailableError(CatalogError):
    """The relational store could not be reached."""

    def __init__(self, reason: str) -> None:
        """Initialize with the driver's reason for the failure."""
        self.reason = reason
        super().__init__(f"Product store is unavailable: {reason}")
