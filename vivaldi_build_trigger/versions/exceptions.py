"""Custom exceptions for the version sources."""


class RequiredDataAbsentError(Exception):
    """Raised when a fetched document lacks a value that must be present."""

    def __init__(self, source: str, detail: str) -> None:
        """Record which document was incomplete and what it was missing."""
        super().__init__(f"Required data absent from {source}: {detail}")
        self.source = source
        self.detail = detail
