"""Custom exceptions for reqdiff."""


class ReqDiffError(Exception):
    """Base exception for all reqdiff errors."""


class InvalidFilterError(ReqDiffError, ValueError):
    """Raised when a report is requested for an unknown status name."""

    def __init__(self, status: str, allowed: list[str]):
        self.status = status
        self.allowed = allowed
        super().__init__(
            f"Unknown status filter '{status}'. Expected one of: {', '.join(allowed)}"
        )
