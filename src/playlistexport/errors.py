"""Error types for playlist export."""

from typing import Optional

from .logging_config import get_logger

logger = get_logger(__name__)


def log_error(error: Exception, context: Optional[str] = None) -> None:
    """Log an error with optional context.

    Args:
        error: The exception to log
        context: Optional context about where/why the error occurred
    """
    if context:
        logger.error(f"{context}: {str(error)}")
    else:
        logger.error(str(error))


class PlaylistExportError(Exception):
    """Base class for playlist export errors."""

    pass


class FetchError(PlaylistExportError):
    """Error raised when a remote listing call fails."""

    def __init__(self, description: str, parent_id: Optional[str] = None, reason: str = ""):
        """Initialize error.

        Args:
            description: Name of the remote call that failed
            parent_id: ID of the playlist being queried, for item-level fetches
            reason: Underlying failure message
        """
        self.description = description
        self.parent_id = parent_id
        message = f"Error fetching {description}"
        if parent_id:
            message += f" for playlist_id: {parent_id}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class InputFileError(PlaylistExportError):
    """Error raised when an input file is missing or unreadable."""

    def __init__(self, path: str, reason: str = ""):
        self.path = path
        message = f"Could not read input file: {path}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class OutputError(PlaylistExportError):
    """Error raised when the output file cannot be written."""

    def __init__(self, path: str, reason: str = ""):
        self.path = path
        message = f"Unable to write file: {path}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)
