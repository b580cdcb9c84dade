"""Single-line text progress bar for long-running terminal tasks."""

__version__ = "0.1.0"

from .progress import ProgressIndicator, create, track
from .timefmt import format_duration
from .validation import InvalidArgument

__all__ = [
    "ProgressIndicator",
    "create",
    "track",
    "format_duration",
    "InvalidArgument"
]
