"""Error taxonomy for lsx.

Every failure is fatal: errors propagate to the command, which reports
them on stderr and exits non-zero.
"""

from __future__ import annotations

from pathlib import Path


class LsxError(Exception):
    """Base class for all lsx errors."""


class ConfigurationError(LsxError):
    """Bad flag value, missing flag argument, or invalid pattern."""


class FilesystemError(LsxError):
    """A directory, metadata record, or symlink target could not be read."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class RenderError(LsxError):
    """Writing the listing to the output stream failed."""
