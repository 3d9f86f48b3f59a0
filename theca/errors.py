"""Error types for theca.

Every failure that crosses into the core is reported as a ``ThecaError``.
Each subclass corresponds to one origin (file system, JSON decoding,
UTF-8 decoding, cipher, regex, arguments, timestamps, editor) and carries
a fixed description; ``detail`` holds extra diagnostic text when useful.
"""

from enum import Enum
from pathlib import Path


class ErrorKind(Enum):
    """Broad category of a ThecaError."""

    IO = "io"
    GENERIC = "generic"


class ThecaError(Exception):
    """Base exception for theca errors."""

    kind = ErrorKind.GENERIC

    def __init__(self, desc: str, detail: str | None = None):
        super().__init__(desc)
        self.desc = desc
        self.detail = detail

    def __str__(self) -> str:
        return self.desc


class ThecaIOError(ThecaError):
    """A file could not be read or written."""

    kind = ErrorKind.IO

    def __init__(self, detail: str | None = None):
        super().__init__("An internal IO error ocurred.", detail)


class ProfileNotFoundError(ThecaError):
    """Profile file does not exist."""

    def __init__(self, path: Path):
        super().__init__(f"{path} does not exist.")
        self.path = path


class NotAFileError(ThecaError):
    """Profile path exists but is not a regular file."""

    def __init__(self, path: Path):
        super().__init__(f"{path} is not a file.")
        self.path = path


class DecodeError(ThecaError):
    """Profile contents are not valid profile JSON."""

    def __init__(self, path: Path, detail: str | None = None):
        super().__init__(f"Invalid JSON in {path}", detail)
        self.path = path


class EncodingError(ThecaError):
    """Profile contents are not valid UTF-8."""

    def __init__(self, detail: str | None = None):
        super().__init__("Error parsing invalid UTF8 characters.", detail)


class CryptoError(ThecaError):
    """Decryption or encryption failed.

    No detail is attached so nothing about the key or ciphertext leaks.
    """

    def __init__(self):
        super().__init__("Could not decrypt profile, wrong key or corrupted data.")


class RegexError(ThecaError):
    """Search pattern failed to compile."""

    def __init__(self, message: str):
        super().__init__(f"Regex error: {message}", message)


class ItemNotFoundError(ThecaError):
    """No note with the requested id."""

    def __init__(self, item_id: int):
        super().__init__(f"Note #{item_id} doesn't exist.")
        self.item_id = item_id


class ArgumentError(ThecaError):
    """Invalid combination of command line arguments."""


class TimestampError(ThecaError):
    """Current time could not be formatted."""

    def __init__(self, detail: str | None = None):
        super().__init__("Time parsing error", detail)


class EditorError(ThecaError):
    """External editor could not be run."""
