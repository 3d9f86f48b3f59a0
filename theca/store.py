"""Reading and writing profile files."""

import logging
from pathlib import Path

from pydantic import ValidationError

from . import crypt
from .errors import (
    ArgumentError,
    DecodeError,
    EncodingError,
    NotAFileError,
    ProfileNotFoundError,
    ThecaIOError,
)
from .models import Profile

logger = logging.getLogger(__name__)

FOLDER_MODE = 0o700


def _require_key(password: str | None) -> str:
    if password is None:
        raise ArgumentError("An encryption key is required for encrypted profiles.")
    return password


def new_profile(folder: Path, encrypted: bool = False) -> Profile:
    """Create an empty profile, making sure its folder exists.

    The folder is created with owner-only permissions if it is missing.
    """
    if not folder.exists():
        try:
            folder.mkdir(mode=FOLDER_MODE, parents=True)
        except OSError as e:
            raise ThecaIOError(str(e)) from e
        logger.debug("Created profiles folder %s", folder)
    return Profile(encrypted=encrypted, notes=[])


def load_profile(path: Path, encrypted: bool = False, password: str | None = None) -> Profile:
    """Load a profile from disk.

    Args:
        path: Profile file.
        encrypted: Whether the file holds ciphertext.
        password: Key phrase, required when ``encrypted`` is true.

    Raises:
        ProfileNotFoundError: If ``path`` does not exist.
        NotAFileError: If ``path`` is not a regular file.
        CryptoError: If decryption fails.
        EncodingError: If the contents are not UTF-8.
        DecodeError: If the contents are not a valid profile.
        ThecaIOError: If the file cannot be read.
    """
    if not path.is_file():
        if path.exists():
            raise NotAFileError(path)
        raise ProfileNotFoundError(path)

    logger.debug("Loading %s (encrypted=%s)", path, encrypted)
    try:
        contents = path.read_bytes()
    except OSError as e:
        raise ThecaIOError(str(e)) from e

    if encrypted:
        key, iv = crypt.derive_key_iv(_require_key(password))
        contents = crypt.decrypt(contents, key, iv)

    try:
        text = contents.decode("utf-8")
    except UnicodeDecodeError as e:
        raise EncodingError(str(e)) from e

    try:
        profile = Profile.model_validate_json(text)
    except ValidationError as e:
        raise DecodeError(path, str(e)) from e

    logger.debug("Loaded %d notes from %s", len(profile.notes), path)
    return profile


def encode_profile(profile: Profile) -> bytes:
    """Pretty-printed JSON for a profile."""
    return profile.model_dump_json(indent=2).encode("utf-8")


def save_profile(path: Path, profile: Profile, password: str | None = None) -> None:
    """Write a profile to disk, encrypting it if the profile is encrypted.

    The file is truncated and rewritten in place; there is no locking, so
    concurrent writers may overwrite each other.
    """
    buffer = encode_profile(profile)
    if profile.encrypted:
        key, iv = crypt.derive_key_iv(_require_key(password))
        buffer = crypt.encrypt(buffer, key, iv)

    try:
        with open(path, "wb") as f:
            f.write(buffer)
    except OSError as e:
        raise ThecaIOError(f"Couldn't write to {path}: {e}") from e

    logger.debug("Saved %d notes to %s", len(profile.notes), path)
