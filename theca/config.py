"""Settings resolution from command line options and environment variables."""

from dataclasses import dataclass
from pathlib import Path

from .environment import Environment

PROFILE_FOLDER_ENV = "THECA_PROFILE_FOLDER"
DEFAULT_PROFILE_ENV = "THECA_DEFAULT_PROFILE"

DEFAULT_FOLDER_NAME = ".theca"
DEFAULT_PROFILE = "default"
PROFILE_SUFFIX = ".json"


@dataclass
class Settings:
    """Options shared by every command."""

    profiles_folder: str | None = None
    profile: str | None = None
    encrypted: bool = False
    key: str | None = None
    condensed: bool = False


def resolve_settings(
    env: Environment,
    profiles_folder: str | None = None,
    profile: str | None = None,
    encrypted: bool = False,
    key: str | None = None,
    condensed: bool = False,
) -> Settings:
    """Build Settings, filling unset folder/profile from the environment.

    Explicit options always win over THECA_PROFILE_FOLDER and
    THECA_DEFAULT_PROFILE.
    """
    if not profiles_folder:
        profiles_folder = env.env_var(PROFILE_FOLDER_ENV)
    if not profile:
        profile = env.env_var(DEFAULT_PROFILE_ENV)
    return Settings(
        profiles_folder=profiles_folder or None,
        profile=profile or None,
        encrypted=encrypted,
        key=key or None,
        condensed=condensed,
    )


def find_profile_folder(settings: Settings, env: Environment) -> Path:
    """Folder holding profile files.

    Explicit folder first, then ``~/.theca``, then ``./.theca`` when no
    home directory can be resolved.
    """
    if settings.profiles_folder:
        return Path(settings.profiles_folder)
    home = env.home_dir()
    if home is not None:
        return home / DEFAULT_FOLDER_NAME
    return Path(".") / DEFAULT_FOLDER_NAME


def profile_path(
    settings: Settings, env: Environment, new_name: str | None = None
) -> Path:
    """Path of the profile file to read or write."""
    if settings.profile:
        name = settings.profile
    elif new_name:
        name = new_name
    else:
        name = DEFAULT_PROFILE
    return find_profile_folder(settings, env) / (name + PROFILE_SUFFIX)
