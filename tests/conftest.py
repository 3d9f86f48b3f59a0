"""Shared fixtures."""

from pathlib import Path

import pytest

from theca.models import Item, Profile


class FakeEnvironment:
    """Environment with fixed variables, terminal width and home folder."""

    def __init__(self, variables: dict | None = None, width: int = 0, home: Path | None = None):
        self.variables = variables or {}
        self.width = width
        self.home = home

    def env_var(self, name: str) -> str | None:
        return self.variables.get(name) or None

    def terminal_width(self) -> int:
        return self.width

    def home_dir(self) -> Path | None:
        return self.home


@pytest.fixture()
def env(tmp_path: Path) -> FakeEnvironment:
    return FakeEnvironment(home=tmp_path / "home")


@pytest.fixture()
def profiles_folder(tmp_path: Path) -> Path:
    folder = tmp_path / "profiles"
    folder.mkdir()
    return folder


@pytest.fixture()
def sample_profile() -> Profile:
    return Profile(
        encrypted=False,
        notes=[
            Item(id=1, title="Buy milk", status="", body="", last_touched="2015-01-22 10:00:00"),
            Item(id=2, title="Write report", status="Started", body="draft\nsection two",
                 last_touched="2015-01-22 11:00:00"),
            Item(id=3, title="Call bank", status="Urgent", body="", last_touched="2015-01-22 12:00:00"),
        ],
    )
