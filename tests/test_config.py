"""Tests for settings and profile path resolution."""

import io
from pathlib import Path

from theca import config
from theca.environment import SystemEnvironment


class TestResolveSettings:
    def test_defaults(self, env):
        settings = config.resolve_settings(env)
        assert settings.profiles_folder is None
        assert settings.profile is None
        assert settings.encrypted is False

    def test_env_override(self, env):
        env.variables = {"THECA_PROFILE_FOLDER": "/tmp/notes", "THECA_DEFAULT_PROFILE": "work"}
        settings = config.resolve_settings(env)
        assert settings.profiles_folder == "/tmp/notes"
        assert settings.profile == "work"

    def test_explicit_wins_over_env(self, env):
        env.variables = {"THECA_PROFILE_FOLDER": "/tmp/notes", "THECA_DEFAULT_PROFILE": "work"}
        settings = config.resolve_settings(env, profiles_folder="/srv", profile="home")
        assert settings.profiles_folder == "/srv"
        assert settings.profile == "home"


class TestProfilePath:
    def test_default_location(self, env):
        settings = config.resolve_settings(env)
        assert config.profile_path(settings, env) == env.home / ".theca" / "default.json"

    def test_no_home(self, env):
        env.home = None
        settings = config.resolve_settings(env)
        assert config.find_profile_folder(settings, env) == Path(".") / ".theca"

    def test_explicit_folder_and_profile(self, env):
        settings = config.resolve_settings(env, profiles_folder="/srv/notes", profile="work")
        assert config.profile_path(settings, env) == Path("/srv/notes/work.json")

    def test_new_profile_name(self, env):
        settings = config.resolve_settings(env, profiles_folder="/srv/notes")
        assert config.profile_path(settings, env, new_name="ideas") == Path("/srv/notes/ideas.json")

    def test_explicit_profile_beats_new_name(self, env):
        settings = config.resolve_settings(env, profiles_folder="/srv/notes", profile="work")
        assert config.profile_path(settings, env, new_name="ideas") == Path("/srv/notes/work.json")


class TestSystemEnvironment:
    def test_env_var(self, monkeypatch):
        monkeypatch.setenv("THECA_PROFILE_FOLDER", "/srv/notes")
        monkeypatch.setenv("THECA_DEFAULT_PROFILE", "")
        env = SystemEnvironment()
        assert env.env_var("THECA_PROFILE_FOLDER") == "/srv/notes"
        assert env.env_var("THECA_DEFAULT_PROFILE") is None

    def test_terminal_width_without_terminal(self, monkeypatch):
        monkeypatch.setattr("sys.stdout", io.StringIO())
        assert SystemEnvironment().terminal_width() == 0
