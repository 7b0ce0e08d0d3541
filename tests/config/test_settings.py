"""Tests for FrozenGraphSettings: CLI flags, env vars, and the TOML source."""

from pathlib import Path

import click
import pytest
from pydantic import ValidationError

from frozengraph.config.settings import FrozenGraphSettings

pytestmark = pytest.mark.usefixtures("isolated_cwd")


class TestDefaults:
    def test_all_defaults(self) -> None:
        settings = FrozenGraphSettings.from_cli()
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.strict is False
        assert settings.graph.strict is False
        assert settings.output.width == 120
        assert settings.strict_edges is False

    def test_frozen(self) -> None:
        settings = FrozenGraphSettings.from_cli()
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, isolated_cwd: Path) -> None:
        (isolated_cwd / "frozengraph.toml").write_text("[graph]\nstrict = true\n")
        settings = FrozenGraphSettings.from_cli()
        assert settings.graph.strict is True
        assert settings.strict_edges is True
        assert settings.output.width == 120  # default preserved
        assert settings.config_path == (isolated_cwd / "frozengraph.toml").resolve()

    def test_discovered_from_subdirectory(self, isolated_cwd: Path) -> None:
        (isolated_cwd / "frozengraph.toml").write_text("[output]\nwidth = 80\n")
        sub = isolated_cwd / "a" / "b"
        sub.mkdir(parents=True)
        settings = FrozenGraphSettings.from_cli(start=sub)
        assert settings.output.width == 80

    def test_explicit_config_path(self, isolated_cwd: Path) -> None:
        custom = isolated_cwd / "custom" / "my.toml"
        custom.parent.mkdir()
        custom.write_text("[output]\nwidth = 60\n")
        settings = FrozenGraphSettings.from_cli(config_path=str(custom))
        assert settings.output.width == 60
        assert settings.config_path == custom

    def test_missing_explicit_config(self, isolated_cwd: Path) -> None:
        with pytest.raises(click.ClickException, match="not found"):
            FrozenGraphSettings.from_cli(config_path=str(isolated_cwd / "nope.toml"))

    def test_invalid_toml(self, isolated_cwd: Path) -> None:
        (isolated_cwd / "frozengraph.toml").write_text("[graph\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            FrozenGraphSettings.from_cli()

    def test_out_of_range_value(self, isolated_cwd: Path) -> None:
        (isolated_cwd / "frozengraph.toml").write_text("[output]\nwidth = 10\n")
        with pytest.raises(ValidationError):
            FrozenGraphSettings.from_cli()


class TestPriority:
    def test_cli_flag_enables_strict(self) -> None:
        settings = FrozenGraphSettings.from_cli(strict=True)
        assert settings.strict_edges is True
        assert settings.graph.strict is False

    def test_cli_flags_override_toml(self, isolated_cwd: Path) -> None:
        (isolated_cwd / "frozengraph.toml").write_text("quiet = true\n")
        settings = FrozenGraphSettings.from_cli(quiet=False)
        assert settings.quiet is False

    def test_env_var(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FROZENGRAPH_STRICT", "true")
        assert FrozenGraphSettings.from_cli().strict_edges is True

    def test_nested_env_var_overrides_toml(
        self, isolated_cwd: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (isolated_cwd / "frozengraph.toml").write_text("[output]\nwidth = 80\n")
        monkeypatch.setenv("FROZENGRAPH_OUTPUT__WIDTH", "100")
        assert FrozenGraphSettings.from_cli().output.width == 100
