"""CLI --set override integration tests."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
from click.testing import CliRunner, Result
from lib_layered_config import Config

from peerup.adapters import cli as cli_mod

LOADED = {
    "upgrade": {"component_prefix": "@nextui-org/"},
    "registry": {"url": "https://registry.npmjs.org", "timeout": 10.0},
}


@pytest.fixture
def loaded_factory(
    config_factory: Callable[[dict[str, Any]], Config],
    inject_config: Callable[[Config], Callable[[], Any]],
) -> Callable[[], Any]:
    """Production services reading the LOADED configuration."""
    return inject_config(config_factory(LOADED))


@pytest.mark.os_agnostic
def test_when_set_override_is_passed_config_reflects_change(
    cli_runner: CliRunner,
    loaded_factory: Callable[[], Any],
) -> None:
    """Verify --set override is visible in config command output."""
    result: Result = cli_runner.invoke(
        cli_mod.cli,
        ["--set", "registry.url=https://mirror.test/npm", "config", "--section", "registry"],
        obj=loaded_factory,
    )

    assert result.exit_code == 0
    assert "https://mirror.test/npm" in result.output


@pytest.mark.os_agnostic
def test_when_multiple_set_overrides_are_passed_all_apply(
    cli_runner: CliRunner,
    loaded_factory: Callable[[], Any],
) -> None:
    """Verify multiple --set options all apply."""
    result: Result = cli_runner.invoke(
        cli_mod.cli,
        [
            "--set",
            "registry.timeout=3",
            "--set",
            "upgrade.component_prefix=@heroui/",
            "config",
            "--format",
            "json",
        ],
        obj=loaded_factory,
    )

    assert result.exit_code == 0
    assert '"timeout": 3' in result.stdout
    assert '"component_prefix": "@heroui/"' in result.stdout


@pytest.mark.os_agnostic
def test_when_set_override_has_nested_key_it_works(
    cli_runner: CliRunner,
    config_factory: Callable[[dict[str, Any]], Config],
    inject_config: Callable[[Config], Callable[[], Any]],
) -> None:
    """Verify nested key override (e.g., SECTION.SUB.KEY=VALUE) works."""
    factory = inject_config(config_factory({"lib_log_rich": {"payload_limits": {"message_max_chars": 4096}}}))

    result: Result = cli_runner.invoke(
        cli_mod.cli,
        ["--set", "lib_log_rich.payload_limits.message_max_chars=8192", "config", "--format", "json"],
        obj=factory,
    )

    assert result.exit_code == 0
    assert "8192" in result.stdout


@pytest.mark.os_agnostic
def test_set_overrides_are_reapplied_for_a_subcommand_profile(
    cli_runner: CliRunner,
    config_factory: Callable[[dict[str, Any]], Config],
    inject_config_with_profile_capture: Callable[[Config, list[str | None]], Callable[[], Any]],
) -> None:
    """``config --profile`` reloads configuration and keeps the root --set values."""
    captured: list[str | None] = []
    factory = inject_config_with_profile_capture(config_factory(LOADED), captured)

    result: Result = cli_runner.invoke(
        cli_mod.cli,
        ["--set", "registry.timeout=7", "config", "--profile", "mirror", "--format", "json"],
        obj=factory,
    )

    assert result.exit_code == 0
    assert captured == [None, "mirror"]
    assert '"timeout": 7' in result.stdout


@pytest.mark.os_agnostic
@pytest.mark.parametrize("override", ["invalid_no_equals", "nodot=value", "", ".timeout=3"])
def test_when_set_override_is_malformed_it_shows_usage_error(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
    override: str,
) -> None:
    """Malformed --set values are usage errors."""
    result: Result = cli_runner.invoke(
        cli_mod.cli,
        ["--set", override, "config"],
        obj=production_factory,
    )

    assert result.exit_code == 2
    assert "Invalid override" in result.stderr


@pytest.mark.os_agnostic
def test_when_set_override_nests_under_a_scalar_it_shows_usage_error(
    cli_runner: CliRunner,
    loaded_factory: Callable[[], Any],
) -> None:
    """Colliding overrides are reported, not raised."""
    result: Result = cli_runner.invoke(
        cli_mod.cli,
        ["--set", "registry.x=1", "--set", "registry.x.y=2", "config"],
        obj=loaded_factory,
    )

    assert result.exit_code == 2
    assert "already holds int" in result.stderr


@pytest.mark.os_agnostic
def test_when_no_set_overrides_config_is_unchanged(
    cli_runner: CliRunner,
    loaded_factory: Callable[[], Any],
) -> None:
    """Verify no --set leaves config unchanged."""
    result: Result = cli_runner.invoke(
        cli_mod.cli,
        ["config", "--section", "registry"],
        obj=loaded_factory,
    )

    assert result.exit_code == 0
    assert "https://registry.npmjs.org" in result.output
