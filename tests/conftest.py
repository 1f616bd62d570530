"""Shared pytest fixtures for CLI, engine and adapter tests.

All shared fixtures live here; tests receive them through pytest's
conftest discovery. Fixture names read as plain English.
"""

from __future__ import annotations

import contextlib
import os
import re
import tempfile
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass, fields
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config
from lib_layered_config.domain.config import SourceInfo

from peerup.adapters.memory import InMemoryManifests, InMemoryRegistry, OutputBoxSpy
from peerup.domain.models import UpgradeScope

if TYPE_CHECKING:
    from peerup.composition import AppServices

_COVERAGE_BASENAME = ".coverage.peerup"

NEXTUI_SCOPE = UpgradeScope(
    umbrella_package="@nextui-org/react",
    theme_package="@nextui-org/theme",
    component_prefix="@nextui-org/",
)


def _purge_stale_coverage_files(cov_path: Path) -> None:
    """Delete SQLite sidecar files a crashed coverage run left behind."""
    for suffix in ("", "-journal", "-wal", "-shm"):
        with contextlib.suppress(FileNotFoundError):
            Path(str(cov_path) + suffix).unlink()


def pytest_configure(config: pytest.Config) -> None:
    """Keep the coverage database on a local temp directory.

    Runs before ``pytest-cov`` creates its ``Coverage()`` object so the
    ``COVERAGE_FILE`` value applies however pytest is invoked.
    """
    if "COVERAGE_FILE" not in os.environ:
        cov_path = Path(tempfile.gettempdir()) / _COVERAGE_BASENAME
        _purge_stale_coverage_files(cov_path)
        os.environ["COVERAGE_FILE"] = str(cov_path)


def _load_dotenv() -> None:
    """Load a project ``.env`` (e.g. a registry mirror) when one exists."""
    from dotenv import load_dotenv

    env_file = Path(__file__).parent.parent / ".env"
    if env_file.exists():
        load_dotenv(env_file)


_load_dotenv()

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))


def _snapshot_cli_config() -> dict[str, object]:
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Use ``result.stdout`` for clean output (e.g. JSON parsing); log lines and
    error messages go to ``result.stderr``.
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """The production services factory for commands needing no injection."""
    from peerup.composition import build_production

    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return ANSI_ESCAPE_PATTERN.sub("", value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore after the test."""
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config cache before the test.

    Only clears before: a test may monkeypatch ``get_config`` and lose
    ``cache_clear``.
    """
    from peerup.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from test data dicts without file I/O."""

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def source_info_factory() -> Callable[[str, str, str | None], SourceInfo]:
    """Create SourceInfo dicts for provenance-tracking tests.

    Example:
        def test_provenance(source_info_factory: Callable[..., SourceInfo]) -> None:
            info = source_info_factory("registry.url", "user", "/home/user/.config/peerup/config.toml")
            assert info["layer"] == "user"
    """

    def _factory(key: str, layer: str, path: str | None = None) -> SourceInfo:
        return {"layer": layer, "path": path, "key": key}

    return _factory


@pytest.fixture
def nextui_scope() -> UpgradeScope:
    """The default umbrella, theme and component naming."""
    return NEXTUI_SCOPE


@pytest.fixture
def write_package_json(tmp_path: Path) -> Callable[..., Path]:
    """Write a ``package.json`` into ``tmp_path`` and return its path.

    Example:
        def test_read(write_package_json) -> None:
            path = write_package_json(dependencies={"react": "^18.2.0"})
    """
    import orjson

    def _write(
        *,
        dependencies: Mapping[str, str] | None = None,
        dev_dependencies: Mapping[str, str] | None = None,
        name: str = "demo-app",
        lockfile: str | None = None,
    ) -> Path:
        document: dict[str, Any] = {"name": name, "version": "1.0.0"}
        if dependencies is not None:
            document["dependencies"] = dict(dependencies)
        if dev_dependencies is not None:
            document["devDependencies"] = dict(dev_dependencies)
        path = tmp_path / "package.json"
        path.write_bytes(orjson.dumps(document))
        if lockfile:
            (tmp_path / lockfile).write_text("", encoding="utf-8")
        return path

    return _write


@pytest.fixture
def inject_config(
    clear_config_cache: None,
) -> Callable[[Config], Callable[[], AppServices]]:
    """Return a factory wiring production services around an injected Config.

    Only the I/O boundary (``get_config``) is replaced; the Config API is real.
    """
    from dataclasses import replace

    from peerup.composition import build_production

    def _inject(config: Config) -> Callable[[], AppServices]:
        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        test_services = replace(build_production(), get_config=_fake_get_config)
        return lambda: test_services

    return _inject


@pytest.fixture
def inject_config_with_profile_capture(
    clear_config_cache: None,
) -> Callable[[Config, list[str | None]], Callable[[], AppServices]]:
    """Like ``inject_config`` but records every profile passed to get_config."""
    from dataclasses import replace

    from peerup.composition import build_production

    def _inject(config: Config, captured_profiles: list[str | None]) -> Callable[[], AppServices]:
        def _capturing_get_config(*, profile: str | None = None, **_kwargs: Any) -> Config:
            captured_profiles.append(profile)
            return config

        test_services = replace(build_production(), get_config=_capturing_get_config)
        return lambda: test_services

    return _inject


@dataclass
class UpgradeCliContext:
    """Services factory plus the fakes behind it.

    Attributes:
        factory: Callable returning the wired AppServices for CLI invocation.
        registry: Canned registry; assert on ``registry.calls``.
        output: Spy holding the report sections that were shown.
    """

    factory: Callable[[], Any]
    registry: InMemoryRegistry
    output: OutputBoxSpy


@pytest.fixture
def upgrade_cli_context() -> Callable[..., UpgradeCliContext]:
    """Create in-memory services for the ``upgrade`` command.

    The manifest is read from disk by the production reader (write it with
    ``write_package_json``) and logging is the production runtime; the
    registry and the output box are in memory.

    Example:
        def test_upgrade(cli_runner, upgrade_cli_context, write_package_json) -> None:
            path = write_package_json(dependencies={"@nextui-org/react": "2.0.0"})
            ctx = upgrade_cli_context(latest_versions={"@nextui-org/react": "2.4.6"})
            result = cli_runner.invoke(cli, ["upgrade", "--package-path", str(path)], obj=ctx.factory)
    """
    from dataclasses import replace

    from peerup.adapters.logging import init_logging
    from peerup.adapters.manifest import detect_package_manager, read_manifest
    from peerup.composition import build_testing

    def _create(
        *,
        latest_versions: Mapping[str, str] | None = None,
        peers: Mapping[str, Any] | None = None,
        failing_peers: frozenset[str] = frozenset(),
        config: Mapping[str, Any] | None = None,
    ) -> UpgradeCliContext:
        registry = InMemoryRegistry(
            latest_versions=dict(latest_versions or {}),
            peers=dict(peers or {}),
            failing_peers=failing_peers,
        )
        output = OutputBoxSpy()
        loaded = Config(dict(config or {}), {})

        def _fake_get_config(**_kwargs: Any) -> Config:
            return loaded

        services = replace(
            build_testing(registry=registry, manifests=InMemoryManifests(), output=output),
            get_config=_fake_get_config,
            init_logging=init_logging,
            read_manifest=read_manifest,
            detect_package_manager=detect_package_manager,
        )
        return UpgradeCliContext(factory=lambda: services, registry=registry, output=output)

    return _create
