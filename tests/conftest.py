# topmark:header:start
#
#   project      : YamlCraft
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the YamlCraft test suite.

Provides the shared fixtures and typed decorator helpers, and turns on TRACE
logging for the whole run.

Notes:
    Configs used by tests go through the builder:

    - Build configs using `yamlcraft.config.MutableRenderConfig` (mutable), then
      `freeze()` into a `yamlcraft.config.RenderConfig` for public API calls
      (``yamlcraft.api.dumps``).
    - Do **not** mutate a frozen `RenderConfig`. If you need to tweak one,
      call `RenderConfig.thaw()`, edit the returned builder, then `freeze()` again.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest
import yaml

from yamlcraft.config import MutableRenderConfig, logging
from yamlcraft.constants import LOG_LEVEL_ENV_VAR

if TYPE_CHECKING:
    from pathlib import Path

    from yamlcraft.config import RenderConfig

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_yamlcraft_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure YamlCraft's runtime log level is not forced via env during tests.

    A level exported in the developer shell must not leak into assertions on
    log setup.

    Args:
        monkeypatch (pytest.MonkeyPatch): Used to drop the variable for one test.
    """
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for all tests.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run a test in an isolated temporary project directory.

    Config discovery walks upward from the working directory, so tests that
    depend on it must not see the repository's own ``pyproject.toml``. A
    ``yamlcraft.toml`` with only defaults is placed at the temporary root to
    stop discovery there.

    Returns:
        Path: The working directory created for the test.
    """
    root: Path = tmp_path / "root"
    root.mkdir()
    (root / "yamlcraft.toml").write_text("[render]\n", encoding="utf-8")
    cwd: Path = root / "proj"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    return cwd


def make_config(**overrides: Any) -> RenderConfig:
    """Return a frozen `RenderConfig` built from defaults and overrides.

    Args:
        **overrides (Any): Keyword overrides applied to the mutable builder before freezing.

    Returns:
        RenderConfig: An immutable configuration snapshot.
    """
    m: MutableRenderConfig = MutableRenderConfig.from_defaults()
    for k, v in overrides.items():
        setattr(m, k, v)
    return m.freeze()


def load_yaml(text: str) -> Any:
    """Parse YAML text with PyYAML's safe loader (the reference reader in tests)."""
    return yaml.safe_load(text)
