# topmark:header:start
#
#   project      : YamlCraft
#   file         : noxfile.py
#   file_relpath : noxfile.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""YamlCraft project automation via Nox (using uv-backed virtualenvs).

Sessions:
  - `lint`: Ruff lint + pydoclint on the sources and tests.
  - `format_check`: Verify formatting with Ruff.
  - `qa`: Per-Python session that runs pytest (fast suite) and pyright.
  - `property_test`: Long-running Hypothesis property tests (opt-in).
  - `package_check`: Build sdist/wheel and validate metadata (twine).

Common invocations:
  - `nox -s lint`
  - `nox -s qa` (runs for all configured Python versions)
  - `nox -s property_test`
"""

from __future__ import annotations

import pathlib
import sys
from typing import Any

import nox

# The noxfile itself runs on Python >= 3.11
import tomllib

CURRENT_PYTHON_VERSION: str = f"{sys.version_info[0]}.{sys.version_info[1]}"

_PY_CLASSIFIER = "Programming Language :: Python :: "


def get_supported_pythons() -> list[str]:
    """Return the ``X.Y`` versions listed in the ``pyproject.toml`` classifiers.

    Falls back to the running interpreter when none are declared.
    """
    path: pathlib.Path = pathlib.Path(__file__).parent / "pyproject.toml"
    project: dict[str, Any] = tomllib.loads(path.read_text(encoding="utf-8")).get("project", {})
    versions: set[str] = set()
    for classifier in project.get("classifiers", []):
        version: str = classifier.removeprefix(_PY_CLASSIFIER)
        major, _, minor = version.partition(".")
        if classifier.startswith(_PY_CLASSIFIER) and major.isdigit() and minor.isdigit():
            versions.add(version)
    if not versions:
        return [CURRENT_PYTHON_VERSION]
    return sorted(versions, key=lambda v: tuple(int(p) for p in v.split(".")))


# Resolve versions once at startup
PYTHONS: list[str] = get_supported_pythons()

# Global options
# Keep defaults fast; run QA (multi-Python) explicitly or in CI.
nox.options.sessions = ["lint", "format_check"]
nox.options.default_venv_backend = "uv"

DEV_EXTRAS: str = ".[test,dev]"


@nox.session(python=PYTHONS)
def qa(session: nox.Session) -> None:
    """Run tests + pyright (per Python version)."""
    session.log("Supported Python versions: " + ", ".join(PYTHONS))

    session.install("-e", DEV_EXTRAS)

    # We add *session.posargs to the end of the command
    session.run("pytest", "-q", "tests", "-m", "not hypothesis_slow", *session.posargs)

    py_ver = session.python
    if not isinstance(py_ver, str) or not py_ver:
        raise RuntimeError(f"Unexpected session.python value: {py_ver!r}")

    session.run("pyright", "--pythonversion", py_ver)


@nox.session
def lint(session: nox.Session) -> None:
    """Run Ruff and pydoclint."""
    session.install("-e", DEV_EXTRAS)

    session.run("ruff", "check", ".")
    session.run("pydoclint", "-q", "src/yamlcraft", "tests")


@nox.session
def format_check(session: nox.Session) -> None:
    """Verify formatting without changing files."""
    session.install("-e", DEV_EXTRAS)

    session.run("ruff", "format", "--check", ".")


@nox.session
def property_test(session: nox.Session) -> None:
    """Run the Hypothesis property tests (slow, opt-in)."""
    session.install("-e", DEV_EXTRAS)

    session.run("pytest", "-vv", "-m", "hypothesis_slow", "tests", *session.posargs)


@nox.session(python=CURRENT_PYTHON_VERSION)
def package_check(session: nox.Session) -> None:
    """Build sdist/wheel and check the distribution metadata."""
    session.install("build", "twine")

    session.run("python", "-m", "build", "--sdist", "--wheel")
    session.run("twine", "check", "dist/*")
