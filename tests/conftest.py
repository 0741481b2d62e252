# topmark:header:start
#
#   project      : Seti Icons
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Seti Icons contributors
#
# topmark:header:end

"""Pytest configuration for the Seti Icons test suite.

Sets up TRACE logging for test runs, keeps developer environment variables from
leaking into tests, and provides small hand-built tables so resolver and
provider tests do not depend on the bundled data.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

import pytest

from seti_icons.config import logging
from seti_icons.rules.loader import get_icon_data
from seti_icons.rules.model import IconPair, RuleTable

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from seti_icons.rules.model import IconContentTable


@pytest.fixture(autouse=True)
def clean_seti_icons_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep exported SETI_ICONS_* variables and cached data out of test runs.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(logging.LOG_LEVEL_ENV, raising=False)
    monkeypatch.delenv("SETI_ICONS_DATA_DIR", raising=False)
    get_icon_data.cache_clear()
    yield
    get_icon_data.cache_clear()


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Configure TRACE logging for the whole test session.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def sample_rules() -> RuleTable:
    """A small rule table exercising every tier, including overlapping partials."""
    return RuleTable.build(
        files={
            "Dockerfile": IconPair("docker", "blue"),
            "docker-compose.yml": IconPair("docker", "pink"),
            ".gitignore": IconPair("git", "ignore"),
        },
        extensions={
            ".js": IconPair("javascript", "blue"),
            ".test.js": IconPair("javascript", "orange"),
            ".yml": IconPair("yml", "purple"),
            ".gitignore": IconPair("git", "grey"),
            ".md": IconPair("markdown", "blue"),
        },
        # Scan order: "config" is checked before "webpack.config"
        partials=[
            ("config", IconPair("config", "grey-light")),
            ("webpack.config", IconPair("webpack", "blue")),
            ("Dockerfile", IconPair("docker", "blue")),
        ],
    )


@pytest.fixture
def sample_icons() -> IconContentTable:
    """SVG markup for every icon key of `sample_rules` except ``webpack``."""
    return MappingProxyType(
        {
            key: f'<svg viewBox="0 0 32 32"><title>{key}</title></svg>'
            for key in ("docker", "javascript", "yml", "git", "markdown", "config", "default")
        }
    )


@pytest.fixture
def solarized() -> dict[str, str]:
    """A plain-dict color theme with a ``white`` entry."""
    return {"blue": "#268bd2", "white": "#fdf6e3", "orange": "#cb4b16"}


DataDirWriter = Callable[[Any, Any], "Path"]


@pytest.fixture
def write_icon_data(tmp_path: Path) -> DataDirWriter:
    """Return a writer that stores ``definitions.json`` and ``icons.json`` in a temp dir.

    The writer takes the two JSON-serializable documents (or raw ``str`` text,
    written verbatim) and returns the directory.

    Args:
        tmp_path (Path): Pytest temporary directory.
    """

    def _write(definitions: Any, icons: Any) -> Path:
        directory = tmp_path / "icon-data"
        directory.mkdir(exist_ok=True)
        for name, doc in (("definitions.json", definitions), ("icons.json", icons)):
            text = doc if isinstance(doc, str) else json.dumps(doc)
            (directory / name).write_text(text, encoding="utf-8")
        return directory

    return _write


@pytest.fixture
def minimal_definitions() -> dict[str, Any]:
    """A valid raw ``definitions.json`` document."""
    return {
        "files": {"Makefile": ["makefile", "orange"]},
        "extensions": {".py": ["python", "blue"], ".prettierrc": ["prettier", "seti-primary"]},
        "partials": [["TODO", ["todo", "white"]], ["mix", ["hex", "seti-primary"]]],
        "default": ["default", "white"],
    }


@pytest.fixture
def minimal_icons() -> dict[str, str]:
    """A valid raw ``icons.json`` document matching `minimal_definitions`."""
    return {
        key: "<svg/>" for key in ("makefile", "python", "prettier", "todo", "hex", "default")
    }
