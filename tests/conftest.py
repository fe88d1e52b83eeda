# tests/conftest.py
# Shared pytest setup for the pbrtscene test-suite
# Exists so `import pbrtscene` works from a fresh clone and tests can build parameter lists tersely
# RELEVANT FILES: python/pbrtscene/params.py, python/pbrtscene/scene.py, pyproject.toml
import sys
from pathlib import Path

import pytest


def _repo_root() -> Path:
    return Path(__file__).resolve().parents[1]


def _ensure_python_path():
    repo = _repo_root()
    pkg_dir = repo / "python"
    if str(pkg_dir) not in sys.path:
        sys.path.insert(0, str(pkg_dir))


_ensure_python_path()

from pbrtscene.params import ParamList  # noqa: E402


def pytest_configure(config):
    config.addinivalue_line("markers", "scene: tests that assemble whole scenes from directives")


@pytest.fixture
def params():
    """Build a ParamList from ``{"<kind> <name>": value}`` mappings."""

    def _make(mapping=None):
        return ParamList.from_mapping(dict(mapping or {}))

    return _make
