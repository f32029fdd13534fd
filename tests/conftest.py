"""
Shared pytest fixtures for semver-range tests.
"""

import sys
from pathlib import Path

import pytest

# Add src/ to Python path
src_root = Path(__file__).parent.parent / "src"
if str(src_root) not in sys.path:
    sys.path.insert(0, str(src_root))

from semver_range import Version  # noqa: E402
from semver_range.config import LOG_LEVEL_ENV_VAR, SECTIONS_ENV_VAR  # noqa: E402


@pytest.fixture
def v():
    """Shorthand for Version.from_semver."""
    return Version.from_semver


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep settings independent of the developer's environment."""
    monkeypatch.delenv(SECTIONS_ENV_VAR, raising=False)
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)


@pytest.fixture
def manifest():
    """package.json-shaped manifest used by the audit tests."""
    return {
        "name": "example-app",
        "dependencies": {
            "left-pad": "^1.2",
            "lodash": ">=4.17.0 <5",
            "chalk": "~2.4.1",
        },
        "devDependencies": {
            "mocha": "10.2.0 || 10.3.0",
        },
        "peerDependencies": {
            "react": "^18.0.0",
        },
    }


@pytest.fixture
def installed():
    """package -> installed version mapping, as read from a lockfile."""
    return {
        "left-pad": "1.3.0",
        "lodash": "4.17.21",
        "chalk": "2.5.0",
        "mocha": "10.3.0+sha.1",
    }
