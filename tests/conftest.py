"""Shared pytest fixtures for jailconf tests."""

from pathlib import Path

import pytest


@pytest.fixture
def fixtures_dir() -> Path:
    """Return path to fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def conf_fixtures_dir(fixtures_dir: Path) -> Path:
    """Return path to jail.conf fixtures directory."""
    return fixtures_dir / "conf"


@pytest.fixture
def ioc_test_jail_conf(conf_fixtures_dir: Path) -> Path:
    return conf_fixtures_dir / "ioc-test-jail.conf"


@pytest.fixture
def full_conf(conf_fixtures_dir: Path) -> Path:
    """Global parameters, two blocks and all three comment styles."""
    return conf_fixtures_dir / "full.conf"


@pytest.fixture
def nginx_conf(conf_fixtures_dir: Path) -> Path:
    return conf_fixtures_dir / "nginx.conf"
