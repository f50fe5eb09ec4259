"""Pytest fixtures for testing."""

from pathlib import Path
from unittest.mock import patch

import pytest

from wirebox.core.container import Container
from wirebox.services.inspector import TypeInspector
from wirebox.services.registry import TypeRegistry
from wirebox.utils.config import Config


@pytest.fixture
def config() -> Config:
    """Default configuration."""
    return Config()


@pytest.fixture
def container(config) -> Container:
    """Empty container with default collaborators."""
    return Container(config=config)


@pytest.fixture
def chained_container() -> Container:
    """Container that follows binding chains transitively."""
    return Container(config=Config(follow_binding_chains=True))


@pytest.fixture
def inspector() -> TypeInspector:
    return TypeInspector()


@pytest.fixture
def registry() -> TypeRegistry:
    return TypeRegistry()


@pytest.fixture
def config_path(tmp_path) -> Path:
    """Redirect the config file into a temporary directory."""
    path = tmp_path / "config.json"
    with patch.object(Config, "get_config_path", return_value=path):
        yield path
