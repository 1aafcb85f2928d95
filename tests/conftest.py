"""Pytest configuration for affordances."""
import logging
import sys
from pathlib import Path

import pytest
from pydantic import BaseModel

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from affordances.config import Config  # noqa: E402
from affordances.services.schema import SchemaRegistry  # noqa: E402


class Person(BaseModel):
    name: str
    age: int


@pytest.fixture(autouse=True)
def reset_config():
    root_level = logging.getLogger().level
    Config.reset()
    yield
    Config.reset()
    logging.getLogger().setLevel(root_level)


@pytest.fixture
def registry():
    return SchemaRegistry()


@pytest.fixture
def person_model():
    return Person
