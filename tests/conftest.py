"""
Pytest configuration and shared fixtures for all autoload tests.

Every test gets fresh service objects; nothing is shared between tests
because the symbol table and dispatch queue are mutable.
"""

import sys
import pytest
from pathlib import Path

_PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(_PROJECT_ROOT / "src"))
sys.path.insert(0, str(_PROJECT_ROOT))
from autoload.loader import Autoload, LoaderRegistry
from autoload.runtime import DispatchQueue, SourceLoader, SymbolTable
from autoload.utils.config import UNIT_MODULE_PREFIX


@pytest.fixture
def symbols():
    return SymbolTable()


@pytest.fixture
def queue():
    """Small queue so capacity limits are easy to hit."""
    return DispatchQueue(capacity=4)


@pytest.fixture
def source_loader(symbols):
    return SourceLoader(symbols)


@pytest.fixture
def registry(queue, source_loader):
    return LoaderRegistry(queue, source_loader)


@pytest.fixture
def autoload():
    """Fresh Autoload service per test."""
    return Autoload()


@pytest.fixture
def examples_dir():
    return _PROJECT_ROOT / "examples"


@pytest.fixture(autouse=True)
def _drop_unit_modules():
    """Forget executed units so tests never see each other's modules."""
    yield
    for name in [m for m in sys.modules if m.startswith(UNIT_MODULE_PREFIX)]:
        del sys.modules[name]
