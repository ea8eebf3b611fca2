"""
Boots the example framework tree under examples/ and resolves its classes.
"""

import pytest

from autoload.bootstrap import Bootstrap
from autoload.shared.errors import BootstrapError, SymbolNotFoundError

PRELOADERS = [
    "Acme/Core/Base/Master",
    "Acme/Core/Base/Base",
]


@pytest.fixture
def framework(examples_dir):
    return Bootstrap(examples_dir / "framework" / "core", preloaders=PRELOADERS).boot()


class TestDemos:

    def test_preloaded_hierarchy(self, framework):
        master = framework.symbols.get("Acme/Core/Base/Master")
        base = framework.symbols.get("Acme/Core/Base/Base")
        assert issubclass(base, master)

    def test_on_demand_class_with_hook(self, framework):
        arr = framework.lookup("Acme/Core/Support/Arr")
        assert arr.booted is True
        assert issubclass(arr, framework.symbols.get("Acme/Core/Base/Base"))
        assert arr.first([3, 4]) == 3

    def test_suffixed_class(self, framework):
        helper = framework.lookup("Acme/Core/Support/Arr_Helper")
        assert helper.flatten([[1], [2, 3]]) == [1, 2, 3]

    def test_foreign_namespace_declined(self, framework):
        with pytest.raises(SymbolNotFoundError):
            framework.lookup("Other/Core/Support/Arr")

    def test_app_root_strategy(self, framework, examples_dir):
        framework.append("app", examples_dir / "app")
        request = framework.lookup("App/Http/Request")("/home")
        assert request.path == "/home"

    def test_preload_order_matters(self, examples_dir):
        bootstrap = Bootstrap(examples_dir / "framework" / "core", preloaders=list(reversed(PRELOADERS)))
        with pytest.raises(BootstrapError):
            bootstrap.boot()
