"""
Tests for SourceLoader: executing units and defining their classes.
"""

import sys
import pytest

from autoload.runtime.source_loader import unit_module_name
from autoload.shared.errors import (
    AutoloadError,
    CircularLoadError,
    SourceLoadError,
    SymbolRedefinitionError,
)
from autoload.utils.config import UNIT_MODULE_PREFIX
from tests.test_utils import class_unit, write_unit


class TestLoad:

    def test_defines_public_classes_under_namespace(self, tmp_path, source_loader, symbols):
        path = write_unit(tmp_path, "Request.py", class_unit("Request", "Response"))
        unit = source_loader.load(path, "Acme/Http")
        assert unit.symbols == ["Acme/Http/Request", "Acme/Http/Response"]
        assert unit.namespace == "Acme/Http"
        assert symbols.get("Acme/Http/Request").__name__ == "Request"
        assert unit.module.__file__ == str(path.resolve())

    def test_skips_private_and_imported_classes(self, tmp_path, source_loader, symbols):
        path = write_unit(tmp_path, "Cache.py", """
            from collections import OrderedDict


            class _Entry:
                pass


            class Cache(OrderedDict):
                pass
        """)
        unit = source_loader.load(path, "Acme")
        assert unit.symbols == ["Acme/Cache"]
        assert "Acme/OrderedDict" not in symbols
        assert "Acme/_Entry" not in symbols

    def test_unit_namespace_wins(self, tmp_path, source_loader, symbols):
        path = write_unit(tmp_path, "Master.py", """
            __namespace__ = "Acme/Core/Base"


            class Master:
                pass
        """)
        unit = source_loader.load(path, "Something/Else")
        assert unit.symbols == ["Acme/Core/Base/Master"]

    def test_symbol_table_injected(self, tmp_path, source_loader, symbols):
        symbols.define("Acme/Parent", type("Parent", (), {}))
        path = write_unit(tmp_path, "Child.py", """
            Parent = __symbols__.lookup("Acme/Parent")


            class Child(Parent):
                pass
        """)
        source_loader.load(path, "Acme")
        child = symbols.get("Acme/Child")
        assert issubclass(child, symbols.get("Acme/Parent"))
        assert symbols.names() == ["Acme/Parent", "Acme/Child"]

    def test_dataclass_units_work(self, tmp_path, source_loader, symbols):
        path = write_unit(tmp_path, "Point.py", """
            from dataclasses import dataclass


            @dataclass
            class Point:
                x: int = 0
                y: int = 0
        """)
        source_loader.load(path, "Geo")
        assert symbols.get("Geo/Point")(1, 2).y == 2

    def test_second_load_is_cached(self, tmp_path, source_loader):
        path = write_unit(tmp_path, "Once.py", class_unit("Once"))
        first = source_loader.load(path, "Acme")
        assert source_loader.load(path, "Acme") is first
        assert source_loader.is_unit_loaded(path)
        assert source_loader.get_unit(path) is first

    def test_module_registered(self, tmp_path, source_loader):
        path = write_unit(tmp_path, "Reg.py", class_unit("Reg"))
        unit = source_loader.load(path, "Acme")
        assert sys.modules[unit.module.__name__] is unit.module

    def test_encoding_declaration_honoured(self, tmp_path, source_loader, symbols):
        path = tmp_path / "Cafe.py"
        path.write_bytes(
            b"# -*- coding: latin-1 -*-\n"
            b"class Cafe:\n"
            b"    name = \"caf\xe9\"\n"
        )
        source_loader.load(path, "Acme")
        assert symbols.get("Acme/Cafe").name == "caf\u00e9"


class TestLoadFailures:

    def test_missing_file(self, tmp_path, source_loader):
        with pytest.raises(SourceLoadError) as exc_info:
            source_loader.load(tmp_path / "Nope.py", "Acme")
        assert exc_info.value.path == (tmp_path / "Nope.py").resolve()

    def test_syntax_error(self, tmp_path, source_loader):
        path = write_unit(tmp_path, "Broken.py", "class Broken(:\n    pass\n")
        with pytest.raises(SourceLoadError) as exc_info:
            source_loader.load(path, "Acme")
        assert isinstance(exc_info.value.__cause__, SyntaxError)
        assert unit_module_name(path.resolve()) not in sys.modules
        assert not source_loader.is_unit_loaded(path)

    def test_runtime_error(self, tmp_path, source_loader):
        path = write_unit(tmp_path, "Boom.py", "raise RuntimeError('boom')\n")
        with pytest.raises(SourceLoadError) as exc_info:
            source_loader.load(path, "Acme")
        assert "RuntimeError: boom" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, RuntimeError)

    def test_nested_autoload_error_propagates_unchanged(self, tmp_path, source_loader):
        path = write_unit(tmp_path, "Needy.py", """
            Missing = __symbols__.lookup("Acme/Missing")
        """)
        with pytest.raises(AutoloadError) as exc_info:
            source_loader.load(path, "Acme")
        assert not isinstance(exc_info.value, SourceLoadError)

    def test_circular_load(self, tmp_path, source_loader, symbols):
        path = write_unit(tmp_path, "Loop.py", """
            Again = __symbols__.lookup("Acme/Again")
        """)
        symbols.set_missing_handler(lambda name: source_loader.load(path, "Acme"))
        with pytest.raises(CircularLoadError) as exc_info:
            source_loader.load(path, "Acme")
        assert exc_info.value.chain == (path.resolve(), path.resolve())
        assert isinstance(exc_info.value, SourceLoadError)

    def test_name_clash_defines_nothing(self, tmp_path, source_loader, symbols):
        symbols.define("Ns/Taken", type("Taken", (), {}))
        path = write_unit(tmp_path, "Pair.py", class_unit("Pair", "Taken"))
        with pytest.raises(SymbolRedefinitionError) as exc_info:
            source_loader.load(path, "Ns")
        assert exc_info.value.symbol == "Ns/Taken"
        assert not symbols.is_defined("Ns/Pair")
        assert symbols.names() == ["Ns/Taken"]
        assert not source_loader.is_unit_loaded(path)
        assert unit_module_name(path.resolve()) not in sys.modules

    def test_retry_after_name_clash_fails_the_same_way(self, tmp_path, source_loader, symbols):
        symbols.define("Ns/Taken", type("Taken", (), {}))
        path = write_unit(tmp_path, "Pair.py", class_unit("Pair", "Taken"))
        for _ in range(2):
            with pytest.raises(SymbolRedefinitionError) as exc_info:
                source_loader.load(path, "Ns")
            assert exc_info.value.symbol == "Ns/Taken"
        assert not symbols.is_defined("Ns/Pair")


class TestHelpers:

    def test_is_regular_file(self, tmp_path, source_loader):
        path = write_unit(tmp_path, "File.py", "")
        assert source_loader.is_regular_file(path)
        assert not source_loader.is_regular_file(tmp_path)
        assert not source_loader.is_regular_file(tmp_path / "missing.py")
        assert not source_loader.is_regular_file(None)
        assert not source_loader.is_regular_file("")

    def test_unit_module_name_stable(self, tmp_path):
        path = tmp_path / "Unit.py"
        assert unit_module_name(path) == unit_module_name(path)
        assert unit_module_name(path).startswith(UNIT_MODULE_PREFIX)
        assert unit_module_name(path) != unit_module_name(tmp_path / "Other.py")
