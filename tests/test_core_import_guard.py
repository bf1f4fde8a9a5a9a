import ast
import importlib.util
from pathlib import Path


def _load_guard():
    script = (
        Path(__file__).resolve().parent.parent / "scripts" / "check_core_imports.py"
    )
    spec = importlib.util.spec_from_file_location("check_core_imports", script)
    module = importlib.util.module_from_spec(spec)
    assert spec.loader is not None  # for mypy
    spec.loader.exec_module(module)
    return module


def test_core_does_not_import_resource_layer():
    assert _load_guard().main() == 0, "core import guard failed"


def test_relative_imports_are_resolved():
    guard = _load_guard()
    node = ast.parse("from ..models import Customer").body[0]
    assert guard.absolute_module(node) == "dwolla_hal.models"
    assert guard.is_forbidden(guard.absolute_module(node))
