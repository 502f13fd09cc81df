"""Shared pytest fixtures for factory_finder tests."""

from __future__ import annotations

import importlib
import sys
import textwrap
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

import pytest

PLUGIN_PACKAGE = "greetings_plugin"
GREETER_NAME = f"{PLUGIN_PACKAGE}.api.Greeter"

_PLUGIN_MODULES: dict[str, str] = {
    "__init__.py": "",
    "api.py": """
        from abc import ABC, abstractmethod


        class Greeter(ABC):
            @abstractmethod
            def greet(self) -> str: ...
    """,
    "impl.py": """
        from greetings_plugin.api import Greeter


        class SpanishGreeter(Greeter):
            def greet(self) -> str:
                return "hola"


        class EnglishGreeter(Greeter):
            def greet(self) -> str:
                return "hello"


        class DefaultGreeter(Greeter):
            def greet(self) -> str:
                return "hi"


        class Outer:
            class NestedGreeter(Greeter):
                def greet(self) -> str:
                    return "nested"


        class NamedGreeter(Greeter):
            def __init__(self, name: str) -> None:
                self.name = name

            def greet(self) -> str:
                return f"hi {self.name}"


        class FailingGreeter(Greeter):
            def __init__(self) -> None:
                raise RuntimeError("constructor failed")

            def greet(self) -> str:
                return "never"


        def make_greeter() -> Greeter:
            return SpanishGreeter()
    """,
    "broken.py": """
        import greetings_plugin_missing_dependency  # noqa: F401


        class BrokenGreeter:
            pass
    """,
    "exploding.py": """
        raise RuntimeError("import failed")
    """,
}


@dataclass(frozen=True)
class PluginPackage:
    """A throwaway importable package with a ``Greeter`` interface."""

    site_dir: Path
    package_dir: Path
    greeter: type

    def write_package_resource(self, interface_name: str, content: str | bytes) -> Path:
        return _write_resource(self.package_dir, interface_name, content)

    def write_system_resource(
        self,
        root: Path,
        interface_name: str,
        content: str | bytes,
    ) -> Path:
        return _write_resource(root, interface_name, content)


def _write_resource(root: Path, interface_name: str, content: str | bytes) -> Path:
    path = root / "META-INF" / "services" / interface_name
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(content, str):
        path.write_text(content, encoding="utf-8")
    else:
        path.write_bytes(content)
    return path


def _drop_plugin_modules() -> None:
    for name in list(sys.modules):
        if name == PLUGIN_PACKAGE or name.startswith(PLUGIN_PACKAGE + "."):
            del sys.modules[name]


@pytest.fixture()
def plugin_package(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[PluginPackage]:
    """Importable ``greetings_plugin`` package rooted in a temporary site dir."""
    site_dir = tmp_path / "site"
    package_dir = site_dir / PLUGIN_PACKAGE
    package_dir.mkdir(parents=True)
    for filename, source in _PLUGIN_MODULES.items():
        (package_dir / filename).write_text(textwrap.dedent(source), encoding="utf-8")

    _drop_plugin_modules()
    monkeypatch.syspath_prepend(str(site_dir))
    api = importlib.import_module(f"{PLUGIN_PACKAGE}.api")
    yield PluginPackage(site_dir=site_dir, package_dir=package_dir, greeter=api.Greeter)
    _drop_plugin_modules()


@pytest.fixture(autouse=True)
def _clear_greeter_property(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the process environment from leaking a Greeter property into tests."""
    monkeypatch.delenv(GREETER_NAME, raising=False)
