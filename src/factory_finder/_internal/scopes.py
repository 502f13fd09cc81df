from __future__ import annotations

import importlib
import io
import os
import sys
from collections.abc import Mapping
from importlib import resources as importlib_resources
from importlib.util import resolve_name
from pathlib import Path
from typing import IO, TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from importlib.resources.abc import Traversable

SERVICES_RESOURCE_PREFIX = "META-INF/services/"
"""Provider-configuration directory shared with the ``java.util.ServiceLoader`` layout."""


def services_resource_path(interface_name: str) -> str:
    """Return the provider-configuration resource path for an interface name."""
    return SERVICES_RESOURCE_PREFIX + interface_name


class TypeLookupError(LookupError):
    """Signal that a loading scope has nothing under the requested name.

    Loading scopes raise this (or any other ``LookupError``) from ``load_type``
    when the name cannot be located. Any other exception means the name was
    located but failed while loading.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"'{name}' cannot be located")


class LoadingScope(Protocol):
    """Resolve provider-configuration resources and implementation types.

    A loading scope is the module boundary an interface lives in. ``find``
    asks it for the ``META-INF/services`` resource and then for the named
    implementation type, and drops the scope when the call returns.
    """

    def open_resource(self, path: str) -> IO[bytes] | None:
        """Open ``path`` as a binary stream, or return ``None`` when it is absent.

        The caller closes the returned stream. ``OSError`` may be raised and is
        treated as an absent resource.

        Args:
            path: Slash-separated resource path such as
                ``META-INF/services/myapp.api.Greeter``.

        """
        ...

    def load_type(self, name: str) -> object:
        """Return the object registered under ``name``.

        Args:
            name: Implementation name produced by a lookup strategy.

        Raises:
            LookupError: ``name`` cannot be located in this scope.

        """
        ...


class ModuleLoadingScope:
    """Load resources and types relative to the module that defines an interface.

    Resources are searched first in every ``sys.path`` directory (the system
    roots) and then inside the interface's top-level package through
    ``importlib.resources``. The first existing resource wins.

    Implementation names are imported with ``importlib``:

    * ``package.module.ClassName`` and ``package.module.Outer.Inner``;
    * ``package.module:ClassName`` in entry-point notation;
    * ``.module.ClassName``, relative to the interface's package;
    * ``ClassName``, an attribute of the interface's own module.

    Only module and package names are stored, never module objects, so the
    scope keeps nothing alive that the import system would otherwise drop.
    """

    def __init__(
        self,
        module_name: str,
        *,
        package: str | None = None,
        search_system_path: bool = True,
    ) -> None:
        """Initialize a scope anchored at ``module_name``.

        Args:
            module_name: Module that defines the interface.
            package: Package used for relative names. Defaults to the module's
                ``__package__`` when it is imported, else its parent name.
            search_system_path: Look for resources in ``sys.path`` directories
                before the interface's own package.

        """
        self.module_name = module_name
        self.package = _package_of(module_name) if package is None else package
        self.search_system_path = search_system_path

    @classmethod
    def for_interface(
        cls,
        interface: type[Any],
        *,
        search_system_path: bool = True,
    ) -> ModuleLoadingScope:
        """Build the scope of the module that defines ``interface``."""
        return cls(interface.__module__, search_system_path=search_system_path)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.module_name!r}, package={self.package!r}, "
            f"search_system_path={self.search_system_path})"
        )

    def open_resource(self, path: str) -> IO[bytes] | None:
        parts = path.split("/")
        if self.search_system_path:
            for entry in sys.path:
                candidate = Path(entry or os.curdir).joinpath(*parts)
                try:
                    if candidate.is_file():
                        return candidate.open("rb")
                except OSError:
                    # Unreadable roots are skipped like absent ones.
                    continue

        root = self._package_root()
        if root is None:
            return None
        resource = root
        for part in parts:
            resource = resource.joinpath(part)
        if not resource.is_file():
            return None
        return resource.open("rb")

    def load_type(self, name: str) -> object:
        if not name:
            raise TypeLookupError(name)
        target, colon, attribute_path = name.partition(":")
        if target.startswith("."):
            try:
                target = resolve_name(target, self.package)
            except (ImportError, ValueError) as error:
                raise TypeLookupError(name) from error
        if colon:
            return _get_attribute_path(_import_located(target, name), attribute_path, name)
        if "." not in target:
            return _get_attribute_path(_import_located(self.module_name, name), target, name)

        parts = target.split(".")
        for split_at in range(len(parts) - 1, 0, -1):
            module_name = ".".join(parts[:split_at])
            try:
                module = importlib.import_module(module_name)
            except ModuleNotFoundError as error:
                if _is_missing(error, module_name):
                    continue
                raise
            except ValueError as error:
                raise TypeLookupError(name) from error
            return _get_attribute_path(module, ".".join(parts[split_at:]), name)
        raise TypeLookupError(name)

    def _package_root(self) -> Traversable | None:
        top_level = (self.package or self.module_name).partition(".")[0]
        try:
            return importlib_resources.files(top_level)
        except (ModuleNotFoundError, TypeError, ValueError):
            return None


class MappingLoadingScope:
    """Serve resources and types from caller-owned mappings.

    Useful for hosts that keep provider configuration outside the filesystem
    and for isolating lookups in tests. Resource values may be ``bytes`` or
    ``str`` (encoded as UTF-8).
    """

    def __init__(
        self,
        resources: Mapping[str, bytes | str] | None = None,
        types: Mapping[str, object] | None = None,
    ) -> None:
        self.resources = {} if resources is None else resources
        self.types = {} if types is None else types

    def open_resource(self, path: str) -> IO[bytes] | None:
        content = self.resources.get(path)
        if content is None:
            return None
        if isinstance(content, str):
            content = content.encode("utf-8")
        return io.BytesIO(content)

    def load_type(self, name: str) -> object:
        try:
            return self.types[name]
        except KeyError as error:
            raise TypeLookupError(name) from error


def _package_of(module_name: str) -> str:
    module = sys.modules.get(module_name)
    package = getattr(module, "__package__", None)
    if isinstance(package, str):
        return package
    return module_name.rpartition(".")[0]


def _is_missing(error: ModuleNotFoundError, module_name: str) -> bool:
    # True when the module itself (or a parent) is missing, not one of its imports.
    missing = error.name
    if missing is None:
        return False
    return module_name == missing or module_name.startswith(missing + ".")


def _import_located(module_name: str, name: str) -> Any:
    try:
        return importlib.import_module(module_name)
    except ModuleNotFoundError as error:
        if _is_missing(error, module_name):
            raise TypeLookupError(name) from error
        raise
    except ValueError as error:
        raise TypeLookupError(name) from error


def _get_attribute_path(target: Any, attribute_path: str, name: str) -> object:
    for attribute in attribute_path.split("."):
        try:
            target = getattr(target, attribute)
        except AttributeError as error:
            raise TypeLookupError(name) from error
    return target


__all__ = [
    "SERVICES_RESOURCE_PREFIX",
    "LoadingScope",
    "MappingLoadingScope",
    "ModuleLoadingScope",
    "TypeLookupError",
    "services_resource_path",
]
