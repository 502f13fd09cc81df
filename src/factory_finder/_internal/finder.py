from __future__ import annotations

import logging
from contextvars import Context
from dataclasses import dataclass
from typing import Any, TypeVar, cast

from factory_finder._internal.properties import EnvironPropertyStore, PropertyStore
from factory_finder._internal.scopes import (
    LoadingScope,
    ModuleLoadingScope,
    services_resource_path,
)
from factory_finder._internal.type_checks import is_runtime_class, qualified_name
from factory_finder.exceptions import (
    FactoryFinderImplementationNotFoundError,
    FactoryFinderInstantiationError,
    FactoryFinderInvalidArgumentError,
    FactoryFinderNotFoundError,
)

T = TypeVar("T")

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class InterfaceDescriptor:
    """Identify the interface being resolved and the scope it was loaded from.

    Built once per ``find`` call and discarded with it.
    """

    name: str
    scope: LoadingScope

    @classmethod
    def from_interface(
        cls,
        interface: object,
        scope: LoadingScope | None = None,
    ) -> InterfaceDescriptor:
        """Describe ``interface``, defaulting to the scope of its defining module.

        Args:
            interface: Abstract class or protocol whose implementation is looked up.
            scope: Loading scope override.

        Raises:
            FactoryFinderInvalidArgumentError: ``interface`` is ``None`` or not a class.

        """
        if interface is None:
            msg = "Factory interface class cannot be None"
            raise FactoryFinderInvalidArgumentError(msg)
        if not is_runtime_class(interface):
            msg = f"Factory interface must be a class, got {interface!r}"
            raise FactoryFinderInvalidArgumentError(msg)
        if scope is None:
            scope = ModuleLoadingScope.for_interface(interface)
        return cls(name=qualified_name(interface), scope=scope)


def find(
    interface: type[T],
    fallback: str | None = None,
    *,
    properties: PropertyStore | None = None,
    scope: LoadingScope | None = None,
    context: Context | None = None,
) -> T:
    """Instantiate the configured implementation of ``interface``.

    The implementation name comes from the first strategy that yields one:

    1. the property whose key is the interface's fully-qualified name
       (``module.QualName``);
    2. the first line of the ``META-INF/services/<module.QualName>`` resource
       in the interface's loading scope, whitespace stripped;
    3. ``fallback``.

    The named class is then loaded from the same scope and called with no
    arguments. Nothing is cached: every call repeats the lookup and the
    scope, name and instance are only referenced by local variables.

    Examples:
        .. code-block:: python

            storage = find(Storage, "myapp.storage.LocalStorage")

    Args:
        interface: Abstract class or protocol to resolve.
        fallback: Implementation name used when neither the property nor the
            resource names one.
        properties: Property store for the first strategy. Defaults to the
            process environment.
        scope: Loading scope for the resource lookup and type loading.
            Defaults to the module that defines ``interface``.
        context: Execution context the property read runs in, for hosts that
            capture a privileged context at startup. Each call runs on a fresh
            copy, so the same context may be reused concurrently or from inside
            itself. Defaults to the caller's current context.

    Returns:
        A new instance, typed as ``interface`` without a runtime check.

    Raises:
        FactoryFinderInvalidArgumentError: ``interface`` is ``None`` or not a class.
        FactoryFinderNotFoundError: No strategy produced an implementation name.
        FactoryFinderImplementationNotFoundError: The name cannot be located.
        FactoryFinderInstantiationError: The located class cannot be constructed.

    """
    descriptor = InterfaceDescriptor.from_interface(interface, scope)
    if properties is None:
        properties = EnvironPropertyStore()

    implementation_name = _read_property(descriptor, properties, context)
    if implementation_name is None:
        implementation_name = _read_services_resource(descriptor)
    if implementation_name is None and fallback is not None:
        logger.debug("Using fallback '%s' for interface '%s'", fallback, descriptor.name)
        implementation_name = fallback
    if implementation_name is None:
        raise FactoryFinderNotFoundError(descriptor.name)

    return cast("T", _instantiate(implementation_name, descriptor.scope))


def _read_property(
    descriptor: InterfaceDescriptor,
    properties: PropertyStore,
    context: Context | None,
) -> str | None:
    if context is None:
        value = properties.get_property(descriptor.name)
    else:
        value = context.copy().run(properties.get_property, descriptor.name)
    if not value:
        return None
    logger.debug("Property '%s' selects implementation '%s'", descriptor.name, value)
    return value


def _read_services_resource(descriptor: InterfaceDescriptor) -> str | None:
    path = services_resource_path(descriptor.name)
    try:
        stream = descriptor.scope.open_resource(path)
        if stream is None:
            return None
        with stream:
            first_line = stream.readline()
        implementation_name = first_line.decode("utf-8").strip()
    except (OSError, UnicodeDecodeError):
        logger.debug("Ignoring unreadable provider configuration '%s'", path, exc_info=True)
        return None
    if not implementation_name:
        logger.debug("Ignoring empty provider configuration '%s'", path)
        return None
    logger.debug("Resource '%s' selects implementation '%s'", path, implementation_name)
    return implementation_name


def _instantiate(implementation_name: str, scope: LoadingScope) -> Any:
    try:
        implementation = scope.load_type(implementation_name)
    except LookupError as error:
        raise FactoryFinderImplementationNotFoundError(implementation_name) from error
    except Exception as error:
        raise FactoryFinderInstantiationError(implementation_name) from error

    if not is_runtime_class(implementation):
        cause = TypeError(f"{implementation!r} is not a class")
        raise FactoryFinderInstantiationError(implementation_name) from cause
    try:
        return implementation()
    except Exception as error:
        raise FactoryFinderInstantiationError(implementation_name) from error


__all__ = ["InterfaceDescriptor", "find"]
