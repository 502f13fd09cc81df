from factory_finder.exceptions import (
    FactoryFinderError,
    FactoryFinderImplementationNotFoundError,
    FactoryFinderInstantiationError,
    FactoryFinderInvalidArgumentError,
    FactoryFinderNotFoundError,
)
from factory_finder.finder import InterfaceDescriptor, find
from factory_finder.properties import (
    EnvironPropertyStore,
    MappingPropertyStore,
    PropertyStore,
)
from factory_finder.scopes import (
    SERVICES_RESOURCE_PREFIX,
    LoadingScope,
    MappingLoadingScope,
    ModuleLoadingScope,
    TypeLookupError,
    services_resource_path,
)

__all__ = [
    "SERVICES_RESOURCE_PREFIX",
    "EnvironPropertyStore",
    "FactoryFinderError",
    "FactoryFinderImplementationNotFoundError",
    "FactoryFinderInstantiationError",
    "FactoryFinderInvalidArgumentError",
    "FactoryFinderNotFoundError",
    "InterfaceDescriptor",
    "LoadingScope",
    "MappingLoadingScope",
    "MappingPropertyStore",
    "ModuleLoadingScope",
    "PropertyStore",
    "TypeLookupError",
    "find",
    "services_resource_path",
]
