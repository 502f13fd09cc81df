from factory_finder._internal.scopes import (
    SERVICES_RESOURCE_PREFIX,
    LoadingScope,
    MappingLoadingScope,
    ModuleLoadingScope,
    TypeLookupError,
    services_resource_path,
)

__all__ = [
    "SERVICES_RESOURCE_PREFIX",
    "LoadingScope",
    "MappingLoadingScope",
    "ModuleLoadingScope",
    "TypeLookupError",
    "services_resource_path",
]
