from factory_finder._internal.properties import (
    EnvironPropertyStore,
    MappingPropertyStore,
    PropertyStore,
)

__all__ = ["EnvironPropertyStore", "MappingPropertyStore", "PropertyStore"]
