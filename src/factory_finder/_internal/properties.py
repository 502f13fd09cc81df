from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Protocol


class PropertyStore(Protocol):
    """Read named string properties, the first lookup strategy of ``find``."""

    def get_property(self, key: str) -> str | None:
        """Return the property value for ``key`` or ``None`` when it is not set."""
        ...


class MappingPropertyStore:
    """Serve properties from a caller-owned mapping.

    The mapping is read at lookup time, so later changes to it are visible to
    the next ``find`` call. Empty values count as unset.
    """

    def __init__(self, mapping: Mapping[str, str]) -> None:
        self._mapping = mapping

    def get_property(self, key: str) -> str | None:
        return self._mapping.get(key) or None


class EnvironPropertyStore(MappingPropertyStore):
    """Serve properties from the process environment.

    Keys are interface names such as ``myapp.storage.Storage``. Shells cannot
    export names containing dots, so hosts usually set them through
    ``os.environ`` or a process supervisor.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        super().__init__(os.environ if environ is None else environ)


__all__ = ["EnvironPropertyStore", "MappingPropertyStore", "PropertyStore"]
