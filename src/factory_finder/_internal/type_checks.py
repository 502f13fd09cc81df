from __future__ import annotations

import types
from typing import Any, TypeGuard


def is_runtime_class(candidate: object) -> TypeGuard[type[Any]]:
    """Return true when candidate can serve as an interface or be instantiated.

    ``find`` applies this twice: to the interface it is asked to resolve, and
    to whatever the loading scope returns for the implementation name.
    Parameterized aliases such as ``list[int]`` are rejected because they have
    no ``__qualname__`` to build a property key from and cannot be a provider.

    Args:
        candidate: Interface argument or loaded implementation object.

    """
    return isinstance(candidate, type) and not isinstance(candidate, types.GenericAlias)


def qualified_name(cls: type[Any]) -> str:
    """Return the dotted ``module.QualName`` used as property key and resource name."""
    return f"{cls.__module__}.{cls.__qualname__}"


__all__ = ["is_runtime_class", "qualified_name"]
