from factory_finder._internal.finder import InterfaceDescriptor, find

__all__ = ["InterfaceDescriptor", "find"]
