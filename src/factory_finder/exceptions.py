class FactoryFinderError(Exception):
    """Represent a base class for all factory-finder failures.

    Catch this type when you want to handle any lookup or instantiation error
    path without matching each concrete exception class individually.
    """


class FactoryFinderInvalidArgumentError(FactoryFinderError, ValueError):
    """Signal that ``find`` was called without a usable interface class.

    Raised immediately, before any lookup strategy runs, when the interface
    argument is ``None`` or is not a runtime class.
    """


class FactoryFinderNotFoundError(FactoryFinderError):
    """Signal that no lookup strategy produced an implementation name.

    Raised by ``find`` when the property store has no entry for the interface,
    no ``META-INF/services`` resource names an implementation, and no fallback
    name was supplied.

    Typical fixes include setting the property whose key is the interface's
    fully-qualified name, shipping a provider-configuration resource, or
    passing a fallback implementation name.
    """

    def __init__(self, interface_name: str) -> None:
        self.interface_name = interface_name
        super().__init__(f"Factory implementation for interface '{interface_name}' not found")


class FactoryFinderImplementationNotFoundError(FactoryFinderError):
    """Signal that an implementation name could not be located.

    Raised by ``find`` when a strategy produced a name but the loading scope
    has no module or attribute with that name. The lookup failure is chained
    as ``__cause__``.

    Typical fixes include correcting a typo in the configured name or making
    the implementation's distribution importable.
    """

    def __init__(self, implementation_name: str) -> None:
        self.implementation_name = implementation_name
        super().__init__(f"Factory '{implementation_name}' not found")


class FactoryFinderInstantiationError(FactoryFinderError):
    """Signal that a located implementation could not be constructed.

    Raised by ``find`` when the implementation's module fails while importing,
    when the name refers to something other than a class, or when calling the
    class with no arguments raises (abstract classes and required constructor
    parameters included). The original failure is chained as ``__cause__``.
    """

    def __init__(self, implementation_name: str) -> None:
        self.implementation_name = implementation_name
        super().__init__(f"Factory '{implementation_name}' not instantiated")
