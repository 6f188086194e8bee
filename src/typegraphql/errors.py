"""Errors raised while compiling Python types into a GraphQL type graph.

Every error is raised at schema-build time and aborts the whole top-level
compilation that triggered it: no partial type graph is returned.
"""


class TypeGraphError(ValueError):
    """Base class for compilation errors.

    Carries the name of the offending type so callers can report it without
    parsing the message.
    """

    def __init__(self, type_name: str, message: str) -> None:
        super().__init__(message)
        self.type_name = type_name


class InvalidRootTypeError(TypeGraphError):
    """Raised when a root-level entry point is handed something that is not a dataclass."""

    def __init__(self, type_name: str) -> None:
        super().__init__(type_name, f"Root type '{type_name}' must be a dataclass")


class UnsupportedKindError(TypeGraphError):
    """Raised when a type is neither registered nor a primitive kind with a built-in scalar."""

    def __init__(self, type_name: str, reason: str | None = None) -> None:
        message = f"Type '{type_name}' has no GraphQL mapping"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(type_name, message)


class CircularReferenceError(TypeGraphError):
    """Raised when a type is reached again along its own chain of enclosing types.

    ``chain`` lists the enclosing type names from the root down to the repeated
    type, e.g. ``("Author", "Book", "Author")``.
    """

    def __init__(self, type_name: str, chain: tuple[str, ...] = ()) -> None:
        self.chain = chain or (type_name,)
        super().__init__(type_name, f"Loading type '{type_name}' hits a loop: {' -> '.join(self.chain)}")


class DuplicateTypeError(TypeGraphError):
    """Raised by a strict registry when a type is registered twice."""

    def __init__(self, type_name: str) -> None:
        super().__init__(type_name, f"Type '{type_name}' is already registered")


class DuplicateFieldError(TypeGraphError):
    """Raised when two members of one dataclass expose the same field name."""

    def __init__(self, type_name: str, field_name: str) -> None:
        super().__init__(type_name, f"Type '{type_name}' exposes field '{field_name}' more than once")
        self.field_name = field_name


class InvalidTagError(TypeGraphError):
    """Raised when a field tag carries an option that is not recognized."""

    def __init__(self, type_name: str, tag: str, option: str) -> None:
        super().__init__(type_name, f"Unknown option '{option}' in tag '{tag}'")
        self.tag = tag
        self.option = option


class InvalidHookError(TypeGraphError):
    """Raised when a type implements a customization hook that cannot be used.

    Hooks are looked up on the class, so they must be classmethods or
    staticmethods and return the documented type.
    """

    def __init__(self, type_name: str, hook: str, reason: str) -> None:
        super().__init__(type_name, f"Hook '{hook}' of type '{type_name}' {reason}")
        self.hook = hook
