from typing import Any


class NanoIDDecodeError(ValueError):
    """Raised when a serialized scalar cannot be decoded into a value object."""

    def __init__(self, value: Any, type_name: str, message: str):
        self.value = value
        self.type_name = type_name
        super().__init__(message)


class DataCorruptedError(NanoIDDecodeError):
    """The scalar is a string but it is not a valid representation of the target type."""

    def __init__(self, value: str, type_name: str):
        super().__init__(
            value,
            type_name,
            f'Failed to convert an instance of {type_name} from "{value}"',
        )


class TypeMismatchError(NanoIDDecodeError):
    """The scalar is not a string."""

    def __init__(self, value: Any, type_name: str):
        super().__init__(
            value,
            type_name,
            f"Expected a string to decode {type_name}, got {type(value).__name__}",
        )
