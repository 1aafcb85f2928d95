"""
Exception definitions for affordance inference.
Failures from schema derivation itself (unresolvable annotations and the like)
are not wrapped here; they reach the caller unchanged.
"""

from typing import Any


class AffordanceError(Exception):
    """Base class for errors raised by the affordances package."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class DuplicatePropertyError(AffordanceError):
    """Raised when two property sources of one type declare the same name with different types
    and the duplicate policy is 'error'."""

    def __init__(self, type_name: str, property_name: str, first: Any, second: Any):
        self.type_name = type_name
        self.property_name = property_name
        self.first = first
        self.second = second
        super().__init__(
            f"Property '{property_name}' of {type_name} declared as both {first!r} and {second!r}"
        )


class InvalidAffordanceError(AffordanceError, ValueError):
    """Raised when an affordance would be constructed in a state that breaks its invariants."""

    def __init__(self, message: str, operation_name: str = ""):
        self.operation_name = operation_name
        super().__init__(message)
