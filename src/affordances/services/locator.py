from typing import Any, Optional

from affordances.models.operation import Operation


def locate_body_type(operation: Operation) -> Optional[Any]:
    """Declared type of the first body-tagged parameter, or None when the operation takes no body."""
    for parameter in operation.parameters:
        if parameter.is_body:
            return parameter.annotation
    return None
