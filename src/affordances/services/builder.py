"""
Affordance inference for a single operation.

The builder classifies the verb, finds the request body parameter of mutating
operations and describes the body type's first-level properties.  Progress is
logged at DEBUG level and, when supplied, reported to an observability hook
``hook(event, data)``; the hook is informational only.
"""

import logging
from typing import Any, Callable, Dict, Optional

from affordances.models.affordance import Affordance
from affordances.models.operation import Operation
from affordances.models.verbs import is_mutating, is_required
from affordances.services.locator import locate_body_type
from affordances.services.schema import SchemaRegistry, default_registry

logger = logging.getLogger(__name__)

AffordanceHook = Callable[[str, Dict[str, Any]], None]


class AffordanceBuilder:
    """Builds Affordance values from operation descriptors."""

    def __init__(self, registry: Optional[SchemaRegistry] = None, hook: Optional[AffordanceHook] = None):
        self.registry = registry or default_registry
        self.hook = hook

    def build(self, operation: Operation) -> Affordance:
        required = is_required(operation.verb)
        properties: Dict[str, Any] = {}

        if is_mutating(operation.verb):
            body_type = locate_body_type(operation)
            if body_type is None:
                self._emit("body.absent", operation=operation.name, verb=operation.verb_name)
            else:
                self._emit("body.located", operation=operation.name, verb=operation.verb_name, type=body_type)
                properties = self.registry.properties(body_type)

        affordance = Affordance(
            operation_name=operation.name,
            verb=operation.verb,
            required=required,
            properties=properties,
        )
        self._emit("affordance.built", operation=operation.name, verb=operation.verb_name,
                   required=required, properties=list(properties))
        return affordance

    def _emit(self, event: str, **data: Any) -> None:
        logger.debug(f"{event}: {data}")
        if self.hook is None:
            return
        try:
            self.hook(event, data)
        except Exception as e:
            logger.warning(f"Affordance hook failed on {event}: {e}")


def build_affordance(operation: Operation, registry: Optional[SchemaRegistry] = None,
                     hook: Optional[AffordanceHook] = None) -> Affordance:
    """Build the affordance of one operation with a one-off builder."""
    return AffordanceBuilder(registry, hook).build(operation)
