"""
The affordance value: what a client has to send to invoke one operation.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping

from affordances.exceptions import InvalidAffordanceError
from affordances.models.verbs import Verb, is_mutating, normalize_verb, verb_name


@dataclass(frozen=True)
class Affordance:
    """Verb, required flag and first-level request body properties of one operation.

    Instances are immutable; ``properties`` is exposed as a read-only mapping.
    """

    operation_name: str
    verb: Verb
    required: bool
    properties: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, 'verb', normalize_verb(self.verb))
        object.__setattr__(self, 'properties', MappingProxyType(dict(self.properties)))
        if self.properties and not is_mutating(self.verb):
            raise InvalidAffordanceError(
                f"{self.verb_name} affordance for '{self.operation_name}' cannot carry properties",
                self.operation_name,
            )

    @property
    def verb_name(self) -> str:
        return verb_name(self.verb)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "operation": self.operation_name,
            "verb": self.verb_name,
            "required": self.required,
            "properties": {name: _type_name(tp) for name, tp in self.properties.items()},
        }


def _type_name(tp: Any) -> str:
    return getattr(tp, '__name__', None) or str(tp)
