"""
Operation descriptors: a handler's name, verb and ordered, role-tagged parameters.
"""

from enum import Enum
from typing import Any, Tuple

from pydantic import BaseModel, ConfigDict, field_validator

from affordances.models.verbs import Verb, normalize_verb, verb_name


class ParameterRole(str, Enum):
    BODY = "body"
    PATH = "path"
    QUERY = "query"
    HEADER = "header"
    COOKIE = "cookie"


class Parameter(BaseModel):
    """One declared handler parameter and where its value comes from."""
    model_config = ConfigDict(frozen=True)

    name: str
    annotation: Any = None
    role: ParameterRole = ParameterRole.QUERY

    @property
    def is_body(self) -> bool:
        return self.role == ParameterRole.BODY


class Operation(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    verb: Any
    parameters: Tuple[Parameter, ...] = ()

    @field_validator('verb', mode='before')
    @classmethod
    def _normalize_verb(cls, value: Any) -> Verb:
        return normalize_verb(value)

    @property
    def verb_name(self) -> str:
        return verb_name(self.verb)

    def body_parameters(self) -> Tuple[Parameter, ...]:
        """Body-tagged parameters in declaration order."""
        return tuple(p for p in self.parameters if p.is_body)


def body(name: str, annotation: Any) -> Parameter:
    return Parameter(name=name, annotation=annotation, role=ParameterRole.BODY)


def path(name: str, annotation: Any = str) -> Parameter:
    return Parameter(name=name, annotation=annotation, role=ParameterRole.PATH)


def query(name: str, annotation: Any = str) -> Parameter:
    return Parameter(name=name, annotation=annotation, role=ParameterRole.QUERY)


def operation(name: str, verb: Verb, *parameters: Parameter) -> Operation:
    """Factory for an operation descriptor, e.g. operation("create_user", "POST", body("user", User))."""
    return Operation(name=name, verb=verb, parameters=parameters)
