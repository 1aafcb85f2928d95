from .verbs import HttpVerb, MUTATING_VERBS, REQUIRED_VERBS, is_mutating, is_required, normalize_verb, verb_name
from .operation import Operation, Parameter, ParameterRole, body, operation, path, query
from .affordance import Affordance

__all__ = [
    "HttpVerb", "MUTATING_VERBS", "REQUIRED_VERBS", "is_mutating", "is_required", "normalize_verb", "verb_name",
    "Operation", "Parameter", "ParameterRole", "body", "operation", "path", "query",
    "Affordance",
]
