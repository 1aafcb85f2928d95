"""
Operation descriptors for FastAPI endpoints.

Parameter roles come from FastAPI's own dependency analysis
(``get_dependant``), so a parameter is tagged ``body`` exactly when FastAPI
would read it from the request payload.  Framework-injected parameters
(requests, responses, background tasks) and ``Depends(...)`` sub-dependencies
are not inputs of the operation and are left out.
"""

import inspect
import logging
import types
import typing
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple, Union

from fastapi.dependencies.utils import get_dependant
from fastapi.routing import APIRoute

from affordances.models.affordance import Affordance
from affordances.models.operation import Operation, Parameter, ParameterRole
from affordances.models.verbs import Verb
from affordances.services.builder import AffordanceBuilder

logger = logging.getLogger(__name__)

_DEPENDANT_ROLES: Tuple[Tuple[str, ParameterRole], ...] = (
    ("path_params", ParameterRole.PATH),
    ("query_params", ParameterRole.QUERY),
    ("header_params", ParameterRole.HEADER),
    ("cookie_params", ParameterRole.COOKIE),
    ("body_params", ParameterRole.BODY),
)


def operation_from_endpoint(endpoint: Callable[..., Any], verb: Verb, path: str = "",
                            name: Optional[str] = None) -> Operation:
    """
    Build an operation descriptor from an endpoint function.

    Args:
        endpoint: The handler as registered with FastAPI
        verb: HTTP verb the handler serves
        path: Route path template, used to recognise path parameters
        name: Operation name; defaults to the function name

    Returns:
        Operation with role-tagged parameters in declaration order
    """
    dependant = get_dependant(path=path, call=endpoint)
    fields: Dict[str, Tuple[ParameterRole, Any]] = {}
    for attribute, role in _DEPENDANT_ROLES:
        for field in getattr(dependant, attribute):
            annotation = field.field_info.annotation
            if role == ParameterRole.BODY:
                annotation = _unwrap_optional(annotation)
            fields[field.name] = (role, annotation)

    parameters: List[Parameter] = []
    for param_name in inspect.signature(endpoint).parameters:
        if param_name in fields:
            role, annotation = fields[param_name]
            parameters.append(Parameter(name=param_name, annotation=annotation, role=role))

    operation_name = name or getattr(endpoint, '__name__', 'endpoint')
    logger.debug(f"{operation_name}: {[(p.name, p.role.value) for p in parameters]}")
    return Operation(name=operation_name, verb=verb, parameters=tuple(parameters))


def operations_from_router(router: Any) -> List[Operation]:
    """One operation per route and method of an APIRouter or FastAPI app."""
    return [op for _, op in _route_operations(router)]


def affordances_for_router(router: Any, builder: Optional[AffordanceBuilder] = None) -> Dict[str, List[Affordance]]:
    """Affordances of every route, grouped by route path."""
    builder = builder or AffordanceBuilder()
    result: Dict[str, List[Affordance]] = {}
    for route_path, op in _route_operations(router):
        result.setdefault(route_path, []).append(builder.build(op))
    return result


def _route_operations(router: Any) -> Iterator[Tuple[str, Operation]]:
    """(full path, operation) for every API route and method, in registration order."""
    for route_path, route in _api_routes(router.routes):
        for method in sorted(route.methods or ()):
            yield route_path, operation_from_endpoint(route.endpoint, method, route_path, route.name)


def _api_routes(routes: List[Any], prefix: str = "") -> Iterator[Tuple[str, APIRoute]]:
    """API routes with their full paths, descending into included routers.

    Newer FastAPI releases keep ``include_router`` results as a wrapper holding
    the original router and the include prefix instead of copying its routes.
    """
    for route in routes:
        if isinstance(route, APIRoute):
            yield prefix + route.path, route
            continue
        included = getattr(route, 'original_router', None)
        if included is not None:
            include_prefix = getattr(getattr(route, 'include_context', None), 'prefix', '') or ''
            yield from _api_routes(included.routes, prefix + include_prefix)


def _unwrap_optional(tp: Any) -> Any:
    if typing.get_origin(tp) in (Union, types.UnionType):
        args = [arg for arg in typing.get_args(tp) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return tp
