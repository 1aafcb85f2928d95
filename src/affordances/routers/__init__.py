from .route_operations import affordances_for_router, operation_from_endpoint, operations_from_router

__all__ = ["affordances_for_router", "operation_from_endpoint", "operations_from_router"]
