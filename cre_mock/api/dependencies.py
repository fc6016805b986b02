"""Request-scoped accessors for application state."""

from fastapi import Request

from cre_mock.query.facade import QueryService


def get_query_service(request: Request) -> QueryService:
    """Query service bound to the app's store handle."""
    return request.app.state.query_service
