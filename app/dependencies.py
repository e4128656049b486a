"""
FastAPI dependencies for dependency injection.
"""

from typing import Annotated

from fastapi import Depends

from app.services.dispatch_service import dispatch_service, DispatchService


def get_dispatch_service() -> DispatchService:
    """
    Dependency to get the dispatch service singleton.

    Returns:
        DispatchService instance
    """
    return dispatch_service


# Type aliases for cleaner dependency injection
DispatchServiceDep = Annotated[DispatchService, Depends(get_dispatch_service)]
