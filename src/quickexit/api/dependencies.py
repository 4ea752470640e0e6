"""FastAPI dependency injection providers."""

from typing import Annotated

from fastapi import Depends, Request

from quickexit.repositories.excuse_repo import RecentExcuseStore
from quickexit.services.excuse_generator import ExcuseGenerator


def get_excuse_store(request: Request) -> RecentExcuseStore:
    """Provide the app-owned RecentExcuseStore."""
    return request.app.state.excuse_store


def get_excuse_generator(request: Request) -> ExcuseGenerator:
    """Provide the app-owned ExcuseGenerator."""
    return request.app.state.excuse_generator


# Type aliases for commonly used dependencies
ExcuseStoreDep = Annotated[RecentExcuseStore, Depends(get_excuse_store)]
ExcuseGeneratorDep = Annotated[ExcuseGenerator, Depends(get_excuse_generator)]
