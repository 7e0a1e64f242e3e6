"""FastAPI dependencies."""

from typing import Annotated

from fastapi import Depends, Request

from cheatfinder.aggregation import CheatSheetEngine
from cheatfinder.query import QueryService


def get_engine(request: Request) -> CheatSheetEngine:
    return request.app.state.engine


def get_query_service(request: Request) -> QueryService:
    return request.app.state.query_service


EngineDep = Annotated[CheatSheetEngine, Depends(get_engine)]
QueryServiceDep = Annotated[QueryService, Depends(get_query_service)]
