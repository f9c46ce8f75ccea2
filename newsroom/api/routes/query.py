"""
Routes for query handling
"""
from fastapi import APIRouter, Depends

from newsroom.api.models import QueryRequest, QueryResponse
from newsroom.api.dependencies import get_query_pipeline
from newsroom.api.services import QueryService
from newsroom.api.exceptions import EmptyQueryError

router = APIRouter(prefix="/api/v1/query", tags=["query"])


@router.post("", response_model=QueryResponse)
async def query_documents(
    request: QueryRequest,
    query_pipeline=Depends(get_query_pipeline)
):
    """Search agendas and city pages, with an AI summary per match"""
    if not request.query.strip():
        raise EmptyQueryError()

    return await QueryService.process_query(
        query_pipeline=query_pipeline,
        query=request.query.strip(),
        category=request.category
    )
