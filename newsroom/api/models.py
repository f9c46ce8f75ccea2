"""
Pydantic models for API requests and responses
"""
from pydantic import BaseModel
from typing import List, Optional, Dict, Any


class QueryRequest(BaseModel):
    query: str
    category: Optional[str] = None


class ContactInfoModel(BaseModel):
    phones: List[str] = []
    emails: List[str] = []


class QueryResultModel(BaseModel):
    identity: str
    source: Optional[str] = None
    category: str
    date: str
    pages: int
    word_count: int
    summary: str
    context: str
    contact_info: Optional[ContactInfoModel] = None


class QueryResponse(BaseModel):
    status: str
    message: Optional[str] = None
    results: List[QueryResultModel]
    response_time: Optional[float] = None


class HealthResponse(BaseModel):
    status: str
    query_pipeline: str
    total_documents: int
    summarizer_configured: bool


class CategoriesResponse(BaseModel):
    categories: Dict[str, int]


class ExampleQueriesResponse(BaseModel):
    example_queries: List[str]


class StatsResponse(BaseModel):
    performance: Dict[str, Any]
    corpus: Dict[str, Any]
    configuration: Dict[str, Any]
