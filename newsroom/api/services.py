"""
Business logic services for query operations
"""
import logging
import time
from typing import Any, Dict, Optional

from newsroom.api.models import QueryResponse, QueryResultModel
from newsroom.api.exceptions import InternalServerError

logger = logging.getLogger(__name__)


class QueryService:
    """Service for query operations"""

    @staticmethod
    async def process_query(
        query_pipeline,
        query: str,
        category: Optional[str] = None
    ) -> QueryResponse:
        """Run one query through the pipeline"""
        start_time = time.time()
        try:
            result = await query_pipeline.query(query, category=category)
        except Exception as e:
            logger.error(f"Error processing query: {e}")
            raise InternalServerError(str(e))

        response_time = round(time.time() - start_time, 3)

        # The pipeline answers with a plain message when nothing matched
        if isinstance(result, str):
            return QueryResponse(
                status="not_found",
                message=result,
                results=[],
                response_time=response_time
            )

        return QueryResponse(
            status="success",
            message=f"Found {len(result)} matching documents",
            results=[QueryResultModel(**item.to_dict()) for item in result],
            response_time=response_time
        )


class HealthService:
    """Service for health check operations"""

    @staticmethod
    def check_pipeline_health(query_pipeline) -> Dict[str, Any]:
        """Report whether the corpus is loaded and the summarizer has credentials"""
        try:
            total_documents = len(query_pipeline.store)
            return {
                "status": "healthy" if total_documents > 0 else "degraded",
                "query_pipeline": "ready",
                "total_documents": total_documents,
                "summarizer_configured": bool(query_pipeline.summarizer.api_key),
            }
        except Exception as e:
            logger.error(f"Health check failed: {e}")
            raise InternalServerError(f"Health check failed: {str(e)}")


class StatsService:
    """Service for system statistics"""

    @staticmethod
    def get_system_stats(query_pipeline) -> Dict[str, Any]:
        try:
            return query_pipeline.get_performance_stats()
        except Exception as e:
            logger.error(f"Error getting stats: {e}")
            raise InternalServerError(f"Failed to get stats: {str(e)}")

    @staticmethod
    def get_categories(query_pipeline) -> Dict[str, int]:
        """Document counts per category present in the corpus"""
        try:
            return dict(sorted(query_pipeline.store.count_by_category().items()))
        except Exception as e:
            logger.error(f"Error getting categories: {e}")
            raise InternalServerError(f"Failed to get categories: {str(e)}")
