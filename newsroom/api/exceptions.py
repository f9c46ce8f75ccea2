"""
Custom exceptions for the API
"""
from fastapi import HTTPException


class PipelineNotInitialized(HTTPException):
    def __init__(self):
        super().__init__(status_code=503, detail="Query pipeline not initialized")


class ApplicationStartupIncomplete(HTTPException):
    def __init__(self):
        super().__init__(status_code=503, detail="Application is still starting up")


class EmptyQueryError(HTTPException):
    def __init__(self):
        super().__init__(status_code=400, detail="Query cannot be empty")


class InternalServerError(HTTPException):
    def __init__(self, detail: str):
        super().__init__(status_code=500, detail=f"Internal server error: {detail}")
