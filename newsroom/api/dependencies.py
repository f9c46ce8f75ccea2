"""
FastAPI dependencies for shared application state
"""
from fastapi import Depends

from newsroom.api.exceptions import (
    PipelineNotInitialized,
    ApplicationStartupIncomplete
)


class AppState:
    """Singleton holding the application state"""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance.query_pipeline = None
            cls._instance.app_startup_complete = False
        return cls._instance

    def set_query_pipeline(self, pipeline):
        self.query_pipeline = pipeline

    def set_startup_complete(self, status: bool):
        self.app_startup_complete = status

    def get_query_pipeline(self):
        return self.query_pipeline

    def is_startup_complete(self) -> bool:
        return self.app_startup_complete

    def reset(self):
        self.query_pipeline = None
        self.app_startup_complete = False


def get_app_state() -> AppState:
    """Dependency returning the app state"""
    return AppState()


def get_query_pipeline(app_state: AppState = Depends(get_app_state)):
    """Dependency returning the query pipeline once startup has finished"""
    if not app_state.is_startup_complete():
        raise ApplicationStartupIncomplete()

    if app_state.get_query_pipeline() is None:
        raise PipelineNotInitialized()

    return app_state.get_query_pipeline()
