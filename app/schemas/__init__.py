# Pydantic Schemas
from app.schemas.requests import PredictOptions, PredictRequest
from app.schemas.responses import (
    PredictResponse,
    HealthResponse,
    ReadyResponse,
    SystemStatsResponse,
    ErrorResponse,
)

__all__ = [
    # Requests
    "PredictOptions",
    "PredictRequest",
    # Responses
    "PredictResponse",
    "HealthResponse",
    "ReadyResponse",
    "SystemStatsResponse",
    "ErrorResponse",
]
