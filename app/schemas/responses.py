"""
Response schemas for prediction endpoints.
"""

from typing import Dict, Optional, Any, List

from pydantic import BaseModel, Field


class PredictResponse(BaseModel):
    """Response for single-image prediction."""

    request_id: str = Field(..., description="Unique request identifier")
    prediction: int = Field(..., description="Final predicted class index")
    top_k_indices: List[int] = Field(..., description="Router's top-k classes")
    top_k_scores: List[float] = Field(..., description="Router logits for the top-k classes")
    expert: Optional[str] = Field(
        None,
        description="Expert used for refinement, or null for router-only"
    )
    routing_path: str = Field(
        ...,
        description="Routing path taken",
        examples=["router -> expert:1_2"]
    )
    processing_time_ms: float = Field(
        ...,
        description="Total processing time in milliseconds"
    )

    # Optional fields based on request options
    logits: Optional[List[float]] = Field(
        None,
        description="Fused logits (if requested)"
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "request_id": "550e8400-e29b-41d4-a716-446655440000",
                    "prediction": 1,
                    "top_k_indices": [1, 2],
                    "top_k_scores": [0.9, 0.2],
                    "expert": "1_2",
                    "routing_path": "router -> expert:1_2",
                    "processing_time_ms": 3.4
                }
            ]
        }
    }


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Service status")
    version: str = Field(..., description="API version")


class ReadyResponse(BaseModel):
    """Readiness check response."""

    status: str = Field(..., description="Service status")
    models_loaded: bool = Field(..., description="Whether models are loaded")
    details: Optional[Dict[str, Any]] = Field(
        None,
        description="Additional details about loaded components"
    )


class SystemStatsResponse(BaseModel):
    """Dispatcher statistics response."""

    top_k: int
    input_shape: List[int]
    num_experts: int
    experts: Dict[str, List[int]]
    fallback_on_expert_error: bool


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Error message")
    detail: Optional[str] = Field(None, description="Detailed error information")
    request_id: Optional[str] = Field(None, description="Request ID for tracking")
