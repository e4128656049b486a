"""
Request schemas for prediction endpoints.
"""

from typing import List

from pydantic import BaseModel, Field


class PredictOptions(BaseModel):
    """Options for prediction request."""

    return_logits: bool = Field(
        default=False,
        description="Include the fused logit vector in the response"
    )


class PredictRequest(BaseModel):
    """Request body for single-image prediction."""

    input: List[float] = Field(
        ...,
        min_length=1,
        description="Flattened CHW image buffer (channels x height x width values)"
    )
    options: PredictOptions = Field(
        default_factory=PredictOptions,
        description="Optional response configuration"
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "input": [0.0, 0.5, 1.0],
                    "options": {
                        "return_logits": True
                    }
                }
            ]
        }
    }
