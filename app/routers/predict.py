"""
Prediction router for image classification endpoints.
"""

import logging

from fastapi import APIRouter, HTTPException, status

from app.dependencies import DispatchServiceDep
from app.schemas.requests import PredictRequest
from app.schemas.responses import PredictResponse, SystemStatsResponse
from msnet_router.errors import InvalidInputError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/predict", tags=["Prediction"])


@router.post("", response_model=PredictResponse)
async def predict_image(
    request: PredictRequest,
    dispatch_service: DispatchServiceDep,
) -> PredictResponse:
    """
    Predict the class of a single image.

    The router runs first; when an expert covers both of the router's two
    most confident classes, its logits are averaged with the router's
    before taking the final class.
    """
    if not dispatch_service.is_initialized:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Prediction service not ready. Models are still loading."
        )

    try:
        return await dispatch_service.predict(request)

    except InvalidInputError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    except TimeoutError as e:
        raise HTTPException(
            status_code=status.HTTP_504_GATEWAY_TIMEOUT,
            detail=str(e)
        )
    except Exception as e:
        logger.exception("Prediction failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Prediction failed: {str(e)}"
        )


@router.get("/stats", response_model=SystemStatsResponse)
async def get_system_stats(
    dispatch_service: DispatchServiceDep,
) -> SystemStatsResponse:
    """
    Get dispatcher statistics.

    Returns the routing top-k, input shape and each expert's class coverage.
    """
    if not dispatch_service.is_initialized:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Prediction service not ready"
        )

    return SystemStatsResponse(**dispatch_service.get_system_stats())
