"""
Dispatch service that wraps the MSNet MoEDispatcher.

Model loading happens once at startup; each request then runs the
blocking dispatcher in a worker thread behind a concurrency semaphore.
"""

import time
import asyncio
import logging
from asyncio import Semaphore
from typing import Dict, Any, Optional
from uuid import uuid4

from app.config import settings
from app.schemas.requests import PredictRequest
from app.schemas.responses import PredictResponse

logger = logging.getLogger(__name__)


class DispatchService:
    """
    Service wrapper around MoEDispatcher.

    Handles:
    - Lazy initialization of the dispatcher
    - Request/response transformation
    - Timeout handling
    """

    def __init__(self):
        self._dispatcher = None
        self._initialized = False
        self._semaphore = Semaphore(settings.max_concurrent_requests)

    def initialize(self, dispatcher=None) -> bool:
        """
        Load the router and expert models.

        Args:
            dispatcher: Already-built dispatcher to serve instead of loading
                models from settings.

        Returns:
            True if initialization successful, False otherwise.
        """
        if self._initialized:
            return True

        if dispatcher is not None:
            self._dispatcher = dispatcher
            self._initialized = True
            return True

        try:
            from msnet_router.gating.dispatcher import MoEDispatcher

            config = settings.to_dispatcher_config()
            logger.info("Initializing MoEDispatcher (router=%s) ...", config.router_model_path)
            self._dispatcher = MoEDispatcher.from_config(config)
            self._initialized = True
            logger.info("MoEDispatcher initialized with %d experts", self._dispatcher.num_experts)
            return True

        except Exception:
            logger.exception("Failed to initialize dispatcher")
            return False

    def shutdown(self) -> None:
        self._dispatcher = None
        self._initialized = False

    @property
    def is_initialized(self) -> bool:
        return self._initialized and self._dispatcher is not None

    def get_system_stats(self) -> Dict[str, Any]:
        if not self.is_initialized:
            return {"error": "Dispatcher not initialized"}
        return self._dispatcher.get_stats()

    async def predict(
        self,
        request: PredictRequest,
        timeout_seconds: Optional[int] = None
    ) -> PredictResponse:
        """
        Predict the class of one image.

        The semaphore bounds requests waiting on the executor, not running
        inference: on timeout the slot is released while the worker thread
        finishes its dispatch call, so after timeouts more than
        ``max_concurrent_requests`` dispatches can be running at once.

        Raises:
            RuntimeError: If the dispatcher is not initialized.
            TimeoutError: If prediction times out.
            InvalidInputError: If the input length does not match the model input.
        """
        if not self.is_initialized:
            raise RuntimeError("Dispatcher not initialized")

        timeout = timeout_seconds or settings.request_timeout_seconds
        request_id = str(uuid4())

        async with self._semaphore:
            try:
                return await asyncio.wait_for(
                    asyncio.get_running_loop().run_in_executor(
                        None,
                        self._sync_predict,
                        request,
                        request_id
                    ),
                    timeout=timeout
                )
            except asyncio.TimeoutError:
                raise TimeoutError(
                    f"Prediction timed out after {timeout} seconds"
                )

    def _sync_predict(
        self,
        request: PredictRequest,
        request_id: str
    ) -> PredictResponse:
        """Synchronous prediction (runs in thread pool)."""
        start_time = time.perf_counter()

        result = self._dispatcher.dispatch(request.input)

        processing_time_ms = (time.perf_counter() - start_time) * 1000

        response = PredictResponse(
            request_id=request_id,
            prediction=result.prediction,
            top_k_indices=result.router_top_k.indices,
            top_k_scores=result.router_top_k.scores,
            expert=result.expert_key if result.used_expert else None,
            routing_path=result.routing_path,
            processing_time_ms=processing_time_ms
        )

        if request.options.return_logits:
            response.logits = result.fused_logits.tolist()

        return response


# Global service instance
dispatch_service = DispatchService()
