"""
Main dispatcher orchestrator.

Runs the router, picks a refinement expert from the router's top
predictions, fuses router and expert logits and returns the final class.
This is the top-level component that ties everything together.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Sequence

import numpy as np

from msnet_router.config import DispatcherConfig
from msnet_router.errors import InvalidInputError, LogitShapeError, NoExpertsFoundError
from msnet_router.experts.backend import ModelBackend, ModelHandle, TorchScriptBackend
from msnet_router.experts.class_labels import ExpertClassMap, build_expert_class_map
from msnet_router.experts.discovery import load_models

from .fusion import argmax, average_logits
from .selection import select_expert
from .topk import TopKResult, top_k_predictions


class DispatchState(str, Enum):
    """Stages a single prediction passes through."""
    ROUTING = "routing"
    SELECTING = "selecting"
    EXPERT_REFINEMENT = "expert_refinement"
    ROUTER_ONLY = "router_only"
    FUSING = "fusing"
    DONE = "done"


@dataclass
class DispatchResult:
    """Everything a single dispatch decided, for callers that need more than the class."""
    prediction: int
    router_top_k: TopKResult
    expert_key: Optional[str]
    fused_logits: np.ndarray
    states: List[DispatchState] = field(default_factory=list)
    expert_failed: bool = False

    @property
    def used_expert(self) -> bool:
        return self.expert_key is not None and not self.expert_failed

    @property
    def routing_path(self) -> str:
        if self.used_expert:
            return f"router -> expert:{self.expert_key}"
        return "router"


class MoEDispatcher:
    """
    Router-guided mixture-of-experts classifier.

    Models and the expert coverage table are fixed at construction and never
    mutated afterwards, so one instance can serve calls from several threads
    as long as the backend allows concurrent runs on a model.
    """

    def __init__(
        self,
        config: DispatcherConfig,
        router: ModelHandle,
        experts: Mapping[str, ModelHandle],
        logger: Optional[logging.Logger] = None,
    ):
        self.config = config
        self.logger = logger or logging.getLogger(__name__)

        if not experts:
            raise NoExpertsFoundError("MoEDispatcher requires at least one expert model")

        self.router = router
        self._experts: Dict[str, ModelHandle] = dict(sorted(experts.items()))
        self._class_map: ExpertClassMap = build_expert_class_map(self._experts, self.logger)

    @classmethod
    def from_config(
        cls,
        config: DispatcherConfig,
        backend: Optional[ModelBackend] = None,
        logger: Optional[logging.Logger] = None,
    ) -> "MoEDispatcher":
        """
        Discover and load the router and experts named by *config*.

        Args:
            config: Resolved dispatcher configuration
            backend: Model backend; defaults to TorchScriptBackend
            logger: Logger for diagnostics; defaults to this module's logger

        Raises:
            ModelLoadError: If the router or any expert fails to load.
            NoExpertsFoundError: If no expert artifacts are found.
        """
        if backend is None:
            backend = TorchScriptBackend.from_config(config)

        registry = load_models(config, backend)
        return cls(config, registry.router, registry.experts, logger=logger)

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def expert_class_map(self) -> ExpertClassMap:
        """Copy of the expert key -> class IDs table."""
        return {key: list(classes) for key, classes in self._class_map.items()}

    @property
    def expert_keys(self) -> List[str]:
        return list(self._experts)

    @property
    def num_experts(self) -> int:
        return len(self._experts)

    def get_stats(self) -> Dict[str, Any]:
        return {
            "top_k": self.config.top_k,
            "input_shape": list(self.config.input_shape),
            "num_experts": self.num_experts,
            "experts": self.expert_class_map,
            "fallback_on_expert_error": self.config.fallback_on_expert_error,
        }

    # ------------------------------------------------------------------
    # Prediction
    # ------------------------------------------------------------------

    def _validate_input(self, input_image_data: Sequence[float]) -> np.ndarray:
        buffer = np.asarray(input_image_data, dtype=np.float32).reshape(-1)
        if buffer.size != self.config.input_size:
            raise InvalidInputError(self.config.input_size, buffer.size)
        return buffer

    def predict(self, input_image_data: Sequence[float]) -> int:
        """
        Predict the class of one flattened CHW image.

        Raises:
            InvalidInputError: If the buffer length does not match the config.
        """
        return self.dispatch(input_image_data).prediction

    def dispatch(self, input_image_data: Sequence[float]) -> DispatchResult:
        """
        Run the full routing pipeline for one input and report each decision.

        Raises:
            InvalidInputError: If the buffer length does not match the config
                (no model is run in that case).
            LogitShapeError: If model outputs are too short or disagree in length.
        """
        buffer = self._validate_input(input_image_data)
        states = [DispatchState.ROUTING]

        # 1. Router inference
        router_logits = np.asarray(self.router.run(buffer), dtype=np.float64).reshape(-1)
        k = self.config.top_k
        if router_logits.size < k:
            raise LogitShapeError(
                f"Router returned {router_logits.size} logits, fewer than top_k={k}"
            )

        # 2. Top-k over router logits
        top = top_k_predictions(router_logits, k)
        self.logger.info("Router top-%d predictions: %s", k, top.indices)

        # 3. Expert selection
        states.append(DispatchState.SELECTING)
        expert_key = None
        if k >= 2:
            expert_key = select_expert(top.indices[0], top.indices[1], self._class_map)
        else:
            self.logger.debug("top_k=%d, skipping expert selection", k)

        # 4. Optional expert refinement
        logits_to_average = [router_logits]
        expert_failed = False
        if expert_key is not None:
            states.append(DispatchState.EXPERT_REFINEMENT)
            self.logger.info("Selected expert '%s' for refinement", expert_key)
            try:
                expert_logits = self._experts[expert_key].run(buffer)
            except Exception:
                if not self.config.fallback_on_expert_error:
                    raise
                self.logger.warning(
                    "Expert '%s' failed, using router output only", expert_key, exc_info=True
                )
                expert_failed = True
                states.append(DispatchState.ROUTER_ONLY)
            else:
                logits_to_average.append(
                    np.asarray(expert_logits, dtype=np.float64).reshape(-1)
                )
        else:
            states.append(DispatchState.ROUTER_ONLY)
            self.logger.info("No suitable expert found. Using router output only.")

        # 5. Fuse and pick the final class
        states.append(DispatchState.FUSING)
        fused = average_logits(logits_to_average)
        prediction = argmax(fused)
        states.append(DispatchState.DONE)

        return DispatchResult(
            prediction=prediction,
            router_top_k=top,
            expert_key=expert_key,
            fused_logits=fused,
            states=states,
            expert_failed=expert_failed,
        )

    def __repr__(self) -> str:
        return f"MoEDispatcher(experts={self.num_experts}, top_k={self.config.top_k})"
