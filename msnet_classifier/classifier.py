"""
MSNetClassifier — main entry point for the msnet-classifier SDK.

Usage::

    from msnet_classifier import MSNetClassifier

    clf = MSNetClassifier(config)
    clf.initialize()                          # load models once

    result = clf.predict(image)
    print(result.class_index, result.expert)
"""

import time
from typing import Any, Dict, Sequence

from msnet_router.config import DispatcherConfig

from .types import PredictionResult


class MSNetClassifier:
    """
    Thin wrapper around MoEDispatcher providing a clean SDK API.

    Loading the router and every expert can take a while, so
    initialization is explicit via :meth:`initialize` rather than
    happening in ``__init__``.  Call ``initialize()`` once, then
    reuse the same instance for all subsequent calls.
    """

    def __init__(self, config: DispatcherConfig, backend=None, logger=None) -> None:
        self.config = config
        self._backend = backend
        self._logger = logger
        self._dispatcher = None
        self._initialized = False

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def initialize(self) -> None:
        """
        Load the router and expert models and build the dispatcher.

        This must be called before :meth:`predict`.

        Raises:
            RuntimeError: If any model fails to load or no experts are found.
        """
        from msnet_router.gating.dispatcher import MoEDispatcher

        try:
            self._dispatcher = MoEDispatcher.from_config(
                self.config, backend=self._backend, logger=self._logger
            )
            self._initialized = True
        except Exception as exc:
            raise RuntimeError(f"Failed to initialize dispatcher: {exc}") from exc

    @property
    def is_ready(self) -> bool:
        """True after :meth:`initialize` has completed successfully."""
        return self._initialized and self._dispatcher is not None

    @property
    def dispatcher(self):
        self._require_ready()
        return self._dispatcher

    def _require_ready(self) -> None:
        if not self.is_ready:
            raise RuntimeError(
                "MSNetClassifier is not initialized.  Call classifier.initialize() first."
            )

    # ------------------------------------------------------------------
    # Prediction
    # ------------------------------------------------------------------

    def predict(
        self,
        image: Sequence[float],
        *,
        return_logits: bool = False,
    ) -> PredictionResult:
        """
        Classify a single image.

        Args:
            image:
                Flattened CHW float buffer of ``config.input_size`` values
                (or any array of that total size).
            return_logits:
                If True, populate :attr:`PredictionResult.logits` with the
                fused logit vector.

        Returns:
            :class:`PredictionResult` with the prediction and routing trace.

        Raises:
            RuntimeError: If the classifier has not been initialized.
            ValueError: If the buffer does not match the configured input size.
        """
        self._require_ready()

        t0 = time.perf_counter()
        outcome = self._dispatcher.dispatch(image)
        elapsed_ms = (time.perf_counter() - t0) * 1000

        return PredictionResult(
            class_index=outcome.prediction,
            top_k_indices=list(outcome.router_top_k.indices),
            top_k_scores=list(outcome.router_top_k.scores),
            expert=outcome.expert_key if outcome.used_expert else None,
            routing_path=outcome.routing_path,
            logits=outcome.fused_logits.tolist() if return_logits else None,
            processing_time_ms=elapsed_ms,
        )

    def predict_class(self, image: Sequence[float]) -> int:
        """Shortcut returning only the predicted class index."""
        self._require_ready()
        return self._dispatcher.predict(image)

    # ------------------------------------------------------------------
    # System information
    # ------------------------------------------------------------------

    def get_stats(self) -> Dict[str, Any]:
        """
        Return dispatcher information.

        Returns a dict with keys:

        * ``top_k`` — number of router candidates considered
        * ``input_shape`` — NCHW input shape
        * ``num_experts`` — number of loaded experts
        * ``experts`` — expert key -> class IDs it covers
        * ``fallback_on_expert_error`` — whether expert failures fall back

        Raises:
            RuntimeError: If the classifier has not been initialized.
        """
        self._require_ready()
        return self._dispatcher.get_stats()

    def __repr__(self) -> str:
        state = "ready" if self.is_ready else "not initialized"
        return f"MSNetClassifier({state})"
