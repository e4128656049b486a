"""
msnet-classifier — Python SDK for the router + experts image classifier.

Quick start::

    from msnet_classifier import MSNetClassifier
    from msnet_router import DispatcherConfig

    config = DispatcherConfig(
        router_model_path="models/router.pt",
        expert_model_dir="models/experts",
    )
    clf = MSNetClassifier(config)
    clf.initialize()          # load models (once)

    result = clf.predict(image)   # flat CHW float buffer
    print(result.class_index)     # e.g. 23
    print(result.routing_path)    # "router -> expert:5_23"
"""

from .classifier import MSNetClassifier
from .types import PredictionResult

__version__ = "1.0.0"

__all__ = [
    "MSNetClassifier",
    "PredictionResult",
]
