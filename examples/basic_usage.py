"""
Basic usage examples for the msnet-classifier SDK.

Run from the repository root after installing:

    pip install -e .
    python examples/basic_usage.py models/router.pt models/experts
"""

import sys
from pathlib import Path

import numpy as np

from msnet_classifier import MSNetClassifier
from msnet_router import DispatcherConfig


def main():
    router_path, expert_dir = sys.argv[1], sys.argv[2]

    # ------------------------------------------------------------------
    # 1. Initialize (loads router + all experts)
    # ------------------------------------------------------------------
    config = DispatcherConfig(
        router_model_path=Path(router_path),
        expert_model_dir=Path(expert_dir),
        top_k=2,
    )
    print("Initializing MSNetClassifier...")
    clf = MSNetClassifier(config)
    clf.initialize()
    print(f"Classifier ready: {clf}\n")

    # ------------------------------------------------------------------
    # 2. System info
    # ------------------------------------------------------------------
    stats = clf.get_stats()
    print("=== Experts ===")
    for key, classes in stats["experts"].items():
        print(f"  {key:<10} covers classes {classes}")
    print()

    # ------------------------------------------------------------------
    # 3. Single prediction on a random image
    # ------------------------------------------------------------------
    print("=== Single Prediction ===")
    image = np.random.rand(config.input_size).astype(np.float32)
    result = clf.predict(image, return_logits=True)
    print(f"  Class       : {result.class_index}")
    print(f"  Router top-k: {result.top_k_indices}")
    print(f"  Expert      : {result.expert or 'none (router only)'}")
    print(f"  Route       : {result.routing_path}")
    print(f"  Time        : {result.processing_time_ms:.1f} ms")
    print()

    print("Done.")


if __name__ == "__main__":
    main()
