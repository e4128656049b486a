"""
Command-line prediction for a single image.

Usage:
    python predict_image.py --config dispatcher.json --input image.npy
    python predict_image.py --router models/router.pt --experts models/experts --input image.npy
    python predict_image.py --router models/router.pt --experts models/experts --input image.npy --top-k 3 --cuda
"""

import argparse
import logging
import sys
from pathlib import Path

import numpy as np

from msnet_router.config import DispatcherConfig
from msnet_router.errors import MSNetError
from msnet_router.gating.dispatcher import MoEDispatcher


def build_config(args: argparse.Namespace) -> DispatcherConfig:
    if args.config:
        config = DispatcherConfig.from_json(Path(args.config))
        overrides = {}
        if args.top_k is not None:
            overrides["top_k"] = args.top_k
        if args.cuda:
            overrides["use_cuda"] = True
        if overrides:
            config = DispatcherConfig.from_dict({**config.to_dict(), **overrides})
        return config

    if not args.router or not args.experts:
        raise SystemExit("Either --config or both --router and --experts are required")

    return DispatcherConfig(
        router_model_path=Path(args.router),
        expert_model_dir=Path(args.experts),
        top_k=args.top_k if args.top_k is not None else 2,
        use_cuda=args.cuda,
        device_id=args.device_id,
    )


def main() -> int:
    parser = argparse.ArgumentParser(description="Predict the class of one image with router + experts")
    parser.add_argument("--config", type=str, default=None,
                        help="Path to dispatcher config JSON")
    parser.add_argument("--router", type=str, default=None,
                        help="Path to the router model")
    parser.add_argument("--experts", type=str, default=None,
                        help="Directory of expert models named <class>_<class>.pt")
    parser.add_argument("--input", type=str, required=True,
                        help="Path to a .npy file holding one CHW float image")
    parser.add_argument("--top-k", type=int, default=None,
                        help="Router candidates to consider (default: 2)")
    parser.add_argument("--cuda", action="store_true",
                        help="Run models on CUDA if available")
    parser.add_argument("--device-id", type=int, default=0,
                        help="CUDA device index")
    parser.add_argument("--verbose", action="store_true",
                        help="Log every dispatch step")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    config = build_config(args)
    image = np.load(args.input).astype(np.float32)

    try:
        dispatcher = MoEDispatcher.from_config(config)
        result = dispatcher.dispatch(image)
    except MSNetError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    print(f"Prediction : {result.prediction}")
    print(f"Router top : {result.router_top_k.indices}")
    print(f"Route      : {result.routing_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
