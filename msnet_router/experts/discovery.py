"""
Router and expert model discovery.

Scans the expert directory for model artifacts and loads them through a
:class:`~msnet_router.experts.backend.ModelBackend`.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict

from msnet_router.errors import ModelLoadError, NoExpertsFoundError
from .backend import ModelBackend, ModelHandle

logger = logging.getLogger(__name__)


@dataclass
class ModelRegistry:
    """Loaded models: one router plus experts keyed by expert key."""
    router: ModelHandle
    experts: Dict[str, ModelHandle]


def expert_key_for(path: Path) -> str:
    """Expert key is the artifact name with its extension stripped."""
    return Path(path).stem


def discover_expert_paths(directory: Path, extension: str = ".pt") -> Dict[str, Path]:
    """
    Find expert artifacts in *directory*.

    Args:
        directory: Directory containing expert models
        extension: File suffix of model artifacts (e.g. ".pt")

    Returns:
        Dict of expert key -> artifact path, sorted by key. Files with any
        other suffix are ignored.

    Raises:
        FileNotFoundError: If *directory* does not exist.
    """
    directory = Path(directory)
    if not directory.is_dir():
        raise FileNotFoundError(f"Expert model directory not found: {directory}")

    found = {
        expert_key_for(entry): entry
        for entry in directory.iterdir()
        if entry.is_file() and entry.suffix == extension
    }
    return dict(sorted(found.items()))


def _load(backend: ModelBackend, name: str, path: Path) -> ModelHandle:
    try:
        return backend.load(path)
    except Exception as exc:
        raise ModelLoadError(name, path, exc) from exc


def load_models(config, backend: ModelBackend) -> ModelRegistry:
    """
    Load the router and every expert named in the config.

    Raises:
        ModelLoadError: If any model fails to load.
        NoExpertsFoundError: If the expert directory holds no model artifacts.
    """
    logger.info("Loading router model from: %s", config.router_model_path)
    router = _load(backend, "router", config.router_model_path)

    logger.info("Loading expert models from directory: %s", config.expert_model_dir)
    expert_paths = discover_expert_paths(config.expert_model_dir, config.model_extension)
    if not expert_paths:
        raise NoExpertsFoundError(
            f"No expert {config.model_extension} models found in {config.expert_model_dir}"
        )

    experts: Dict[str, ModelHandle] = {}
    for key, path in expert_paths.items():
        experts[key] = _load(backend, key, path)
        logger.info("  - Loaded expert: %s", key)

    return ModelRegistry(router=router, experts=experts)
