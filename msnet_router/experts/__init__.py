"""
Expert model plumbing: naming convention, backend and discovery.
"""

from .backend import ModelBackend, ModelHandle, TorchScriptBackend, TorchScriptModel
from .class_labels import ExpertClassMap, build_expert_class_map, parse_expert_classes
from .discovery import ModelRegistry, discover_expert_paths, expert_key_for, load_models

__all__ = [
    "ModelBackend",
    "ModelHandle",
    "TorchScriptBackend",
    "TorchScriptModel",
    "ExpertClassMap",
    "build_expert_class_map",
    "parse_expert_classes",
    "ModelRegistry",
    "discover_expert_paths",
    "expert_key_for",
    "load_models",
]
