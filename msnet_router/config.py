"""
Configuration dataclass for the MoE dispatcher.

Provides a validated, immutable configuration with defaults matching the
32x32 RGB models the router and experts are trained on.
"""

import json
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Optional, Dict, Any, Tuple


@dataclass(frozen=True)
class DispatcherConfig:
    """
    Resolved configuration for a single dispatcher instance.

    Can be loaded from JSON or created programmatically.
    """

    # Model locations
    router_model_path: Path
    expert_model_dir: Path

    # Routing
    top_k: int = 2

    # Device
    use_cuda: bool = False
    device_id: int = 0
    num_threads: int = 1

    # Input tensor (batch is always 1)
    input_channels: int = 3
    input_height: int = 32
    input_width: int = 32

    # Known class count; None until the router has been run
    num_classes: Optional[int] = None

    # Suffix of model artifacts picked up by discovery
    model_extension: str = ".pt"

    # Use router output alone when the chosen expert fails at inference time
    fallback_on_expert_error: bool = True

    def __post_init__(self):
        # Frozen dataclass: normalise paths through object.__setattr__
        object.__setattr__(self, "router_model_path", Path(self.router_model_path))
        object.__setattr__(self, "expert_model_dir", Path(self.expert_model_dir))

        if self.top_k < 1:
            raise ValueError(f"top_k must be >= 1, got {self.top_k}")
        for name in ("input_channels", "input_height", "input_width", "num_threads"):
            value = getattr(self, name)
            if value < 1:
                raise ValueError(f"{name} must be >= 1, got {value}")
        if self.num_classes is not None and self.top_k > self.num_classes:
            raise ValueError(
                f"top_k ({self.top_k}) cannot exceed num_classes ({self.num_classes})"
            )
        if not self.model_extension.startswith("."):
            object.__setattr__(self, "model_extension", f".{self.model_extension}")

    @property
    def input_shape(self) -> Tuple[int, int, int, int]:
        """NCHW shape of the input tensor."""
        return (1, self.input_channels, self.input_height, self.input_width)

    @property
    def input_size(self) -> int:
        """Number of values in a flattened input buffer."""
        return self.input_channels * self.input_height * self.input_width

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DispatcherConfig":
        """
        Create config from a plain dictionary.

        Args:
            data: Mapping of field names to values; path fields may be strings

        Returns:
            DispatcherConfig instance
        """
        data = dict(data)
        if "router_model_path" in data:
            data["router_model_path"] = Path(data["router_model_path"])
        if "expert_model_dir" in data:
            data["expert_model_dir"] = Path(data["expert_model_dir"])
        return cls(**data)

    @classmethod
    def from_json(cls, path: Path) -> "DispatcherConfig":
        """
        Load configuration from JSON file.

        Args:
            path: Path to JSON configuration file

        Returns:
            DispatcherConfig instance

        Example JSON structure:
        ```json
        {
            "router_model_path": "models/router.pt",
            "expert_model_dir": "models/experts",
            "top_k": 2,
            "use_cuda": false
        }
        ```
        """
        with open(path) as f:
            data = json.load(f)
        return cls.from_dict(data)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["router_model_path"] = str(self.router_model_path)
        data["expert_model_dir"] = str(self.expert_model_dir)
        return data

    def to_json(self, path: Path):
        """
        Save configuration to JSON file.

        Args:
            path: Path to save JSON configuration
        """
        with open(path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)
