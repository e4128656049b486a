"""
Expert naming convention.

Expert artifacts are named after the classes they refine, e.g. ``5_23.pt``
is an expert for classes 5 and 23. The key is the file stem.
"""

import logging
import re
from typing import Dict, Iterable, List, Optional

logger = logging.getLogger(__name__)

EXPERT_KEY_DELIMITER = "_"

# leading whitespace, optional sign, digits; anything after is ignored ("23v2" -> 23)
_LEADING_INT = re.compile(r"\s*[+-]?\d+")

# expert key -> class IDs the expert was trained on
ExpertClassMap = Dict[str, List[int]]


def parse_expert_classes(key: str, log: Optional[logging.Logger] = None) -> List[int]:
    """
    Parse an expert key like ``"5_23"`` into its class IDs ``[5, 23]``.

    Each segment contributes the integer its leading digits spell, so
    ``"5_23v2"`` gives ``[5, 23]``. Segments with no leading integer are
    skipped with a warning; the remaining IDs are kept in order. A single
    trailing delimiter is ignored. A key with no valid segment yields ``[]``.
    """
    log = log or logger
    if not key:
        return []

    segments = key.split(EXPERT_KEY_DELIMITER)
    if segments[-1] == "":
        segments.pop()

    class_ids: List[int] = []
    for segment in segments:
        match = _LEADING_INT.match(segment)
        if match is None:
            log.warning("Could not parse class ID from expert name segment %r (expert %r)", segment, key)
            continue
        class_ids.append(int(match.group()))
    return class_ids


def build_expert_class_map(keys: Iterable[str], log: Optional[logging.Logger] = None) -> ExpertClassMap:
    """Build the expert coverage table, one entry per key, ordered by key."""
    return {key: parse_expert_classes(key, log) for key in sorted(keys)}
