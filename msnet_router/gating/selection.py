"""
Expert selection.

An expert is only trusted when it covers *both* of the router's two most
confident classes; a top-1 match alone does not delegate.
"""

from typing import Optional

from msnet_router.experts.class_labels import ExpertClassMap


def select_expert(pred1: int, pred2: int, class_map: ExpertClassMap) -> Optional[str]:
    """
    Return the first expert key (in sorted key order) whose classes contain
    both *pred1* and *pred2*, or None when no expert qualifies.
    """
    for key in sorted(class_map):
        classes = class_map[key]
        if pred1 in classes and pred2 in classes:
            return key
    return None
