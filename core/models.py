# core/models.py
"""Shapes of the per-user document and helpers to build/validate it.

Entities stay plain dicts keyed the way they are stored in the user document:

    Goal           {id, title, completed, date, priority, category, isDaily}
    Task           {id, title, completed, scheduledDate, createdAt, category, isDaily}
    Note           str
    Project        {id, title, type, createdAt, company}
    StrategyBlock  {id, title, description, type, order, projectId, position?}
    StrategyEdge   {id, source, target, projectId}
"""
import copy
import uuid
from typing import Any, Dict, List, Optional

from core.constants import BUNDLE_KEYS

Bundle = Dict[str, List[Any]]


def new_id() -> str:
    return str(uuid.uuid4())


def empty_bundle() -> Bundle:
    return {k: [] for k in BUNDLE_KEYS}


def _to_int(value: Any, default: int = 0) -> int:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    try:
        return int(float(value))
    except (TypeError, ValueError, OverflowError):
        return default


def _to_number(value: Any) -> Optional[float]:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value
    try:
        return float(value)
    except (TypeError, ValueError, OverflowError):
        return None


def _coerce_block(block: Dict[str, Any]) -> Dict[str, Any]:
    """Numeric `order`; numeric {x, y} `position` or no position at all."""
    block = dict(block, order=_to_int(block.get("order")))
    pos = block.get("position")
    if pos is None:
        return block
    x = _to_number(pos.get("x")) if isinstance(pos, dict) else None
    y = _to_number(pos.get("y")) if isinstance(pos, dict) else None
    if x is None or y is None:
        block.pop("position")
    else:
        block["position"] = dict(pos, x=x, y=y)
    return block


def coerce_bundle(raw: Any) -> Bundle:
    """Validate a stored document into a bundle; never raises.

    Missing or non-list fields become empty lists. Entity lists keep only dict
    entries carrying a string id, and notes keep only strings. Blocks get an
    int `order` and a numeric `position` (dropped when unusable).
    """
    out = empty_bundle()
    if not isinstance(raw, dict):
        return out
    for key in BUNDLE_KEYS:
        value = raw.get(key)
        if not isinstance(value, list):
            continue
        if key == "notes":
            out[key] = [n for n in value if isinstance(n, str)]
        else:
            items = [item for item in value if isinstance(item, dict) and isinstance(item.get("id"), str)]
            if key == "blocks":
                items = [_coerce_block(b) for b in items]
            out[key] = items
    return out


def snapshot(bundle: Bundle) -> Bundle:
    """Deep copy of the six collections, safe to hand to another thread."""
    return {k: copy.deepcopy(list(bundle.get(k) or [])) for k in BUNDLE_KEYS}
