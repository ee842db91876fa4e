# services/filter_service.py
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Any, Dict, List

from core.constants import ALL, DONE, PENDING, DEFAULT_CATEGORY, TODAY, YESTERDAY, CUSTOM
from core.time_utils import parse_day


@dataclass
class FilterState:
    day: date
    category: str = ALL
    status: str = ALL
    mode: str = TODAY


def quick_date(state: FilterState, mode: str, today: date) -> FilterState:
    """Hoje/Ontem buttons."""
    if mode not in (TODAY, YESTERDAY):
        raise ValueError(f"not a quick date mode: {mode}")
    state.mode = mode
    state.day = today if mode == TODAY else today - timedelta(days=1)
    return state


def pick_date(state: FilterState, day: date) -> FilterState:
    """Free date picker; always leaves the quick modes."""
    state.mode = CUSTOM
    state.day = day
    return state


def _matches_status(completed: bool, status: str) -> bool:
    if status == DONE:
        return completed
    if status == PENDING:
        return not completed
    return True


def apply_filters(items: List[Dict[str, Any]], date_key: str, day: date,
                  category: str = ALL, status: str = ALL,
                  include_overdue: bool = False) -> List[Dict[str, Any]]:
    out = []
    for item in items:
        item_day = parse_day(item.get(date_key))
        completed = bool(item.get("completed"))
        on_day = item_day is not None and item_day == day
        overdue = include_overdue and not completed and item_day is not None and item_day < day
        if not (on_day or bool(item.get("isDaily")) or overdue):
            continue
        item_category = item.get("category") or DEFAULT_CATEGORY
        if category != ALL and item_category != category:
            continue
        if not _matches_status(completed, status):
            continue
        out.append(item)
    return out


def current_goals(goals: List[Dict[str, Any]], state: FilterState) -> List[Dict[str, Any]]:
    return apply_filters(goals, "date", state.day, state.category, state.status)


def current_tasks(tasks: List[Dict[str, Any]], state: FilterState) -> List[Dict[str, Any]]:
    return apply_filters(tasks, "scheduledDate", state.day, state.category, state.status,
                         include_overdue=True)


def is_overdue(item: Dict[str, Any], date_key: str, day: date) -> bool:
    item_day = parse_day(item.get(date_key))
    return not item.get("completed") and item_day is not None and item_day < day
