# services/items_service.py
"""Goal/task/note mutations.

Every function returns a new list and leaves its input untouched, so the
caller can hand the result to the session as one local-apply step.
Blank titles are a no-op: the input list comes back as is.
"""
from datetime import date
from typing import Any, Dict, List, Optional

from core.constants import CATEGORIES, DEFAULT_CATEGORY, PRIORITIES, PRIORITY_MEDIUM
from core.models import new_id
from core.time_utils import day_anchor, parse_day, utc_now_iso

Item = Dict[str, Any]


def _clean_category(category: Optional[str], fallback: str = DEFAULT_CATEGORY) -> str:
    category = (category or "").strip()
    return category if category in CATEGORIES else fallback


def add_goal(goals: List[Item], title: str, day: date, category: Optional[str] = None,
             is_daily: bool = False, priority: str = PRIORITY_MEDIUM) -> List[Item]:
    title = (title or "").strip()
    if not title:
        return goals
    goal = {
        "id": new_id(),
        "title": title,
        "completed": False,
        "date": day_anchor(day),
        "category": _clean_category(category, CATEGORIES[0]),
        "priority": priority if priority in PRIORITIES else PRIORITY_MEDIUM,
        "isDaily": bool(is_daily),
    }
    return [goal] + list(goals)


def add_task(tasks: List[Item], title: str, day: date, category: Optional[str] = None,
             is_daily: bool = False) -> List[Item]:
    title = (title or "").strip()
    if not title:
        return tasks
    task = {
        "id": new_id(),
        "title": title,
        "completed": False,
        "scheduledDate": day_anchor(day),
        "createdAt": utc_now_iso(),
        "category": _clean_category(category),
        "isDaily": bool(is_daily),
    }
    return [task] + list(tasks)


def toggle_item(items: List[Item], item_id: str) -> List[Item]:
    return [dict(x, completed=not x.get("completed")) if x.get("id") == item_id else x for x in items]


def edit_item(items: List[Item], item_id: str, date_key: str, title: str,
              day: Optional[date] = None, category: Optional[str] = None,
              is_daily: bool = False) -> List[Item]:
    """Replace title/date/category/isDaily of one item in place by id."""
    title = (title or "").strip()
    if not title:
        return items
    out = []
    for x in items:
        if x.get("id") != item_id:
            out.append(x)
            continue
        keep_day = day or parse_day(x.get(date_key))
        updated = dict(x, title=title, isDaily=bool(is_daily))
        if keep_day is not None:
            updated[date_key] = day_anchor(keep_day)
        updated["category"] = _clean_category(category, x.get("category") or DEFAULT_CATEGORY)
        out.append(updated)
    return out


def delete_item(items: List[Item], item_id: str) -> List[Item]:
    return [x for x in items if x.get("id") != item_id]


def remove_daily_items(items: List[Item]) -> List[Item]:
    return [x for x in items if not x.get("isDaily")]


def add_note(notes: List[str], text: str) -> List[str]:
    text = (text or "").strip()
    if not text:
        return notes
    return list(notes) + [text]


def delete_note(notes: List[str], index: int) -> List[str]:
    return [n for i, n in enumerate(notes) if i != index]
