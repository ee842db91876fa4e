# services/stats_service.py
from datetime import date
from typing import Any, Dict, List, Optional

from core.constants import CATEGORIES, DEFAULT_CATEGORY, WEEKDAY_LABELS
from core.time_utils import parse_day, today_local, trailing_days


def completion_rate(completed: int, total: int) -> str:
    """Percentage as a whole-number string; halves round up; "0" for no items."""
    if not total:
        return "0"
    return str(int(completed / total * 100 + 0.5))


def summary_counters(goals: List[Dict[str, Any]], tasks: List[Dict[str, Any]]) -> Dict[str, Any]:
    total = len(goals) + len(tasks)
    completed = sum(1 for g in goals if g.get("completed")) + sum(1 for t in tasks if t.get("completed"))
    return {
        "total": total,
        "completed": completed,
        "pending": total - completed,
        "rate": completion_rate(completed, total),
    }


def weekly_series(goals: List[Dict[str, Any]], tasks: List[Dict[str, Any]],
                  today: Optional[date] = None) -> List[Dict[str, Any]]:
    """Completed/total per day for the 7 days ending today, oldest first.

    An item counts on its own day, or on every day when it is daily.
    """
    days = trailing_days(today or today_local(), 7)
    index = {d: i for i, d in enumerate(days)}
    rows = [{"day": WEEKDAY_LABELS[d.weekday()], "completed": 0, "total": 0} for d in days]

    def _count(items, date_key):
        for item in items:
            done = bool(item.get("completed"))
            if item.get("isDaily"):
                hits = range(len(rows))
            else:
                i = index.get(parse_day(item.get(date_key)))
                if i is None:
                    continue
                hits = (i,)
            for i in hits:
                rows[i]["total"] += 1
                if done:
                    rows[i]["completed"] += 1

    _count(goals, "date")
    _count(tasks, "scheduledDate")
    return rows


def category_breakdown(items: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    counts = {c: 0 for c in CATEGORIES}
    for item in items:
        cat = item.get("category") or DEFAULT_CATEGORY
        if cat in counts:
            counts[cat] += 1
    return [{"category": c, "count": n} for c, n in counts.items() if n > 0]
