# services/session_service.py
import logging
from typing import Any, Dict, List, Optional

from core.constants import BUNDLE_KEYS
from core.models import Bundle, empty_bundle
from core.time_utils import today_local
from services.filter_service import FilterState
from services.sync_service import SyncSession

logger = logging.getLogger(__name__)


class AppSession:
    """Everything tied to one logged-in identity.

    Created at login, closed at logout; nothing here is shared between users.
    Mutations go through `apply`: replace the collection locally, then let
    the sync session schedule the write-back.
    """

    def __init__(self, user: Dict[str, Any], sync: Optional[SyncSession] = None):
        self.user = user
        self.filters = FilterState(day=today_local())
        self.data: Bundle = empty_bundle()
        self.sync = sync or SyncSession(user["username"])
        self.syncing = False
        self.active_company: Optional[str] = None
        self.insight: Optional[str] = None

    @property
    def username(self) -> str:
        return self.user["username"]

    def start(self) -> None:
        self.syncing = True
        try:
            bundle = self.sync.load()
            if bundle is not None:
                self.data = bundle
                self.active_company = None
        finally:
            self.syncing = False

    def get(self, key: str) -> List[Any]:
        return self.data[key]

    def apply(self, **changes: List[Any]) -> bool:
        """Replace one or more collections, then schedule one save."""
        for key in changes:
            if key not in BUNDLE_KEYS:
                raise KeyError(key)
        for key, items in changes.items():
            self.data[key] = list(items)
        return self.sync.notify_mutation(self.data)

    def close(self) -> None:
        self.sync.close()
        logger.info("Session closed for %s", self.username)
