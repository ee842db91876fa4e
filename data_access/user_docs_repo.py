# data_access/user_docs_repo.py
import logging
from typing import Any, Optional

from core.db import users_collection
from core.models import Bundle, coerce_bundle, empty_bundle, snapshot
from core.constants import BUNDLE_KEYS
from core.time_utils import utc_now_iso

logger = logging.getLogger(__name__)


def load_user_data(username: str, collection: Optional[Any] = None) -> Bundle:
    """Fetch the user's document; absent → empty bundle. Errors propagate."""
    coll = collection if collection is not None else users_collection()
    doc = coll.find_one({"_id": username})
    if not doc:
        logger.info("No document for %s yet, starting empty", username)
        return empty_bundle()
    return coerce_bundle(doc)


def save_user_data(username: str, bundle: Bundle, collection: Optional[Any] = None) -> None:
    """Upsert the six collections as whole top-level fields.

    Other fields of the stored document are left as they are; each collection
    is replaced in full, never merged per item.
    """
    coll = collection if collection is not None else users_collection()
    payload = snapshot(bundle)
    fields = {k: payload[k] for k in BUNDLE_KEYS}
    fields["updatedAt"] = utc_now_iso()
    coll.update_one({"_id": username}, {"$set": fields}, upsert=True)
    logger.debug("Saved document for %s", username)
