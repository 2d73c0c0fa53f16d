"""Canonical visibility tags for fields"""
from typing import Any, Dict, List, Optional
import logging

from fieldmetadata.core.logging import get_logger, safe_log
from fieldmetadata.models.schemas import FieldSchema

logger = get_logger(__name__)

VISIBILITY_OPTION_GROUP = "visibility"

PUBLIC = "public"
PUBLIC_AND_LISTINGS = "public_and_listings"
USER = "user"

# Labels stored by profiles (civicrm_uf_field.visibility)
LEGACY_LABELS = {
    "Public Pages": PUBLIC,
    "Public Pages and Listings": PUBLIC_AND_LISTINGS,
    "User and User Admin Only": USER,
}


def _is_numeric_id(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    # TODO: find out whether any fetcher really hands over int visibility values
    return isinstance(value, int) or (isinstance(value, str) and value.isdigit())


def _is_empty(value: Any) -> bool:
    return not value or value == "0"


def classify_visibility(value: Any) -> Any:
    """
    Map a legacy visibility label to its tag.

    - public: anyone can use this field for input; fields which don't have a
      visibility value get this
    - public_and_listings: anyone can use this field for input or view its
      value (e.g., in a profile)
    - user: only the user this field is about can use this field for input

    Any other value is returned as-is, including tags added to the
    "visibility" option group by name.
    """
    if _is_empty(value):
        return PUBLIC
    if isinstance(value, str):
        return LEGACY_LABELS.get(value, value)
    return value


class VisibilityResolver:
    """Normalizes the visibility of each field to a tag"""

    def __init__(self, lookup):
        self.lookup = lookup

    def set_visibility_for_fields(self, fields: List[FieldSchema]) -> None:
        """
        Normalize visibility values in place.

        Numeric values are option values of the "visibility" option group;
        they are resolved to the option name, which is then classified like
        any other label. The option group is fetched at most once per call.
        """
        options: Optional[Dict[str, str]] = None

        for field in fields:
            visibility = field.visibility
            if not _is_empty(visibility) and _is_numeric_id(visibility):
                if options is None:
                    options = self.lookup.get_option_values(VISIBILITY_OPTION_GROUP)
                visibility_id = str(visibility)
                visibility = options.get(visibility_id)
                if visibility is None:
                    safe_log(
                        logger,
                        logging.WARNING,
                        "Unknown visibility option value",
                        field_name=field.name,
                        visibility_id=visibility_id
                    )
            field.visibility = classify_visibility(visibility)
