"""Selectable date ranges for date fields"""
from datetime import date
from typing import Callable, List, Optional, Tuple
import logging

from fieldmetadata.core.config import settings
from fieldmetadata.core.exceptions import CrmApiError
from fieldmetadata.core.logging import get_logger, safe_log
from fieldmetadata.models.schemas import DateRangeSchema, FieldSchema

from .lookup_cache import LookupCache, get_lookup_cache

logger = get_logger(__name__)

# Raw html types plus the mapped widget, so this works before or after
# widget mapping
DATE_WIDGETS = frozenset({"Date", "DateTime", "Select Date", "crm-ui-datepicker"})

# Entity under which every contact type exposes its fields
CONTACT_ENTITY = "Contact"


class DateRangeResolver:
    """
    Adds minDate and maxDate to date fields, for custom and core fields alike.

    Ranges are cached per field name, date format offsets per format type and
    the contact type list once, all in the given LookupCache.
    """

    def __init__(
        self,
        lookup,
        cache: Optional[LookupCache] = None,
        today: Callable[[], date] = date.today
    ):
        self.lookup = lookup
        self.cache = cache if cache is not None else get_lookup_cache()
        self.today = today

    def fetch_and_normalize_dates(self, fields: List[FieldSchema]) -> None:
        """Set minDate/maxDate on every field with a date widget"""
        this_year = self.today().year

        for field in fields:
            if field.widget not in DATE_WIDGETS:
                continue

            date_range = self.cache.date_ranges.get(field.name)
            if date_range is None:
                start, end = self._get_year_offsets(field)
                date_range = DateRangeSchema(
                    minDate=f"{this_year - start}-01-01",
                    maxDate=f"{this_year + end}-12-31"
                )
                self.cache.date_ranges[field.name] = date_range
                safe_log(
                    logger,
                    logging.DEBUG,
                    "Date range cached",
                    field_name=field.name,
                    min_date=date_range.minDate,
                    max_date=date_range.maxDate
                )

            field.minDate = date_range.minDate
            field.maxDate = date_range.maxDate

    def _get_year_offsets(self, field: FieldSchema) -> Tuple[int, int]:
        prefix = settings.custom_field_prefix
        if field.name.startswith(prefix):
            return self._get_custom_field_offsets(field.name[len(prefix):])
        return self._get_core_field_offsets(field)

    def _default_offsets(self) -> Tuple[int, int]:
        return settings.default_start_years, settings.default_end_years

    def _get_custom_field_offsets(self, field_id: str) -> Tuple[int, int]:
        try:
            custom_field = self.lookup.get_custom_field(field_id)
        except CrmApiError as e:
            safe_log(
                logger,
                logging.WARNING,
                "Custom field lookup failed, using default date range",
                field_name=field_id,
                error_message=str(e)
            )
            return self._default_offsets()

        default_start, default_end = self._default_offsets()
        start = custom_field.start_date_years
        end = custom_field.end_date_years
        return (
            default_start if start is None else start,
            default_end if end is None else end
        )

    def _get_core_field_offsets(self, field: FieldSchema) -> Tuple[int, int]:
        # field.entity comes from the fetcher and may be a contact type
        # (birth_date is on Individual); the API knows it as Contact
        entity = CONTACT_ENTITY if field.entity in self._get_contact_types() else field.entity

        try:
            format_type = self.lookup.get_field_format_type(entity, field.name)
            if not format_type:
                return self._default_offsets()

            preferences = self.cache.date_formats.get(format_type)
            if preferences is None:
                preferences = self.lookup.get_date_preferences(format_type)
                self.cache.date_formats[format_type] = preferences
            return preferences.start, preferences.end
        except Exception as e:
            # A missing format type means default offsets, not an error
            safe_log(
                logger,
                logging.WARNING,
                "Date format lookup failed, using default date range",
                entity=entity,
                field_name=field.name,
                error_type=type(e).__name__,
                error_message=str(e)
            )
            return self._default_offsets()

    def _get_contact_types(self) -> List[str]:
        if self.cache.contact_types is None:
            self.cache.contact_types = list(self.lookup.get_contact_types())
            safe_log(
                logger,
                logging.DEBUG,
                "Contact types cached",
                contact_types_count=len(self.cache.contact_types)
            )
        return self.cache.contact_types
