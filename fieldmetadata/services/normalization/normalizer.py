"""Base class for all field-metadata normalizers"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional
import logging

from fieldmetadata.core.logging import get_logger, safe_log
from fieldmetadata.models.schemas import FieldMetadataSchema, FieldSchema, OptionSchema, normalize_boolean

from .dates import DateRangeResolver
from .lookup_cache import LookupCache
from .options import get_empty_option, mock_boolean_options
from .ordering import order_fields
from .visibility import VisibilityResolver
from .widgets import WidgetMapper

logger = get_logger(__name__)


class Normalizer(ABC):
    """
    Turns the data returned by an entity's fetcher into canonical field
    metadata.

    Subclasses implement normalize_data() for their entity; normalize() then
    orders the fields, normalizes visibility and adds date ranges.
    """

    entity: str = ""

    def __init__(
        self,
        lookup,
        cache: Optional[LookupCache] = None,
        widget_mapper: Optional[WidgetMapper] = None
    ):
        """
        Args:
            lookup: CrmLookupService used for option groups and date config
            cache: Lookup cache; the process-wide one when omitted
            widget_mapper: Widget mapping per rendering context
        """
        self.lookup = lookup
        self.visibility_resolver = VisibilityResolver(lookup)
        self.date_resolver = DateRangeResolver(lookup, cache)
        self.widget_mapper = widget_mapper or WidgetMapper()

    def normalize(self, data: Any, params: Optional[Dict[str, Any]] = None) -> FieldMetadataSchema:
        """
        Entry point for normalization.

        Args:
            data: The data returned by the fetcher for this entity
            params: Caller context, e.g. {"context": "Angular"}

        Returns:
            Metadata with ordered fields, canonical visibility and date ranges
        """
        params = params or {}
        metadata = self.normalize_data(data, params)
        self.order_fields(metadata.fields)
        self.set_visibility_for_fields(metadata.fields)
        self.fetch_and_normalize_dates(metadata.fields)

        safe_log(
            logger,
            logging.INFO,
            "Field metadata normalized",
            entity=self.entity or type(self).__name__,
            fields_count=len(metadata.fields)
        )
        return metadata

    @abstractmethod
    def normalize_data(self, data: Any, params: Dict[str, Any]) -> FieldMetadataSchema:
        """Map the entity's raw data to canonical fields"""

    def order_fields(self, fields: List[FieldSchema]) -> None:
        order_fields(fields)

    def set_visibility_for_fields(self, fields: List[FieldSchema]) -> None:
        self.visibility_resolver.set_visibility_for_fields(fields)

    def fetch_and_normalize_dates(self, fields: List[FieldSchema]) -> None:
        self.date_resolver.fetch_and_normalize_dates(fields)

    def set_widget_types_by_context(self, fields: List[FieldSchema], context: str) -> None:
        self.widget_mapper.set_widget_types_by_context(fields, context)

    def get_empty_field(self) -> FieldSchema:
        """Field with every key a field needs"""
        return FieldSchema()

    def get_empty_option(self) -> OptionSchema:
        return get_empty_option()

    def normalize_boolean(self, value: Any) -> str:
        return normalize_boolean(value)

    def mock_boolean_options(self, custom_field: Dict[str, Any]) -> List[OptionSchema]:
        """Boolean custom fields have no option group; simulate one"""
        return mock_boolean_options(custom_field)
