"""Normalization of CRM field metadata"""
from .dates import DATE_WIDGETS, DateRangeResolver
from .lookup_cache import LookupCache, get_lookup_cache
from .normalizer import Normalizer
from .options import get_empty_option, mock_boolean_options
from .ordering import order_fields
from .registry import NormalizerRegistry, load_builtin_normalizers
from .visibility import VisibilityResolver, classify_visibility
from .widgets import WidgetMapper, get_angular_widget

__all__ = [
    "DATE_WIDGETS",
    "DateRangeResolver",
    "LookupCache",
    "get_lookup_cache",
    "Normalizer",
    "get_empty_option",
    "mock_boolean_options",
    "order_fields",
    "NormalizerRegistry",
    "load_builtin_normalizers",
    "VisibilityResolver",
    "classify_visibility",
    "WidgetMapper",
    "get_angular_widget"
]
