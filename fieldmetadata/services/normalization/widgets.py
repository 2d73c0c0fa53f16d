"""Mapping of raw html types to rendering widgets"""
from typing import Callable, Dict, List, Optional

from fieldmetadata.core.config import settings
from fieldmetadata.core.exceptions import WidgetContextError
from fieldmetadata.models.schemas import FieldSchema

WidgetMapping = Callable[[str], str]

DEFAULT_WIDGET_PREFIX = "crm-render-"

ANGULAR_WIDGETS = {
    "Select State/Province": "crm-render-select",
    "Select Country": "crm-render-select",
    "RichTextEditor": "crm-ui-richtext",
    "advcheckbox": "crm-render-checkbox",
    "ChainSelect": "crm-render-chain-select",
    "Date": "crm-ui-datepicker",
    "DateTime": "crm-ui-datepicker",
    "Select Date": "crm-ui-datepicker",
    "Autocomplete-Select": "crm-entityref",
}


def get_angular_widget(html_type: str) -> str:
    """Map a field html_type to an Angular widget"""
    widget = ANGULAR_WIDGETS.get(html_type)
    if widget is None:
        widget = DEFAULT_WIDGET_PREFIX + html_type.lower()
    return widget


class WidgetMapper:
    """Widget mapping functions keyed by rendering context"""

    def __init__(self, contexts: Optional[Dict[str, WidgetMapping]] = None):
        if contexts is None:
            contexts = {"Angular": get_angular_widget}
        self._contexts: Dict[str, WidgetMapping] = dict(contexts)

    def register_context(self, context: str, mapping: WidgetMapping) -> None:
        """Register (or replace) the mapping function of a context"""
        self._contexts[context] = mapping

    def has_context(self, context: str) -> bool:
        return context in self._contexts

    def map_widget(self, html_type: str, context: Optional[str] = None) -> str:
        """Map one raw html type for the given context"""
        context = context or settings.default_widget_context
        mapping = self._contexts.get(context)
        if mapping is None:
            raise WidgetContextError(f"Cannot set context '{context}': no widget mapping registered")
        return mapping(html_type)

    def set_widget_types_by_context(self, fields: List[FieldSchema], context: str) -> None:
        """Update the widget of every field for the given context"""
        if not self.has_context(context):
            raise WidgetContextError(f"Cannot set context '{context}': no widget mapping registered")
        for field in fields:
            if field.widget is not None:
                field.widget = self.map_widget(field.widget, context)
