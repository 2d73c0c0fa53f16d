"""Ordering of fields and their options"""
from typing import Any, List

from fieldmetadata.models.schemas import FieldSchema


def _order_key(item: Any) -> Any:
    return item.order


def order_fields(fields: List[FieldSchema]) -> None:
    """
    Sort fields, and the options of each field, by their order key.

    Both sorts are stable: items with equal order keep their input order,
    which usually reflects the upstream row order.
    """
    for field in fields:
        if len(field.options) > 1:
            field.options.sort(key=_order_key)
    fields.sort(key=_order_key)
