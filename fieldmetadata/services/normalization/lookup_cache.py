"""Process-lifetime memo of CRM lookups used during normalization"""
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Dict, List, Optional

from fieldmetadata.models.schemas import DatePreferenceSchema, DateRangeSchema


@dataclass
class LookupCache:
    """
    Memoized lookup results, keyed by lookup kind.

    Field configuration does not change during a process lifetime, so
    entries are written once per key and never expire. Concurrent first
    writes of the same key store the same value; the last writer wins.
    """

    contact_types: Optional[List[str]] = None
    date_formats: Dict[str, DatePreferenceSchema] = field(default_factory=dict)
    date_ranges: Dict[str, DateRangeSchema] = field(default_factory=dict)

    def clear(self) -> None:
        """Drop every memoized lookup"""
        self.contact_types = None
        self.date_formats = {}
        self.date_ranges = {}


@lru_cache(maxsize=1)
def get_lookup_cache() -> LookupCache:
    """Get the process-wide lookup cache"""
    return LookupCache()
