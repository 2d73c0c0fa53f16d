"""CRM field-metadata normalization"""

__version__ = "0.1.0"
