"""Normalizers for the entities supported out of the box"""
from .custom_group import CustomGroupNormalizer
from .profile import ProfileNormalizer

__all__ = [
    "CustomGroupNormalizer",
    "ProfileNormalizer"
]
