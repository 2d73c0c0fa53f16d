"""Tests for visibility normalization"""
import pytest

from fieldmetadata.models.schemas import FieldSchema
from fieldmetadata.services.normalization import VisibilityResolver, classify_visibility


class TestVisibilityResolver:
    """Test cases for VisibilityResolver"""

    @pytest.fixture
    def resolver(self, lookup):
        return VisibilityResolver(lookup)

    @pytest.mark.parametrize("raw, expected", [
        (None, "public"),
        ("", "public"),
        ("Public Pages", "public"),
        ("Public Pages and Listings", "public_and_listings"),
        ("User and User Admin Only", "user"),
        ("admin", "admin"),
        ("some_custom_tag", "some_custom_tag"),
    ])
    def test_labels(self, resolver, lookup, raw, expected):
        """Legacy labels map to tags, other strings pass through"""
        fields = [FieldSchema(name="f", visibility=raw)]
        resolver.set_visibility_for_fields(fields)
        assert fields[0].visibility == expected
        assert lookup.count("get_option_values") == 0

    def test_canonical_tags_are_unchanged(self, resolver):
        """Running on canonical tags is a no-op"""
        fields = [
            FieldSchema(name="a", visibility="public"),
            FieldSchema(name="b", visibility="public_and_listings"),
            FieldSchema(name="c", visibility="user"),
        ]
        resolver.set_visibility_for_fields(fields)
        resolver.set_visibility_for_fields(fields)
        assert [f.visibility for f in fields] == ["public", "public_and_listings", "user"]

    def test_numeric_ids_resolve_through_option_group(self, resolver, lookup):
        """Int and digit-string ids resolve by option name, then by label"""
        fields = [
            FieldSchema(name="a", visibility=1),
            FieldSchema(name="b", visibility="1"),
            FieldSchema(name="c", visibility="7"),
            FieldSchema(name="d", visibility=3),
        ]
        resolver.set_visibility_for_fields(fields)
        assert [f.visibility for f in fields] == ["public", "public", "Custom", "user"]
        assert lookup.calls == [("get_option_values", "visibility")]

    def test_unknown_numeric_id_is_public(self, resolver):
        """An id missing from the option group counts as no visibility"""
        fields = [FieldSchema(name="a", visibility="99")]
        resolver.set_visibility_for_fields(fields)
        assert fields[0].visibility == "public"

    def test_lookup_is_per_call(self, resolver, lookup):
        """The option group is fetched again on the next call"""
        resolver.set_visibility_for_fields([FieldSchema(name="a", visibility="2")])
        resolver.set_visibility_for_fields([FieldSchema(name="a", visibility="2")])
        assert lookup.count("get_option_values") == 2

    def test_classify_visibility(self):
        assert classify_visibility("0") == "public"
        assert classify_visibility("Public Pages and Listings") == "public_and_listings"
