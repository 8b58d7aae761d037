"""
Unit tests for class-token primitives and composition.
"""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from suikit.classes import (
    class_attr,
    cx,
    from_either,
    from_flag,
    from_literal,
    from_optional,
    from_optional_with_key,
    from_text_align,
    variant_token,
)
from suikit.specs import (
    OFF,
    ON,
    ButtonAnimation,
    ButtonAttachedPosition,
    Color,
    Flag,
    IconCorner,
    LabelCorner,
    LabelPointing,
    LabelRibbon,
    TextAlign,
    Variant,
)

EITHER_ENUMS = [
    ButtonAnimation,
    ButtonAttachedPosition,
    IconCorner,
    LabelCorner,
    LabelPointing,
    LabelRibbon,
]

tokens = st.lists(st.text(alphabet="abcdefghij ", min_size=1, max_size=8), max_size=5)


class TestPrimitives:
    """Tests for single-prop primitives."""

    def test_literal(self):
        assert from_literal("ui") == ["ui"]

    def test_flag_on(self):
        assert from_flag(True, "basic") == ["basic"]

    def test_flag_off(self):
        assert from_flag(False, "basic") == []

    def test_optional_present(self):
        assert from_optional(Color.RED) == ["red"]

    def test_optional_plain_string(self):
        assert from_optional("my-class") == ["my-class"]

    def test_optional_absent(self):
        assert from_optional(None) == []

    def test_optional_with_key_orders_variant_first(self):
        assert from_optional_with_key(IconCorner.TOP_LEFT, "corner") == ["top left", "corner"]

    def test_optional_with_key_absent(self):
        assert from_optional_with_key(None, "floated") == []

    def test_variant_token_multi_word_uses_space(self):
        assert variant_token(IconCorner.BOTTOM_RIGHT) == "bottom right"


class TestEitherResolution:
    """Tests for the either-prop law."""

    def test_flag_false_is_empty(self):
        assert from_either(OFF, "corner") == []
        assert from_either(Flag(on=False), "corner") == []

    def test_flag_true_is_key(self):
        assert from_either(ON, "corner") == ["corner"]

    def test_variant_for_every_member_of_every_enum(self):
        """Variant(v) yields [token(v), key] for all either-prop enums."""
        for enum_type in EITHER_ENUMS:
            for member in enum_type:
                assert from_either(Variant(value=member), "key") == [member.value, "key"]


class TestTextAlign:
    """Tests for the text alignment special case."""

    def test_justified_has_no_aligned_key(self):
        assert from_text_align("justified") == ["justified"]
        assert from_text_align(TextAlign.JUSTIFIED) == ["justified"]

    def test_other_values_are_aligned(self):
        assert from_text_align("left") == ["left", "aligned"]
        assert from_text_align(TextAlign.CENTER) == ["center", "aligned"]

    def test_unset_is_empty(self):
        assert from_text_align(None) == []


class TestComposition:
    """Tests for cx and class_attr."""

    def test_empty(self):
        assert cx() == []

    def test_preserves_group_and_inner_order(self):
        assert cx(["ui"], [], ["top left", "corner"], [], ["icon"]) == [
            "ui",
            "top left",
            "corner",
            "icon",
        ]

    def test_keeps_duplicates(self):
        assert cx(["left"], ["left", "floated"]) == ["left", "left", "floated"]

    @given(st.lists(tokens, max_size=6))
    def test_concatenation_property(self, groups):
        expected = [token for group in groups for token in group]
        assert cx(*groups) == expected

    def test_class_attr_joins_with_single_space(self):
        assert class_attr(["ui", "top left", "corner"]) == "ui top left corner"

    def test_class_attr_empty_is_none(self):
        assert class_attr([]) is None
