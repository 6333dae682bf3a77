"""Tests for the name identity and hash-derived colours."""

import dataclasses
import hashlib

import pytest

from hashavatar.identity.color import hex_to_rgb, hsl_color, hue_of, identity_colors
from hashavatar.identity.name import Name
from tests.conftest import MIXED_HASH, TEST_NAME


def test_hash_is_md5_of_value():
    name = Name(TEST_NAME)
    assert name.hash == hashlib.md5(TEST_NAME.encode()).hexdigest()
    assert len(name.hash) == 32


def test_make_matches_constructor():
    assert Name.make(TEST_NAME) == Name(TEST_NAME)


def test_with_hash_keeps_supplied_hash():
    name = Name.with_hash(TEST_NAME, MIXED_HASH)
    assert name.value == TEST_NAME
    assert name.hash == MIXED_HASH


def test_name_is_frozen():
    name = Name(TEST_NAME)
    with pytest.raises(dataclasses.FrozenInstanceError):
        name.value = "Other"


@pytest.mark.parametrize(
    "value, initials",
    [("Test Name", "TN"), ("jane", "J"), ("Jean-Luc Picard", "JLP"), ("", "")],
)
def test_initials(value, initials):
    assert Name(value).initials == initials


def test_hex_color_reads_hash_prefix():
    name = Name.with_hash("x", MIXED_HASH)
    assert name.hex_color() == "#aabbcc"
    assert name.hex_color(6) == "#ddeeff"


def test_hex_color_offset_is_clamped():
    name = Name.with_hash("x", MIXED_HASH)
    assert name.hex_color(100) == "#334455"


def test_hue_of_primary_colours():
    assert hue_of("#ff0000") == pytest.approx(0.0)
    assert hue_of("#00ff00") == pytest.approx(1 / 3)


def test_hsl_color_keeps_hash_hue():
    name = Name.with_hash("x", "ff0000" + "0" * 26)
    assert hsl_color(name) == "#852c2c"


def test_identity_colors_share_hue_and_differ_in_lightness():
    name = Name(TEST_NAME)
    background, foreground = identity_colors(name)
    assert hue_of(background) == pytest.approx(hue_of(foreground), abs=0.01)
    assert sum(hex_to_rgb(background)) > sum(hex_to_rgb(foreground))


def test_hex_to_rgb_rejects_short_values():
    with pytest.raises(ValueError):
        hex_to_rgb("#fff")


def test_identity_colors_for_test_name():
    # Channels truncate: "Test Name" gives a pink background and a dark rose text colour
    assert identity_colors(Name(TEST_NAME)) == ("#e5b3c9", "#852d55")
