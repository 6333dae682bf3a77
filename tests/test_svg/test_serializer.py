"""Tests for SVG serialization."""

from hashavatar.svg.serializer import (
    circle,
    format_number,
    rect,
    serialize_element,
    serialize_svg,
    style_attr,
    text,
)
from tests.conftest import XML_HEADER


def test_format_number():
    assert format_number(20) == "20"
    assert format_number(20.0) == "20"
    assert format_number(100 / 6) == "16.6667"
    assert format_number(0.5) == "0.5"


def test_style_attr():
    assert style_attr({"fill": "#fff", "font-size": "50px"}) == "fill: #fff; font-size: 50px"


def test_rect_element():
    assert serialize_element(rect(0, 20, 20, 20, "#000")) == (
        '<rect x="0" y="20" width="20" height="20" style="fill: #000" />'
    )


def test_circle_element():
    assert serialize_element(circle(50, 50, 50, "#e5b3c9")) == (
        '<circle cx="50" cy="50" r="50" style="fill: #e5b3c9" />'
    )


def test_text_element_escapes_content():
    out = serialize_element(text("A&B", "50%", "55%", {"fill": "#fff"}))
    assert out == '<text x="50%" y="55%" style="fill: #fff">A&amp;B</text>'


def test_attribute_values_are_escaped():
    out = serialize_element({"tag": "rect", "style": 'fill: "red"'})
    assert 'style="fill: &quot;red&quot;"' in out


def test_document_layout():
    svg = serialize_svg([rect(0, 0, 10, 10, "#000")], 10, 10)
    assert svg == (
        XML_HEADER
        + '<svg xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink"'
        ' width="10" height="10">'
        '<rect x="0" y="0" width="10" height="10" style="fill: #000" />'
        "</svg>"
    )
