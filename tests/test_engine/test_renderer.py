"""Tests for grid rendering and output encodings."""

import base64
import re

import numpy as np

from hashavatar.engine.config import IdenticonConfig
from hashavatar.engine.renderer import DATA_URI_PREFIX, RenderedImage, render
from tests.conftest import XML_HEADER

_RECT_RE = re.compile(r'<rect x="([\d.]+)" y="([\d.]+)" width="([\d.]+)" height="([\d.]+)"')


def _checkerboard(n):
    return (np.indices((n, n)).sum(axis=0) % 2 == 0)


def test_markup_header_and_canvas(default_config):
    image = render(np.zeros((5, 5), dtype=bool), default_config)
    assert image.markup.startswith(XML_HEADER)
    assert '<svg xmlns="http://www.w3.org/2000/svg"' in image.markup
    assert 'width="100" height="100"' in image.markup
    assert image.markup.endswith("</svg>")


def test_empty_grid_has_no_squares():
    image = render(np.zeros((5, 5), dtype=bool), IdenticonConfig())
    assert image.square_count == 0
    assert "<rect" not in image.markup


def test_one_square_per_on_cell():
    grid = _checkerboard(5)
    image = render(grid, IdenticonConfig())
    assert image.square_count == int(grid.sum())
    assert image.markup.count("<rect") == int(grid.sum())


def test_square_positions():
    grid = np.zeros((5, 5), dtype=bool)
    grid[1, 3] = True
    image = render(grid, IdenticonConfig(fill_color="#123456"))
    assert '<rect x="60" y="20" width="20" height="20" style="fill: #123456" />' in image.markup


def test_fractional_cell_size():
    grid = np.ones((6, 6), dtype=bool)
    image = render(grid, IdenticonConfig(grid_size=6))
    positions = {(float(x), float(y)) for x, y, _, _ in _RECT_RE.findall(image.markup)}
    assert len(positions) == 36
    assert (16.6667, 83.3333) in positions
    assert 'width="16.6667"' in image.markup


def test_data_uri_round_trip():
    image = render(_checkerboard(5), IdenticonConfig())
    assert image.data_uri.startswith(DATA_URI_PREFIX)
    decoded = base64.b64decode(image.data_uri[len(DATA_URI_PREFIX):]).decode("utf-8")
    assert decoded.startswith(XML_HEADER)
    assert "<svg" in decoded
    assert decoded == image.markup


def test_html_selector():
    image = render(_checkerboard(5), IdenticonConfig())
    assert "<svg" in image.html(False)
    assert image.html(False) == image.markup
    tag = image.html(True)
    assert tag.startswith('<img src="data:image/svg+xml;base64,')
    assert tag == f'<img src="{image.data_uri}" />'


def test_rendered_image_without_elements():
    image = RenderedImage(canvas_size=32)
    assert 'width="32" height="32"' in image.markup


def test_render_is_deterministic():
    grid = _checkerboard(7)
    config = IdenticonConfig(grid_size=7, fill_color="#abcdef")
    assert render(grid, config).markup == render(grid, config).markup
