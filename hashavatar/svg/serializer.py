"""Write compact SVG documents from element definitions."""

from __future__ import annotations

from html import escape
from typing import Any

XML_DECLARATION = '<?xml version="1.0" encoding="utf-8"?>'
SVG_NS = "http://www.w3.org/2000/svg"
XLINK_NS = "http://www.w3.org/1999/xlink"

# Decimal places kept for fractional coordinates (e.g. 100px / 6 cells)
_COORD_PRECISION = 4


def format_number(value: float) -> str:
    """Render a coordinate without a trailing ``.0`` for whole numbers."""
    value = round(float(value), _COORD_PRECISION)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def style_attr(props: dict[str, str]) -> str:
    """``{"fill": "#fff", "font-size": "50px"}`` → ``fill: #fff; font-size: 50px``."""
    return "; ".join(f"{k}: {v}" for k, v in props.items())


def rect(x: float, y: float, width: float, height: float, fill: str) -> dict[str, Any]:
    return {
        "tag": "rect",
        "x": x,
        "y": y,
        "width": width,
        "height": height,
        "style": style_attr({"fill": fill}),
    }


def circle(cx: float, cy: float, r: float, fill: str) -> dict[str, Any]:
    return {"tag": "circle", "cx": cx, "cy": cy, "r": r, "style": style_attr({"fill": fill})}


def text(content: str, x: str, y: str, style: dict[str, str]) -> dict[str, Any]:
    return {"tag": "text", "x": x, "y": y, "style": style_attr(style), "text": content}


def _attr_value(value: Any) -> str:
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, (int, float)):
        return format_number(value)
    return escape(str(value), quote=True)


def serialize_element(elem: dict[str, Any]) -> str:
    tag = elem.get("tag", "path")
    attrs = {k: v for k, v in elem.items() if k not in ("tag", "text")}
    attr_str = " ".join(f'{k}="{_attr_value(v)}"' for k, v in attrs.items())
    if "text" in elem:
        return f"<{tag} {attr_str}>{escape(str(elem['text']), quote=False)}</{tag}>"
    return f"<{tag} {attr_str} />"


def serialize_svg(elements: list[dict[str, Any]], width: float, height: float) -> str:
    """Generate a single-line SVG document, XML declaration first."""
    parts = [
        XML_DECLARATION,
        f'<svg xmlns="{SVG_NS}" xmlns:xlink="{XLINK_NS}"'
        f' width="{format_number(width)}" height="{format_number(height)}">',
    ]
    parts.extend(serialize_element(elem) for elem in elements)
    parts.append("</svg>")
    return "".join(parts)
