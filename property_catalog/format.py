"""Formatting helpers for property records -> card dictionaries."""

import re

from .models import Property


def slugify(s: str) -> str:
    return re.sub(r"[^a-z0-9]+", "-", s.lower()).strip("-")


def format_price(val) -> str:
    if val is None:
        return "N/A"
    return f"${float(val):,.0f}"


def format_sqft(val) -> str:
    if val is None:
        return "N/A"
    return f"{float(val):,.0f} sqft"


def excerpt(text: str, limit: int = 120) -> str:
    """Trim ``text`` to ``limit`` characters on a word boundary."""
    text = (text or "").strip()
    if len(text) <= limit:
        return text
    cut = text[:limit].rsplit(" ", 1)[0]
    return cut.rstrip(",.;: ") + "…"


def format_coordinates(prop: Property) -> str:
    c = prop.coordinates
    return f"{c.lat:.4f}, {c.lng:.4f}"


def make_property_card(prop: Property) -> dict:
    return {
        "id": prop.id,
        "title": prop.name,
        "type": prop.type,
        "location": prop.location,
        "price": format_price(prop.price),
        "sqft": format_sqft(prop.sqft),
        "excerpt": excerpt(prop.description),
        "image": prop.image,
        "slug": f"{slugify(prop.name) or 'property'}-{prop.id}",
    }
