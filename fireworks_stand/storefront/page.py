"""Static storefront page for Robert's Fireworks Stand.

The page content is fixed; the only value computed at render time is the
copyright year. Rendering uses a Jinja2 template with HTML autoescaping.
"""

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from pathlib import Path
from typing import Optional, Tuple

from jinja2 import Environment, FileSystemLoader, select_autoescape

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"
PAGE_TEMPLATE = "fireworks_stand.html"


@dataclass(frozen=True)
class Product:
    """A product card on the storefront."""
    name: str
    description: str
    price: Decimal

    @property
    def display_price(self) -> str:
        return f"${self.price:.2f}"


@dataclass(frozen=True)
class Sparkle:
    """Decorative animated dot in the banner below the hero.

    Attributes:
        color: Tailwind background class suffix ("blue-500", "white", ...)
        duration: CSS animation duration
        left: Horizontal offset
        top: Vertical offset
    """
    color: str
    duration: str
    left: str
    top: str

    @property
    def style(self) -> str:
        return f"animation-duration: {self.duration}; left: {self.left}; top: {self.top}"


@dataclass(frozen=True)
class StoreInfo:
    name: str
    tagline: str
    address: str
    phone: str
    hours: Tuple[str, ...]


STORE = StoreInfo(
    name="Robert's Fireworks Stand",
    tagline="Family owned and operated in Mustang, Oklahoma",
    address="1234 Main Street, Mustang, OK 73064",
    phone="(405) 555-1234",
    hours=(
        "June 15 - July 5: 9am - 10pm",
        "December 15 - January 1: 9am - 10pm",
    ),
)

SPARKLES = (
    Sparkle(color="blue-500", duration="3s", left="20%", top="30%"),
    Sparkle(color="red-500", duration="2.5s", left="40%", top="20%"),
    Sparkle(color="white", duration="4s", left="60%", top="40%"),
    Sparkle(color="blue-500", duration="3.5s", left="80%", top="25%"),
)

FEATURED_PRODUCTS = (
    Product(name="Aerial Finale", description="Red, White, and Blue", price=Decimal("49.99")),
)


def _create_environment() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=select_autoescape(["html", "xml"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )


def render_page(today: Optional[date] = None) -> str:
    """Render the storefront page to an HTML string.

    Args:
        today: Date used for the copyright year (defaults to date.today())

    Returns:
        Complete HTML document
    """
    if today is None:
        today = date.today()

    template = _create_environment().get_template(PAGE_TEMPLATE)
    html = template.render(
        store=STORE,
        sparkles=SPARKLES,
        products=FEATURED_PRODUCTS,
        year=today.year,
    )
    logger.debug("Rendered %s (%d bytes)", PAGE_TEMPLATE, len(html))
    return html


def write_page(path: str, today: Optional[date] = None) -> Path:
    """Render the page and write it to path, creating parent directories.

    Returns:
        The path written
    """
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(render_page(today), encoding="utf-8")
    logger.info("Wrote storefront page to %s", out)
    return out
