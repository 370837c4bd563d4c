"""Static storefront page rendered with Jinja2."""

from fireworks_stand.storefront.page import FEATURED_PRODUCTS, STORE, Product, render_page, write_page

__all__ = ["FEATURED_PRODUCTS", "STORE", "Product", "render_page", "write_page"]
