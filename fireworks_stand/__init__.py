"""
fireworks-stand: deployment notifiers and storefront page for Robert's Fireworks Stand.

Ships three per-environment deployment notifiers that report the image a
release would use, and a static storefront page rendered with Jinja2.
"""

__version__ = "1.0.0"

__all__ = ["__version__"]
