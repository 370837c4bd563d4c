"""
Shared configuration and error types used by the deploy and storefront packages.
"""

__all__ = []
