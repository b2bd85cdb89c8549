# shops/views/__init__.py

"""
Shops views package exports.
"""

from .shop import ShopViewSet

__all__ = [
    "ShopViewSet",
]
