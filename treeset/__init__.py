from .base.ordered_set import OrderedSet
from .base.query import select

__all__ = [
    "OrderedSet",
    "select",
]

__version__ = '0.1.0'
