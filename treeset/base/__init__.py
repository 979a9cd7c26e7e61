from .ordered_set import OrderedSet
from .slot import Node, Slot
