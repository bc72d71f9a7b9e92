from .builder import EmptyInputError, TreeBuilder, build_tree
from .frequency import FrequencyTable
from .tree import HuffmanTree, Node

__all__ = [
    "EmptyInputError",
    "FrequencyTable",
    "HuffmanTree",
    "Node",
    "TreeBuilder",
    "build_tree",
]
