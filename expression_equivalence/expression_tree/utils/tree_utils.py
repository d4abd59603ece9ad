"""
Tree Utility Functions

Traversal and originals accounting for expression trees, used by the
normalization audit.
"""

from collections import Counter
from typing import Iterator, List, Optional

from ..core.node import Node, BinaryOpNode
from ..core.numeric import float_equals
from ..core.operators import OpType


def iter_nodes(node: Node) -> Iterator[Node]:
    """Pre-order walk over ``node`` and its descendants, left before right."""
    pending = [node]
    while pending:
        current = pending.pop()
        yield current
        if isinstance(current, BinaryOpNode):
            pending.append(current.right)
            pending.append(current.left)


def find_nodes_by_operator(node: Node, operator: OpType) -> List[BinaryOpNode]:
    """Internal nodes using ``operator``, in pre-order."""
    return [n for n in iter_nodes(node)
            if isinstance(n, BinaryOpNode) and n.operator == operator]


def get_used_originals(node: Node) -> Counter:
    """
    Multiset of original leaf values, mapping value to occurrence count.

    A leaf contributes one occurrence of its value; an internal node the sum of
    its children's counts.
    """
    return node.used_originals()


def count_original(originals: Counter, value: float, epsilon: Optional[float] = None) -> int:
    """Occurrences of ``value`` in ``originals``, matching keys within epsilon."""
    return sum(count for key, count in originals.items()
               if float_equals(key, value, epsilon))
