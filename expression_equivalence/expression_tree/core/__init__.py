"""Core expression tree components."""

from .node import Node, ConstantNode, BinaryOpNode, leaf, as_node, combine
from .operators import NodeType, OpType, BINARY_OP_MAP, ADD, SUB, MUL, DIV
from .numeric import float_equals, is_one, is_minus_one
from .errors import AlreadyNormalizedError

__all__ = [
    'Node', 'ConstantNode', 'BinaryOpNode', 'leaf', 'as_node', 'combine',
    'NodeType', 'OpType', 'BINARY_OP_MAP', 'ADD', 'SUB', 'MUL', 'DIV',
    'float_equals', 'is_one', 'is_minus_one',
    'AlreadyNormalizedError'
]
