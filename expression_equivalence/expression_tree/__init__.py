"""Expression Tree Module

Core expression tree functionality: nodes, operators and the normalizer.
"""

from .core.node import Node, ConstantNode, BinaryOpNode, leaf, as_node, combine
from .core.operators import NodeType, OpType, BINARY_OP_MAP, ADD, SUB, MUL, DIV
from .core.numeric import float_equals
from .core.errors import AlreadyNormalizedError
from .utils import ExpressionNormalizer, normalize, SymPyChecker, ExpressionValidator

__all__ = [
    "Node", "ConstantNode", "BinaryOpNode", "leaf", "as_node", "combine",
    "NodeType", "OpType", "BINARY_OP_MAP", "ADD", "SUB", "MUL", "DIV",
    "float_equals", "AlreadyNormalizedError",
    "ExpressionNormalizer", "normalize", "SymPyChecker", "ExpressionValidator"
]
