"""Utilities for expression trees."""

from .normalizer import ExpressionNormalizer, normalize
from .sympy_utils import SymPyChecker
from .validator import ExpressionValidator
from .tree_utils import iter_nodes, find_nodes_by_operator, get_used_originals, count_original

__all__ = [
    'ExpressionNormalizer', 'normalize', 'SymPyChecker', 'ExpressionValidator',
    'iter_nodes', 'find_nodes_by_operator', 'get_used_originals', 'count_original'
]
