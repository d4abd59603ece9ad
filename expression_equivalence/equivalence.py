"""
Query API: normal forms, equivalence and originals of expression trees.
"""

from collections import Counter

from .expression_tree.core.node import Node
from .expression_tree.core.errors import AlreadyNormalizedError


def get_normal_form(node: Node) -> Node:
    """Cached normal form of ``node``; accepts normal forms as well."""
    return node.normalized()


def normalize_fresh(node: Node) -> Node:
    """
    Normal form of an expression that must not itself be a normal form.

    Raises:
        AlreadyNormalizedError: if ``node`` was produced by the normalizer
    """
    if node.is_normal_form:
        raise AlreadyNormalizedError(
            f"Expected an expression that had not yet been normalized, but got normalized '{node}'!")
    return node.normalized()


def is_equivalent(a: Node, b: Node) -> bool:
    """Equivalent iff both normal forms render identically."""
    return get_normal_form(a).to_string() == get_normal_form(b).to_string()


def used_originals(node: Node) -> Counter:
    return node.used_originals()
