"""
Audits of the normalizer.

``find_missing_originals`` and ``check_normalization`` verify that a normal
form is a legitimate rewriting of its expression; ``confirm_equivalence``
checks an equivalence verdict against exact SymPy arithmetic to catch false
positives.
"""

from typing import Dict, Tuple

from .config import get_config
from .equivalence import is_equivalent, normalize_fresh
from .expression_tree.core.node import Node
from .expression_tree.core.numeric import float_equals
from .expression_tree.utils.sympy_utils import SymPyChecker
from .expression_tree.utils.tree_utils import count_original
from .expression_tree.utils.validator import ExpressionValidator
from .logging_system import LogLevel, get_logger, log_info, log_warning


class NormalizationAuditError(AssertionError):
    """A normal form failed one of the audit checks"""


def describe(node: Node) -> str:
    return f"'{node}' (normalized: '{node.normalized()}')"


def _is_exempt(value: float) -> bool:
    return any(float_equals(value, exempt) for exempt in get_config().exempt_originals)


def find_missing_originals(node: Node) -> Dict[float, Tuple[int, int]]:
    """
    Original values that occur less often in the normal form than in ``node``.

    Returns:
        Mapping of value to (expected, actual) occurrence counts. Exempt values
        (1 and -1 by default) are only logged, never reported.
    """
    original = node.used_originals()
    normalized = node.normalized().used_originals()
    missing: Dict[float, Tuple[int, int]] = {}

    for value, expected in original.items():
        actual = count_original(normalized, value)
        if actual >= expected:
            continue
        if _is_exempt(value):
            log_warning(f"Insufficient occurrences ({actual} < {expected}) of {value:g} in normal form "
                        f"'{node.normalized()}' of '{node}'; reduction allowed in normalization")
            continue
        missing[value] = (expected, actual)

    return missing


def check_normalization(node: Node):
    """
    Verify non-mutation, idempotence, shape and originals preservation for ``node``.

    Raises:
        AlreadyNormalizedError: if ``node`` is itself a normal form
        NormalizationAuditError: if any check fails
    """
    before = node.to_string()
    normal = normalize_fresh(node)
    after = node.to_string()
    if before != after:
        raise NormalizationAuditError(
            f"Normalization changed the expression from '{before}' to '{after}'")

    renormalized = normal.normalized()
    if renormalized.to_string() != normal.to_string():
        raise NormalizationAuditError(
            f"Normal form '{normal}' of '{node}' is not stable, renormalized to '{renormalized}'")

    violation = ExpressionValidator.normal_form_violation(normal)
    if violation is not None:
        raise NormalizationAuditError(f"Normal form '{normal}' of '{node}' {violation}")

    missing = find_missing_originals(node)
    if missing:
        value, (expected, actual) = next(iter(missing.items()))
        raise NormalizationAuditError(
            f"Normalized form '{normal}' of '{node}' contained fewer original numbers than original "
            f"expression: expected at least {expected} occurrences of {value:g}, got {actual}")

    log_info(f"Normalization of '{node}' passed the audit", LogLevel.DETAILED)


def confirm_equivalence(a: Node, b: Node) -> bool:
    """
    True when ``a`` and ``b`` are equivalent and equal as exact rational values.

    An equivalence verdict that the exact values contradict is a false positive
    and is logged as such.
    """
    if not is_equivalent(a, b):
        return False

    equal = SymPyChecker().are_equal(a, b)
    if equal is None:
        log_warning(f"Cannot confirm equivalence of '{a}' and '{b}': expression is undefined")
        return False
    if not equal:
        get_logger().critical(f"False positive: {describe(a)} and {describe(b)} differ in value")
    return equal


def audit(*nodes: Node) -> Dict[str, int]:
    """Run ``check_normalization`` on each node and pairwise equivalence checks."""
    for node in nodes:
        check_normalization(node)

    pairs = 0
    for left in nodes:
        for right in nodes:
            if not is_equivalent(left, right):
                raise NormalizationAuditError(
                    f"Expected {describe(left)} to be equivalent to {describe(right)}, but wasn't!")
            pairs += 1

    results = {'expressions': len(nodes), 'equivalent_pairs': pairs}
    get_logger().audit_summary(results)
    return results
