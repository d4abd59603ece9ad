"""Expression Equivalence Package

Canonical normalization of arithmetic expression trees, used to decide whether
two trees are equivalent up to grouping, operand order and choice of operator.
"""

from .expression_tree import (
  Node, ConstantNode, BinaryOpNode, leaf, as_node, combine,
  OpType, ADD, SUB, MUL, DIV, float_equals, AlreadyNormalizedError
)
from .equivalence import get_normal_form, normalize_fresh, is_equivalent, used_originals
from .audit import (
  NormalizationAuditError, describe, find_missing_originals,
  check_normalization, confirm_equivalence, audit
)
from .config import EquivalenceConfig, get_config, set_config, reset_config
from .logging_system import LogLevel, configure_logging, get_logger, set_log_level

__version__ = "0.1.0"
__all__ = [
  "Node", "ConstantNode", "BinaryOpNode", "leaf", "as_node", "combine",
  "OpType", "ADD", "SUB", "MUL", "DIV", "float_equals", "AlreadyNormalizedError",
  "get_normal_form", "normalize_fresh", "is_equivalent", "used_originals",
  "NormalizationAuditError", "describe", "find_missing_originals",
  "check_normalization", "confirm_equivalence", "audit",
  "EquivalenceConfig", "get_config", "set_config", "reset_config",
  "LogLevel", "configure_logging", "get_logger", "set_log_level",
]
