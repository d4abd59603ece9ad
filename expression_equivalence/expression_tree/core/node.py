import numbers
import numpy as np
import sympy as sp
from abc import ABC, abstractmethod
from collections import Counter
from typing import Optional, Union
from .operators import NodeType, OpType, BINARY_OP_MAP


class Node(ABC):
  """Base node of an arithmetic expression tree.

  Nodes are immutable once built. Derived values (hash, size, originals and the
  normal form) are memoized in private slots that never affect rendering.
  """

  __slots__ = ('_hash_cache', '_size_cache', '_string_cache', '_originals_cache',
               '_normalized_cache', '_is_normal_form')

  def __init__(self):
    self._hash_cache: Optional[int] = None
    self._size_cache: Optional[int] = None
    self._string_cache: Optional[str] = None
    self._originals_cache: Optional[Counter] = None
    self._normalized_cache: Optional['Node'] = None
    self._is_normal_form = False

  def __setattr__(self, name, value):
    if not name.startswith('_') and hasattr(self, name):
      raise AttributeError(f"{type(self).__name__} is immutable, cannot reassign '{name}'")
    object.__setattr__(self, name, value)

  @abstractmethod
  def _compute_string(self) -> str:
    pass

  def to_string(self) -> str:
    if self._string_cache is None:
      self._string_cache = self._compute_string()
    return self._string_cache

  def __str__(self) -> str:
    return self.to_string()

  def __repr__(self) -> str:
    return f"{type(self).__name__}({self.to_string()!r})"

  @abstractmethod
  def to_sympy(self) -> sp.Expr:
    pass

  def size(self) -> int:
    """Node count"""
    if self._size_cache is None:
      self._size_cache = self._compute_size()
    return self._size_cache

  @abstractmethod
  def _compute_size(self) -> int:
    pass

  def used_originals(self) -> Counter:
    """Multiset of the leaf values this expression was built from"""
    if self._originals_cache is None:
      self._originals_cache = self._compute_originals()
    return Counter(self._originals_cache)

  @abstractmethod
  def _compute_originals(self) -> Counter:
    pass

  def normalized(self) -> 'Node':
    """Canonical form of this expression, computed once and then cached"""
    if self._normalized_cache is None:
      from ..utils.normalizer import normalize
      self._normalized_cache = normalize(self)
    return self._normalized_cache

  @property
  def has_been_normalized(self) -> bool:
    return self._normalized_cache is not None

  @property
  def is_normal_form(self) -> bool:
    """True for nodes produced by the canonicalization engine"""
    return self._is_normal_form

  def is_equivalent(self, other: 'Node') -> bool:
    return self.normalized().to_string() == other.normalized().to_string()

  def apply(self, operator: Union[OpType, str], other: Union['Node', float]) -> 'BinaryOpNode':
    """Combine with ``other`` as the right operand"""
    return combine(self, operator, other)

  def __eq__(self, other) -> bool:
    if not isinstance(other, Node):
      return NotImplemented
    return type(self) is type(other) and self.to_string() == other.to_string()

  def __ne__(self, other) -> bool:
    result = self.__eq__(other)
    return result if result is NotImplemented else not result

  def __hash__(self) -> int:
    if self._hash_cache is None:
      self._hash_cache = self._compute_hash()
    return self._hash_cache

  @abstractmethod
  def _compute_hash(self) -> int:
    pass


class ConstantNode(Node):
  __slots__ = ('value',)

  def __init__(self, value: float):
    super().__init__()
    self.value = float(value)

  def _compute_string(self) -> str:
    return f"{self.value:.12g}"

  def _compute_size(self) -> int:
    return 1

  def _compute_hash(self) -> int:
    return hash((NodeType.CONSTANT, self.to_string()))

  def _compute_originals(self) -> Counter:
    return Counter({self.value: 1})

  def to_sympy(self) -> sp.Expr:
    if np.isfinite(self.value):
      return sp.Rational(self.value)
    return sp.Float(self.value)


class BinaryOpNode(Node):
  __slots__ = ('operator', 'left', 'right')

  def __init__(self, operator: OpType, left: Node, right: Node):
    super().__init__()
    if not isinstance(left, Node) or not isinstance(right, Node):
      raise TypeError(
        f"Both operands must be expression nodes, got {type(left).__name__} and {type(right).__name__}")
    self.operator = _as_operator(operator)
    self.left = left
    self.right = right

  def _compute_string(self) -> str:
    return f"({self.left.to_string()} {self.operator.symbol} {self.right.to_string()})"

  def _compute_size(self) -> int:
    return 1 + self.left.size() + self.right.size()

  def _compute_hash(self) -> int:
    return hash((NodeType.BINARY_OP, self.operator, hash(self.left), hash(self.right)))

  def _compute_originals(self) -> Counter:
    return self.left.used_originals() + self.right.used_originals()

  def to_sympy(self) -> sp.Expr:
    left = self.left.to_sympy()
    right = self.right.to_sympy()
    if self.operator == OpType.ADD:
      return sp.Add(left, right)
    elif self.operator == OpType.SUB:
      return sp.Add(left, sp.Mul(-1, right))
    elif self.operator == OpType.MUL:
      return sp.Mul(left, right)
    elif self.operator == OpType.DIV:
      return sp.Mul(left, sp.Pow(right, -1))
    else:
      raise RuntimeWarning(f"to_sympy reached unexpected operation at node {type(self)}")


def _as_operator(operator: Union[OpType, str]) -> OpType:
  if isinstance(operator, OpType):
    return operator
  if isinstance(operator, str):
    return OpType.from_symbol(operator)
  if isinstance(operator, int) and operator in BINARY_OP_MAP.values():
    return OpType(operator)
  raise ValueError(f"Unknown operator: {operator!r}")


def leaf(value: float) -> ConstantNode:
  """Lift a raw number into a leaf"""
  return ConstantNode(value)


def as_node(value: Union[Node, float]) -> Node:
  if isinstance(value, Node):
    return value
  if isinstance(value, numbers.Real):
    return ConstantNode(value)
  raise TypeError(f"Cannot build an expression node from {type(value).__name__}")


def combine(left: Union[Node, float], operator: Union[OpType, str], right: Union[Node, float]) -> BinaryOpNode:
  """Compose two expressions under an operator; operands are never modified"""
  return BinaryOpNode(operator, as_node(left), as_node(right))
