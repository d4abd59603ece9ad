"""
Canonical normalization of arithmetic expression trees.

Passes, each bottom-up:
  • collect: SUB/DIV become sign and reciprocal, ADD/MUL chains flatten into
    sums of products (sign, numerator factors, denominator factors)
  • distribute: a product with one additive numerator factor and a
    denominator is spread over that factor's terms
  • canonicalize: factors and terms are sorted, additive factors are
    sign-oriented
  • rebuild: left-associated tree of ADD, MUL and reciprocal (1 / x) nodes

Two expressions are equivalent iff their rebuilt trees render identically.
"""

from dataclasses import dataclass
from typing import List, Tuple, Union
from ..core.node import Node, ConstantNode, BinaryOpNode
from ..core.operators import OpType
from ..core.numeric import is_one, is_minus_one
from ...logging_system import log_debug


@dataclass(frozen=True)
class Product:
  negative: bool
  numerator: Tuple['Factor', ...] = ()
  denominator: Tuple['Factor', ...] = ()

  def negated(self) -> 'Product':
    return Product(not self.negative, self.numerator, self.denominator)

  def reciprocal(self) -> 'Product':
    return Product(self.negative, self.denominator, self.numerator)

  def times(self, other: 'Product') -> 'Product':
    return Product(self.negative != other.negative,
                   self.numerator + other.numerator,
                   self.denominator + other.denominator)


@dataclass(frozen=True)
class Sum:
  terms: Tuple[Product, ...]


# A factor is either an original leaf value or an additive chain of two or more terms
Factor = Union[float, Sum]


class ExpressionNormalizer:
  """Maps expression trees to their canonical form"""

  @staticmethod
  def normalize(node: Node) -> Node:
    collected = ExpressionNormalizer.collect(node)
    distributed = ExpressionNormalizer.distribute(collected)
    canonical = ExpressionNormalizer.canonicalize(distributed)
    return ExpressionNormalizer.rebuild(canonical)

  # Collection

  @staticmethod
  def collect(node: Node) -> Sum:
    """Flatten a tree into a sum of products"""
    if isinstance(node, ConstantNode):
      if is_one(node.value):
        return Sum((Product(False),))
      if is_minus_one(node.value):
        return Sum((Product(True),))
      return Sum((Product(False, (node.value,)),))

    left = ExpressionNormalizer.collect(node.left)
    right = ExpressionNormalizer.collect(node.right)

    if node.operator == OpType.ADD:
      return Sum(left.terms + right.terms)
    if node.operator == OpType.SUB:
      return Sum(left.terms + tuple(term.negated() for term in right.terms))

    right_product = ExpressionNormalizer._as_product(right)
    if node.operator == OpType.DIV:
      right_product = right_product.reciprocal()
    return ExpressionNormalizer._as_sum(ExpressionNormalizer._as_product(left).times(right_product))

  @staticmethod
  def _as_product(collected: Sum) -> Product:
    if len(collected.terms) == 1:
      return collected.terms[0]
    return Product(False, (collected,))

  @staticmethod
  def _as_sum(product: Product) -> Sum:
    # A signed additive chain on its own merges into the enclosing sum
    if (not product.denominator and len(product.numerator) == 1
        and isinstance(product.numerator[0], Sum)):
      chain = product.numerator[0]
      if product.negative:
        return Sum(tuple(term.negated() for term in chain.terms))
      return chain
    return Sum((product,))

  # Distribution

  @staticmethod
  def distribute(collected: Sum) -> Sum:
    terms: List[Product] = []
    for term in collected.terms:
      term = Product(term.negative,
                     tuple(ExpressionNormalizer._distribute_factor(f) for f in term.numerator),
                     tuple(ExpressionNormalizer._distribute_factor(f) for f in term.denominator))
      terms.extend(ExpressionNormalizer._expand(term))
    return Sum(tuple(terms))

  @staticmethod
  def _distribute_factor(factor: Factor) -> Factor:
    if isinstance(factor, Sum):
      return ExpressionNormalizer.distribute(factor)
    return factor

  @staticmethod
  def _expand(term: Product) -> List[Product]:
    """(a + b - c) / d -> a/d + b/d - c/d"""
    chains = [i for i, factor in enumerate(term.numerator) if isinstance(factor, Sum)]
    if not term.denominator or len(chains) != 1:
      return [term]

    index = chains[0]
    chain = term.numerator[index]
    rest = term.numerator[:index] + term.numerator[index + 1:]
    expanded: List[Product] = []
    for inner in chain.terms:
      expanded.extend(ExpressionNormalizer._expand(Product(
        term.negative != inner.negative,
        inner.numerator + rest,
        inner.denominator + term.denominator)))
    return expanded

  # Ordering

  @staticmethod
  def canonicalize(collected: Sum) -> Sum:
    terms = [ExpressionNormalizer._canonical_product(term) for term in collected.terms]
    return Sum(tuple(sorted(terms, key=ExpressionNormalizer._term_key)))

  @staticmethod
  def _canonical_product(product: Product) -> Product:
    numerator, numerator_flipped, numerator_balanced = ExpressionNormalizer._canonical_factors(product.numerator)
    denominator, denominator_flipped, denominator_balanced = ExpressionNormalizer._canonical_factors(product.denominator)
    if numerator_balanced or denominator_balanced:
      # A chain equal to its own negation takes the sign
      return Product(False, numerator, denominator)
    negative = (product.negative != numerator_flipped) != denominator_flipped
    return Product(negative, numerator, denominator)

  @staticmethod
  def _canonical_factors(factors: Tuple[Factor, ...]) -> Tuple[Tuple[Factor, ...], bool, bool]:
    flipped = False
    balanced = False
    canonical: List[Factor] = []
    for factor in factors:
      if isinstance(factor, Sum):
        factor, flip, tie = ExpressionNormalizer._orient(ExpressionNormalizer.canonicalize(factor))
        flipped = flipped != flip
        balanced = balanced or tie
      canonical.append(factor)
    return tuple(sorted(canonical, key=ExpressionNormalizer._factor_key)), flipped, balanced

  @staticmethod
  def _orient(chain: Sum) -> Tuple[Sum, bool, bool]:
    """
    Pick the larger of S and -S.

    Returns the chosen chain, whether the sign moved out of it, and whether
    S and -S tie, i.e. the chain is its own negation.
    """
    negated = Sum(tuple(sorted(
      (ExpressionNormalizer._canonical_product(term.negated()) for term in chain.terms),
      key=ExpressionNormalizer._term_key)))
    negated_keys = [ExpressionNormalizer._term_key(term) for term in negated.terms]
    keys = [ExpressionNormalizer._term_key(term) for term in chain.terms]
    if negated_keys > keys:
      return negated, True, False
    return chain, False, negated_keys == keys

  @staticmethod
  def _term_key(term: Product) -> tuple:
    rendered = ExpressionNormalizer._product_node(term).to_string()
    value = ExpressionNormalizer._constant_value(term)
    if value is not None:
      return (0, value, rendered)
    return (1, 0.0, rendered)

  @staticmethod
  def _factor_key(factor: Factor) -> tuple:
    if isinstance(factor, Sum):
      return (1, 0.0, ExpressionNormalizer._sum_node(factor).to_string())
    return (0, factor, '')

  @staticmethod
  def _constant_value(term: Product):
    if term.denominator or len(term.numerator) > 1:
      return None
    if not term.numerator:
      magnitude = 1.0
    elif isinstance(term.numerator[0], Sum):
      return None
    else:
      magnitude = term.numerator[0]
    return -magnitude if term.negative else magnitude

  # Rebuild

  @staticmethod
  def rebuild(collected: Sum) -> Node:
    return ExpressionNormalizer._sum_node(collected)

  @staticmethod
  def _sum_node(collected: Sum) -> Node:
    return _fold(OpType.ADD, [ExpressionNormalizer._product_node(term) for term in collected.terms])

  @staticmethod
  def _product_node(product: Product) -> Node:
    factors: List[Node] = []
    if product.negative:
      factors.append(ConstantNode(-1.0))
    factors.extend(ExpressionNormalizer._factor_node(f) for f in product.numerator)
    if product.denominator:
      denominator = _fold(OpType.MUL, [ExpressionNormalizer._factor_node(f) for f in product.denominator])
      factors.append(BinaryOpNode(OpType.DIV, ConstantNode(1.0), denominator))
    if not factors:
      return ConstantNode(1.0)
    return _fold(OpType.MUL, factors)

  @staticmethod
  def _factor_node(factor: Factor) -> Node:
    if isinstance(factor, Sum):
      return ExpressionNormalizer._sum_node(factor)
    return ConstantNode(factor)


def _fold(operator: OpType, nodes: List[Node]) -> Node:
  result = nodes[0]
  for node in nodes[1:]:
    result = BinaryOpNode(operator, result, node)
  return result


def normalize(node: Node) -> Node:
  """Compute the normal form of ``node`` without touching the node itself"""
  result = ExpressionNormalizer.normalize(node)
  result._is_normal_form = True
  log_debug(f"Normalized '{node.to_string()}' to '{result.to_string()}'")
  return result
