import sympy as sp
from typing import Optional, Dict, Any
from ..core.node import Node


class SymPyChecker:
  """Exact SymPy cross-check of expression trees"""

  def to_sympy(self, node: Node) -> sp.Expr:
    return node.to_sympy()

  def compare(self, a: Node, b: Node) -> Dict[str, Any]:
    """
    Compare two expressions as exact rational values

    Returns:
        Dict with both SymPy forms, their difference and whether they are equal.
        ``equal`` is None when either side is undefined (division by zero).
    """
    expr_a = self.to_sympy(a)
    expr_b = self.to_sympy(b)

    if self._is_undefined(expr_a) or self._is_undefined(expr_b):
      return {
        'left': expr_a,
        'right': expr_b,
        'difference': sp.nan,
        'equal': None
      }

    difference = sp.simplify(expr_a - expr_b)
    return {
      'left': expr_a,
      'right': expr_b,
      'difference': difference,
      'equal': bool(difference == 0)
    }

  def are_equal(self, a: Node, b: Node) -> Optional[bool]:
    return self.compare(a, b)['equal']

  def _is_undefined(self, expr: sp.Expr) -> bool:
    return bool(expr.has(sp.zoo, sp.nan, sp.oo, -sp.oo))

  def latex_representation(self, node: Node) -> str:
    """Get LaTeX representation of the expression"""
    return sp.latex(self.to_sympy(node))
