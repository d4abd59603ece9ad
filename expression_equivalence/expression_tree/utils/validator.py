from typing import Optional
from ..core.node import Node, ConstantNode
from ..core.numeric import is_one
from ..core.operators import OpType
from .tree_utils import find_nodes_by_operator


class ExpressionValidator:

  @staticmethod
  def normal_form_violation(node: Node) -> Optional[str]:
    """Describe the first way ``node`` deviates from the normal form shape, None if it doesn't.

    Normal forms use ADD and MUL only, plus DIV as the reciprocal ``(1 / x)``.
    """
    for subtraction in find_nodes_by_operator(node, OpType.SUB):
      return f"contains the subtraction '{subtraction}'"

    for division in find_nodes_by_operator(node, OpType.DIV):
      if not (isinstance(division.left, ConstantNode) and is_one(division.left.value)):
        return f"contains the division '{division}' that is not a reciprocal"

    return None

  @staticmethod
  def is_normal_form_shape(node: Node) -> bool:
    return ExpressionValidator.normal_form_violation(node) is None
