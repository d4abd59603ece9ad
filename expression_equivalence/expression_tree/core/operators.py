from enum import IntEnum

class NodeType(IntEnum):
  CONSTANT = 0
  BINARY_OP = 1

class OpType(IntEnum):
  # Additive class
  ADD = 0
  SUB = 1
  # Multiplicative class
  MUL = 2
  DIV = 3

  @property
  def symbol(self) -> str:
    return _SYMBOLS[self]

  @property
  def is_additive(self) -> bool:
    return self in (OpType.ADD, OpType.SUB)

  @property
  def is_multiplicative(self) -> bool:
    return self in (OpType.MUL, OpType.DIV)

  @property
  def inverse(self) -> 'OpType':
    """Inverse operator within the same class (ADD<->SUB, MUL<->DIV)"""
    return _INVERSES[self]

  @classmethod
  def from_symbol(cls, symbol: str) -> 'OpType':
    try:
      return BINARY_OP_MAP[symbol]
    except KeyError:
      raise ValueError(f"Unknown operator symbol: {symbol!r}") from None

  def __str__(self) -> str:
    return self.symbol


_SYMBOLS = {OpType.ADD: '+', OpType.SUB: '-', OpType.MUL: '*', OpType.DIV: '/'}
_INVERSES = {OpType.ADD: OpType.SUB, OpType.SUB: OpType.ADD, OpType.MUL: OpType.DIV, OpType.DIV: OpType.MUL}

# Mapping dictionaries
BINARY_OP_MAP = {'+': OpType.ADD, '-': OpType.SUB, '*': OpType.MUL, '/': OpType.DIV}

# Short aliases used when building expressions by hand
ADD = OpType.ADD
SUB = OpType.SUB
MUL = OpType.MUL
DIV = OpType.DIV
