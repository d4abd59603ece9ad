import pytest

from expression_equivalence.expression_tree import OpType, BINARY_OP_MAP, ADD, SUB, MUL, DIV
from expression_equivalence.expression_tree.core import float_equals, is_one, is_minus_one


def test_symbols():
    assert [op.symbol for op in OpType] == ['+', '-', '*', '/']
    assert str(DIV) == '/'


def test_operator_classes_partition():
    for op in OpType:
        assert op.is_additive != op.is_multiplicative
    assert ADD.is_additive and SUB.is_additive
    assert MUL.is_multiplicative and DIV.is_multiplicative


def test_inverse_stays_in_class():
    assert ADD.inverse is SUB
    assert SUB.inverse is ADD
    assert MUL.inverse is DIV
    assert DIV.inverse is MUL
    for op in OpType:
        assert op.inverse.inverse is op
        assert op.inverse.is_additive == op.is_additive


def test_from_symbol():
    for symbol, op in BINARY_OP_MAP.items():
        assert OpType.from_symbol(symbol) is op
    with pytest.raises(ValueError):
        OpType.from_symbol('^')


def test_float_equals_default_epsilon():
    assert float_equals(0.1 + 0.2, 0.3)
    assert not float_equals(1.0, 1.001)
    assert is_one(1.0 + 1e-12)
    assert is_minus_one(-1.0)
    assert not is_one(-1.0)


def test_float_equals_explicit_epsilon():
    assert float_equals(1.0, 1.05, 0.1)
    assert not float_equals(1.0, 1.5, 0.1)
