from collections import Counter

import sympy as sp

from expression_equivalence import leaf, ADD, SUB, MUL, DIV
from expression_equivalence.expression_tree import ExpressionValidator, SymPyChecker
from expression_equivalence.expression_tree.utils import (
  iter_nodes, find_nodes_by_operator, get_used_originals, count_original
)


def build():
    return leaf(2).apply(ADD, leaf(3).apply(MUL, 4)).apply(SUB, 2)  # 2 + 3 * 4 - 2


def test_pre_order_walk():
    expression = build()
    nodes = list(iter_nodes(expression))
    assert len(nodes) == expression.size() == 7
    assert nodes[0] is expression
    assert [n.to_string() for n in nodes[1:4]] == ['(2 + (3 * 4))', '2', '(3 * 4)']


def test_operator_search():
    expression = build()
    assert [n.to_string() for n in find_nodes_by_operator(expression, MUL)] == ['(3 * 4)']
    assert find_nodes_by_operator(expression, DIV) == []


def test_originals_counting():
    originals = get_used_originals(build())
    assert originals == Counter({2.0: 2, 3.0: 1, 4.0: 1})
    assert count_original(originals, 2.0) == 2
    assert count_original(originals, 2.0 + 1e-12) == 2
    assert count_original(originals, 5.0) == 0


def test_normal_forms_have_normal_shape():
    for expression in [build(), leaf(7).apply(DIV, leaf(9).apply(SUB, 8).apply(DIV, 2))]:
        assert ExpressionValidator.is_normal_form_shape(expression.normalized())


def test_shape_violations_are_described():
    assert 'subtraction' in ExpressionValidator.normal_form_violation(build())
    assert 'not a reciprocal' in ExpressionValidator.normal_form_violation(leaf(5).apply(DIV, 3))
    assert ExpressionValidator.normal_form_violation(leaf(1).apply(DIV, 3)) is None


def test_sympy_checker():
    checker = SymPyChecker()
    a = leaf(7).apply(DIV, leaf(9).apply(SUB, 8).apply(DIV, 2))
    result = checker.compare(a, a.normalized())
    assert result['equal'] is True
    assert result['left'] == sp.Integer(14)
    assert checker.latex_representation(leaf(1).apply(DIV, 4)) == '\\frac{1}{4}'
