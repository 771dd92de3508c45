"""
Gradients w.r.t. many leaves from one forward pass.
"""

import numpy as np
import pytest

from expr_aad import Leaf, Sum, Product, annotate, grads, gradient, value, UnknownVariable


def make_tree():
    a, b, c, d = Leaf(10.0, "A"), Leaf(5.0, "B"), Leaf(20.0, "C"), Leaf(25.0, "D")
    return Product(Product(Sum(a, b), c), d)


def test_value():
    assert value(make_tree()) == 7500.0
    assert value(3.0) == 3.0


def test_grads_all_leaves():
    g = grads(make_tree())
    assert list(g) == ["A", "B", "C", "D"]
    assert g == {"A": 500.0, "B": 500.0, "C": 375.0, "D": 300.0}


def test_gradient_vector():
    g = gradient(make_tree())
    assert g.dtype == np.float64
    np.testing.assert_allclose(g, [500.0, 500.0, 375.0, 300.0])


def test_gradient_custom_order():
    a, b = Leaf(2.0, "a"), Leaf(4.0, "b")
    np.testing.assert_allclose(gradient(Product(a, b), ["b", "a"]), [2.0, 4.0])


def test_gradient_unknown_name():
    with pytest.raises(UnknownVariable):
        gradient(make_tree(), ["A", "Q"])


def test_grads_on_subtree_with_ancestor_evaluation():
    root = make_tree()
    evaluation = annotate(root)
    sub = root.left
    assert grads(sub, evaluation) == {"A": 20.0, "B": 20.0, "C": 15.0}
    np.testing.assert_allclose(gradient(sub, evaluation=evaluation), [20.0, 20.0, 15.0])


def test_repeated_name_listed_once():
    root = Sum(Product(Leaf(2.0, "X"), Leaf(3.0, "Y")), Leaf(7.0, "X"))
    assert grads(root) == {"X": 3.0, "Y": 2.0}
    np.testing.assert_allclose(gradient(root), [3.0, 2.0])
