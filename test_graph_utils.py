"""
Expression graph statistics and printing.
"""

from expr_aad import Leaf, Sum, Product
from expr_aad.core.graph_utils import get_graph_stats, print_graph_summary, print_computation_graph


def make_tree():
    a, b, c, d = Leaf(10.0, "A"), Leaf(5.0, "B"), Leaf(20.0, "C"), Leaf(25.0, "D")
    return Product(Product(Sum(a, b, name="A+B"), c, name="(A+B)C"), d, name="(A+B)CD")


def test_graph_stats():
    stats = get_graph_stats(make_tree())
    assert stats['nodes'] == 7
    assert stats['leaves'] == 4
    assert stats['operators'] == 3
    assert stats['edges'] == 6
    assert stats['depth'] == 3
    assert stats['avg_leaf_depth'] == (3 + 3 + 2 + 1) / 4
    assert stats['operations'] == {'leaf': 4, 'sum': 1, 'product': 2}


def test_graph_stats_single_leaf():
    stats = get_graph_stats(Leaf(1.0, "x"))
    assert stats['nodes'] == 1
    assert stats['depth'] == 0
    assert stats['operators'] == 0


def test_print_graph_summary(capsys):
    stats = print_graph_summary(make_tree())
    out = capsys.readouterr().out
    assert "EXPRESSION GRAPH SUMMARY" in out
    assert "(A + B) * C * D" in out
    assert stats['nodes'] == 7


def test_print_computation_graph(capsys):
    print_computation_graph(make_tree())
    out = capsys.readouterr().out
    assert "Node    0: leaf" in out
    assert "<- [Node0, Node1]  A+B" in out
    assert "7500.000000" in out


def test_print_computation_graph_truncates(capsys):
    print_computation_graph(make_tree(), max_nodes=3)
    out = capsys.readouterr().out
    assert "... (4 more nodes)" in out
