"""
Expression graph utilities.

Printing and statistics for expression trees.
"""

from collections import Counter
from typing import Dict, List, Optional, Tuple
import numpy as np

from .engine import annotate
from .evaluation import Evaluation
from .node import Node


def _walk(root: Node) -> List[Tuple[Node, int]]:
    """(node, depth) pairs in post-order; the root has depth 0."""
    order = []
    stack = [(root, 0, False)]
    while stack:
        node, depth, processed = stack.pop()
        if processed:
            order.append((node, depth))
        else:
            stack.append((node, depth, True))
            for child in reversed(node.children):
                stack.append((child, depth + 1, False))
    return order


def get_graph_stats(root: Node) -> Dict:
    """
    Collect expression graph statistics (no printing).

    Returns:
        dict with node/leaf/operator/edge counts, tree depth, mean leaf depth
        and a per-op_tag breakdown.
    """
    walk = _walk(root)
    leaf_depths = [depth for node, depth in walk if not node.children]
    op_counter = Counter(node.op_tag for node, _ in walk)

    return {
        'nodes': len(walk),
        'leaves': len(leaf_depths),
        'operators': len(walk) - len(leaf_depths),
        'edges': sum(len(node.children) for node, _ in walk),
        'depth': max(depth for _, depth in walk),
        'avg_leaf_depth': float(np.mean(leaf_depths)),
        'operations': dict(op_counter),
    }


def print_graph_summary(root: Node) -> Dict:
    """
    Print summary information for an expression graph.

    Returns:
        The statistics dict from get_graph_stats.
    """
    stats = get_graph_stats(root)

    print("\n" + "="*70)
    print("EXPRESSION GRAPH SUMMARY")
    print("="*70)
    print(f"Expression:         {root}")
    print(f"Total nodes:        {stats['nodes']:,}")
    print(f"Leaves:             {stats['leaves']:,}")
    print(f"Operators:          {stats['operators']:,}")
    print(f"Total edges:        {stats['edges']:,}")
    print(f"Depth:              {stats['depth']}")
    print(f"Avg leaf depth:     {stats['avg_leaf_depth']:.2f}")
    print()
    print("Operation breakdown:")
    for op_type, count in Counter(stats['operations']).most_common():
        pct = 100.0 * count / stats['nodes']
        print(f"  {op_type:12s}: {count:6,} ({pct:5.1f}%)")
    print("="*70 + "\n")

    return stats


def print_computation_graph(root: Node, evaluation: Optional[Evaluation] = None,
                            max_nodes: int = 20) -> None:
    """
    Print the expression graph node by node in post-order.

    Args:
        root: expression to print
        evaluation: side table providing node values; recorded if omitted
        max_nodes: maximum number of nodes to print
    """
    if evaluation is None:
        evaluation = annotate(root)

    walk = _walk(root)
    index = {node: i for i, (node, _) in enumerate(walk)}

    print("\n" + "="*70)
    print("EXPRESSION GRAPH STRUCTURE")
    print("="*70)

    for i, (node, _) in enumerate(walk[:max_nodes]):
        out_val = float(evaluation.value_of(node))
        if node.children:
            child_info = ", ".join(f"Node{index[c]}" for c in node.children)
            print(f"Node {i:4d}: {node.op_tag:12s} ({out_val:10.6f}) <- [{child_info}]  {node.label}")
        else:
            print(f"Node {i:4d}: {node.op_tag:12s} ({out_val:10.6f}) [leaf {node.label}]")

    if len(walk) > max_nodes:
        print(f"... ({len(walk) - max_nodes} more nodes)")

    print("="*70 + "\n")
