"""
计算图工具函数
用于打印和分析标量计算图结构 (从根节点出发遍历)
"""

import numpy as np
from typing import Dict
from collections import Counter

from .engine import topological_order


def _op_name(node) -> str:
    return node.op if node.op else "leaf"


def get_graph_stats(root) -> Dict:
    """
    获取计算图统计信息（不打印）

    Args:
        root: 图的根节点 (通常是 loss)

    Returns:
        统计信息字典
    """
    nodes = topological_order(root)
    n_nodes = len(nodes)
    n_edges = sum(len(node.inputs) for node in nodes)

    # 统计入度
    fan_ins = [len(node.inputs) for node in nodes]
    max_fan_in = max(fan_ins)
    avg_fan_in = float(np.mean(fan_ins))

    # 统计出度 (a + a 计两条边)
    fan_out_counter = Counter()
    for node in nodes:
        for parent in node.inputs:
            fan_out_counter[parent] += 1
    fan_outs = [fan_out_counter[node] for node in nodes]
    max_fan_out = max(fan_outs)
    avg_fan_out = float(np.mean(fan_outs))

    # 统计操作类型
    op_counter = Counter(_op_name(node) for node in nodes)

    return {
        'nodes': n_nodes,
        'edges': n_edges,
        'leaves': op_counter.get("leaf", 0),
        'max_fan_in': max_fan_in,
        'avg_fan_in': avg_fan_in,
        'max_fan_out': max_fan_out,
        'avg_fan_out': avg_fan_out,
        'operations': dict(op_counter)
    }


def print_graph_summary(root, detailed: bool = False) -> Dict:
    """
    打印计算图摘要信息

    Args:
        root: 图的根节点
        detailed: 是否打印详细节点信息

    Returns:
        包含统计信息的字典
    """
    stats = get_graph_stats(root)
    n_nodes = stats['nodes']

    print("\n" + "="*70)
    print("COMPUTATION GRAPH SUMMARY")
    print("="*70)
    print(f"Total nodes:        {n_nodes:,}")
    print(f"Total edges:        {stats['edges']:,}")
    print(f"Leaf nodes:         {stats['leaves']:,}")
    print(f"Max fan-in:         {stats['max_fan_in']}")
    print(f"Avg fan-in:         {stats['avg_fan_in']:.2f}")
    print(f"Max fan-out:        {stats['max_fan_out']}")
    print(f"Avg fan-out:        {stats['avg_fan_out']:.2f}")
    print()
    print("Operation breakdown:")
    for op_type, count in Counter(stats['operations']).most_common(10):
        pct = 100.0 * count / n_nodes
        print(f"  {op_type:12s}: {count:6,} ({pct:5.1f}%)")

    if detailed and n_nodes <= 100:
        print()
        print_computation_graph(root, max_nodes=100)

    print("="*70 + "\n")

    return stats


def print_computation_graph(root, max_nodes: int = 20) -> None:
    """
    打印计算图结构（拓扑序, 叶子在前, 根在最后）

    Args:
        root: 图的根节点
        max_nodes: 最多打印多少个节点
    """
    print("\n" + "="*70)
    print("COMPUTATION GRAPH STRUCTURE")
    print("="*70)

    nodes = topological_order(root)
    index = {node: i for i, node in enumerate(nodes)}
    n_show = min(len(nodes), max_nodes)

    for i, node in enumerate(nodes[:n_show]):
        label = f" '{node.label}'" if node.label else ""
        if node.inputs:
            parent_info = ", ".join(f"Node{index[p]}" for p in node.inputs)
            print(f"Node {i:4d}: {_op_name(node):6s} ({node.value:10.6f}, grad {node.gradient:10.6f})"
                  f"{label} <- [{parent_info}]")
        else:
            print(f"Node {i:4d}: {_op_name(node):6s} ({node.value:10.6f}, grad {node.gradient:10.6f})"
                  f"{label} [leaf/input]")

    if len(nodes) > max_nodes:
        print(f"... ({len(nodes) - max_nodes} more nodes)")

    print("="*70 + "\n")
