# aad/core/engine.py
from __future__ import annotations
from typing import List
from .node import Node, LEAF, ADD, MUL, POW, TANH


def topological_order(root: Node) -> List[Node]:
    """
    Post-order depth-first listing of every node reachable from `root`.

    A node is appended only after all of its inputs, so walking the list
    back-to-front visits each node before any of its predecessors. The walk
    uses an explicit stack (no recursion limit on deep graphs) and a visited
    set so nodes reachable along several paths are listed exactly once.
    """
    order: List[Node] = []
    visited = set()
    # (node, expanded): expanded=True means all inputs are already listed
    stack = [(root, False)]
    while stack:
        node, expanded = stack.pop()
        if expanded:
            order.append(node)
            continue
        if node in visited:
            continue
        visited.add(node)
        stack.append((node, True))
        # reversed so inputs are expanded left-to-right
        for parent in reversed(node.inputs):
            if parent not in visited:
                stack.append((parent, False))
    return order


def zero_gradients(root: Node):
    """
    Set the gradient of every node reachable from `root` to zero.
    """
    for node in topological_order(root):
        node.gradient = 0.0


def backward(root: Node):
    """
    Run a single reverse pass from `root`.

    Notes:
        - root.gradient is seeded with 1.0 (set, not added).
        - Interior nodes of this graph start the pass at zero; leaves keep
          whatever they hold, so callers reset parameters beforehand
          (see MLP.zero_gradient) when a fresh gradient is wanted.
        - For each node, root first, we propagate:
              p.gradient += node.gradient * (d node / d p)
    """
    order = topological_order(root)

    for node in order:
        if not node.is_leaf:
            node.gradient = 0.0

    # Seed
    root.gradient = 1.0

    # Backward sweep
    for node in reversed(order):
        _local_backward(node)


def _local_backward(node: Node):
    """
    Apply the local derivative rule of `node` to its inputs.
    Dispatches on the operation tag.
    """
    tag = node.op
    g = node.gradient

    # ---------- Leaf: nothing to propagate ----------
    if tag == LEAF:
        return

    # ---------- Sum: d(a+b)/da = d(a+b)/db = 1 ----------
    if tag == ADD:
        a, b = node.inputs
        a.gradient += 1.0 * g
        b.gradient += 1.0 * g
        return

    # ---------- Product: each side receives the other's value ----------
    if tag == MUL:
        a, b = node.inputs
        a.gradient += b.value * g
        b.gradient += a.value * g
        return

    # ---------- Power with constant exponent: e * x^(e-1) ----------
    if tag == POW:
        (a,) = node.inputs
        e = node.exponent
        a.gradient += e * (a.value ** (e - 1)) * g
        return

    # ---------- tanh: 1 - y^2, from the stored output ----------
    if tag == TANH:
        (a,) = node.inputs
        a.gradient += (1.0 - node.value * node.value) * g
        return

    raise ValueError(f"No backward rule for operation tag {tag!r}")
