# aad/core/__init__.py

"""
Core public API for the scalar AAD engine.

Exports:
    Node              : A scalar value plus the operation and inputs that produced it.
    backward          : Run a single reverse pass from a root node.
    topological_order : Post-order listing of the graph under a root.
    zero_gradients    : Reset every gradient reachable from a root.
    grad, grads, grads_list : Convenience gradient extraction for plain functions.
    numeric_grads, check_gradients : Finite-difference cross-checks.
    value             : Extract the primal value from a Node.
"""

from .node import Node
from .engine import backward, topological_order, zero_gradients
from .seeds import value, grad, grads, grads_list, numeric_grads, check_gradients

__all__ = [
    "Node",
    "backward", "topological_order", "zero_gradients",
    "value", "grad", "grads", "grads_list",
    "numeric_grads", "check_gradients",
]
