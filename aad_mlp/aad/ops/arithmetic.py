# aad/ops/arithmetic.py
from functools import reduce
from typing import Iterable
import numpy as np
from ..core.node import Node, ADD, MUL, POW


def constant(value, label=""):
    """Leaf node with no predecessors."""
    return Node(value, label=label)


def _as_node(x):
    """Ensure x is a Node; otherwise wrap it as a constant leaf."""
    return x if isinstance(x, Node) else constant(x)


def add(a, b):
    """
    Sum:
      out.value = a.value + b.value
      a.grad   += out.grad
      b.grad   += out.grad
    """
    a = _as_node(a)
    b = _as_node(b)
    return Node(a.value + b.value, op=ADD, inputs=(a, b))


def multiply(a, b):
    """
    Product:
      out.value = a.value * b.value
      a.grad   += b.value * out.grad
      b.grad   += a.value * out.grad
    """
    a = _as_node(a)
    b = _as_node(b)
    return Node(a.value * b.value, op=MUL, inputs=(a, b))


def negate(a):
    return multiply(a, constant(-1.0))


def subtract(a, b):
    return add(a, negate(b))


def power(a, exponent):
    """
    Power by a constant exponent:
      out.value = a.value ** exponent
      a.grad   += exponent * a.value ** (exponent - 1) * out.grad

    The exponent is a plain parameter, not a graph input, so only `a` is
    recorded as a predecessor. A negative base with a non-integral exponent
    gives NaN (numpy semantics) and is not guarded.
    """
    if isinstance(exponent, (bool, Node)) or not isinstance(
            exponent, (int, float, np.integer, np.floating)):
        raise TypeError(f"only int/float exponents are supported, got {type(exponent)}")
    a = _as_node(a)
    exponent = float(exponent)
    return Node(a.value ** exponent, op=POW, inputs=(a,), exponent=exponent)


def sum(nodes: Iterable):
    """Left fold of `add` over `nodes`: ((n0 + n1) + n2) + ..."""
    nodes = list(nodes)
    if not nodes:
        raise ValueError("sum() of an empty sequence of nodes")
    if len(nodes) == 1:
        return _as_node(nodes[0])
    return reduce(add, nodes)
