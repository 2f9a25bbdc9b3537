# aad/ops/transcendental.py
import numpy as np
from ..core.node import Node, TANH
from .arithmetic import _as_node


def tanh(x):
    """
    Hyperbolic tangent via (e^{2x} - 1) / (e^{2x} + 1).

    Derivative: 1 - tanh(x)^2, taken from the stored output in the reverse pass.
    """
    x = _as_node(x)
    e2x = np.exp(2.0 * x.value)
    out = (e2x - 1.0) / (e2x + 1.0)
    return Node(out, op=TANH, inputs=(x,))
