# aad/core/seeds.py

#-----------------------------------------------------------------------------
# We "plant" a seed (dy/dy = 1) at the scalar output and let gradients grow
# backwards through the graph. The finite-difference helpers below bump one
# input at a time and are used to cross-check the reverse pass.
#-----------------------------------------------------------------------------
from __future__ import annotations
from typing import Any, Callable, Dict, Iterable, List, Union
import numpy as np

from .node import Node
from .engine import backward


def value(x: Any) -> Any:
    """Return the numeric value of a Node; pass through plain numbers unchanged."""
    return x.value if isinstance(x, Node) else x


def _ensure_node(v: Any, *, label: str) -> Node:
    """Wrap a plain value as a leaf Node if needed; otherwise return the Node itself."""
    return v if isinstance(v, Node) else Node(v, label=label)


def _as_output(y: Any) -> Node:
    # a function that ignores its inputs may return a plain number
    return y if isinstance(y, Node) else Node(y, label="y")


# ----------------------------- single-input grad ----------------------------- #
def grad(f: Callable[[Node], Node], x0: Union[float, Node]) -> float:
    """
    Gradient of a scalar function y=f(x) at x0 (single input).
    Builds a fresh graph and runs one reverse pass.
    """
    x = _ensure_node(x0, label="x")
    x.gradient = 0.0
    y = _as_output(f(x))
    backward(y)
    return x.gradient


# ----------------------------- multi-input grads ----------------------------- #
def grads(f: Callable[[Dict[str, Node]], Node],
          inputs: Dict[str, Union[float, Node]]) -> Dict[str, float]:
    """
    Gradient of a scalar function y=f(vars) w.r.t. ALL inputs (dict form).
    Performs ONE reverse pass to obtain all dy/dvar simultaneously.

    Parameters
    ----------
    f       : function taking a dict {name: Node} and returning a Node
    inputs  : dict {name: numeric}

    Returns
    -------
    dict {name: float}  # gradients in the same key order as `inputs`
    """
    nodes: Dict[str, Node] = {k: _ensure_node(v, label=k) for k, v in inputs.items()}
    for x in nodes.values():
        x.gradient = 0.0
    y = _as_output(f(nodes))
    backward(y)
    return {k: nodes[k].gradient for k in inputs.keys()}


def grads_list(f: Callable[[List[Node]], Node],
               x0_list: Iterable[Union[float, Node]]) -> List[float]:
    """
    Same as grads(), but the inputs are provided as a list and the result is a list
    of partials in the same order.

    Example
    -------
    f = lambda xs: xs[0]*xs[0] + 3*xs[1]
    grads_list(f, [2.0, 4.0]) -> [4.0, 3.0]
    """
    xs: List[Node] = [_ensure_node(v, label=f"x{i}") for i, v in enumerate(x0_list)]
    for x in xs:
        x.gradient = 0.0
    y = _as_output(f(xs))
    backward(y)
    return [x.gradient for x in xs]


# ----------------------------- finite differences ---------------------------- #
def numeric_grads(f: Callable[[List[Node]], Node],
                  x0_list: Iterable[float],
                  h: float = 1e-4) -> List[float]:
    """
    Centered finite differences, one input bumped at a time:

        df/dx_i ~ [f(x + h e_i) - f(x - h e_i)] / (2h)

    `f` is re-evaluated on fresh leaf nodes for every bump, so no graph is shared
    with the analytic pass.
    """
    x0 = [float(value(v)) for v in x0_list]
    out = []
    for i in range(len(x0)):
        up = list(x0)
        dn = list(x0)
        up[i] += h
        dn[i] -= h
        f_up = value(f([Node(v, label=f"x{j}") for j, v in enumerate(up)]))
        f_dn = value(f([Node(v, label=f"x{j}") for j, v in enumerate(dn)]))
        out.append((f_up - f_dn) / (2.0 * h))
    return out


def check_gradients(f: Callable[[List[Node]], Node],
                    x0_list: Iterable[float],
                    h: float = 1e-4,
                    tol: float = 1e-4) -> Dict:
    """
    Compare reverse-mode gradients against centered finite differences.

    Returns
    -------
    {
        'analytic': np.ndarray,    # from one reverse pass
        'numeric': np.ndarray,     # from 2n bumped forward passes
        'max_abs_error': float,
        'passed': bool             # max_abs_error <= tol
    }
    """
    x0 = [float(value(v)) for v in x0_list]
    analytic = np.array(grads_list(f, x0), dtype=float)
    numeric = np.array(numeric_grads(f, x0, h=h), dtype=float)
    max_abs_error = float(np.max(np.abs(analytic - numeric))) if len(x0) else 0.0
    return {
        'analytic': analytic,
        'numeric': numeric,
        'max_abs_error': max_abs_error,
        'passed': bool(max_abs_error <= tol),
    }
