# aad/core/node.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Optional, Tuple   # typing gives us generic container types for annotations
import numpy as np

# Operation tags understood by the reverse pass
LEAF = ""
ADD = "+"
MUL = "*"
POW = "^"
TANH = "tanh"

OP_TAGS = (LEAF, ADD, MUL, POW, TANH)


@dataclass(eq=False)
class Node:
    """
    One scalar value in the differentiable graph, plus how it was produced.

    Attributes
    ----------
    value    : np.float64
        Forward (primal) value. Only leaf parameters are mutated after creation
        (by the optimizer step).
    gradient : np.float64
        Reverse-mode accumulator: d(root)/d(self) for the most recent reverse
        pass. Always accumulated with `+=`, never overwritten by a local rule.
    label    : str
        Optional debug/pretty-print name.
    op       : str
        Operation tag: "" (leaf), "+", "*", "^" or "tanh".
    inputs   : Tuple[Node, ...]
        Predecessor nodes (zero, one or two). The same node may appear twice,
        e.g. for `a + a`.
    exponent : Optional[float]
        The constant exponent of a "^" node; None for every other op.

    Equality and hashing are by identity (eq=False), so a node can sit in
    visited-sets and be shared by any number of successors.
    """
    value: Any
    gradient: Any = 0.0
    label: str = ""
    op: str = LEAF
    inputs: Tuple["Node", ...] = field(default_factory=tuple)
    exponent: Optional[float] = None

    # numpy scalars defer to our reflected operators instead of broadcasting
    __array_ufunc__ = None

    def __post_init__(self):
        # Type check: only allow real numeric scalars
        if isinstance(self.value, bool) or not isinstance(
                self.value, (int, float, np.integer, np.floating)):
            raise TypeError(
                f"Node only accepts real numeric scalars (int, float), "
                f"but got {type(self.value)}"
            )
        if self.op not in OP_TAGS:
            raise ValueError(f"Unknown operation tag: {self.op!r}")
        # float64 for precision; numpy also gives NaN (not complex) for x**0.5 with x<0
        self.value = np.float64(self.value)
        self.gradient = np.float64(self.gradient)
        self.inputs = tuple(self.inputs)

    @property
    def is_leaf(self) -> bool:
        return self.op == LEAF

    def __repr__(self):
        return f"Node(label={self.label!r}, value={self.value}, grad={self.gradient})"

    # Operator overloading for arithmetic operations
    def __add__(self, other):
        from ..ops.arithmetic import add
        return add(self, other)

    def __radd__(self, other):
        from ..ops.arithmetic import add
        return add(other, self)

    def __sub__(self, other):
        from ..ops.arithmetic import subtract
        return subtract(self, other)

    def __rsub__(self, other):
        from ..ops.arithmetic import subtract
        return subtract(other, self)

    def __mul__(self, other):
        from ..ops.arithmetic import multiply
        return multiply(self, other)

    def __rmul__(self, other):
        from ..ops.arithmetic import multiply
        return multiply(other, self)

    def __neg__(self):
        from ..ops.arithmetic import negate
        return negate(self)

    def __pow__(self, exponent):
        from ..ops.arithmetic import power
        return power(self, exponent)

    def tanh(self):
        from ..ops.transcendental import tanh
        return tanh(self)

    def backward(self):
        from .engine import backward
        backward(self)
