"""
Single tanh neuron: out = tanh(Σᵢ wᵢ·xᵢ + b)
"""

from typing import List, Optional, Sequence

import numpy as np

from ..aad.core.node import Node
from ..aad.ops.arithmetic import add, multiply, sum
from ..aad.ops.transcendental import tanh
from .module import Module, make_rng


class Neuron(Module):
    """
    One unit with `n_inputs` weights and a bias.

    Attributes:
        weights (List[Node]): Weight leaves, one per input
        bias (Node): Bias leaf

    Weights and bias are drawn independently from U[-1, 1] using `rng`.
    Passing a seeded generator makes the initial parameters reproducible.
    """

    def __init__(self, n_inputs: int, rng: Optional[np.random.Generator] = None):
        if n_inputs < 1:
            raise ValueError(f"Neuron needs at least one input, got {n_inputs}")
        rng = make_rng(rng)
        self.weights = [Node(rng.uniform(-1.0, 1.0), label=f"w{i}") for i in range(n_inputs)]
        self.bias = Node(rng.uniform(-1.0, 1.0), label="b")

    @property
    def n_inputs(self) -> int:
        return len(self.weights)

    def parameters(self) -> List[Node]:
        return self.weights + [self.bias]

    def evaluate(self, inputs: Sequence) -> Node:
        if len(inputs) != len(self.weights):
            raise ValueError(
                f"Neuron expects {len(self.weights)} inputs, got {len(inputs)}"
            )
        # weighted sum: w1*x1 + w2*x2 + ... + bias
        activation = add(sum(multiply(w, x) for w, x in zip(self.weights, inputs)), self.bias)
        return tanh(activation)

    def __repr__(self):
        return f"TanhNeuron(n_inputs={len(self.weights)})"
