"""
Fully connected layer: a row of neurons fed the same input vector.
"""

from typing import List, Optional, Sequence

import numpy as np

from ..aad.core.node import Node
from .module import Module, make_rng
from .neuron import Neuron


class Layer(Module):
    """Layer containing `n_outputs` neurons of width `n_inputs`."""

    def __init__(self, n_inputs: int, n_outputs: int, rng: Optional[np.random.Generator] = None):
        if n_outputs < 1:
            raise ValueError(f"Layer needs at least one neuron, got {n_outputs}")
        rng = make_rng(rng)
        self.neurons = [Neuron(n_inputs, rng=rng) for _ in range(n_outputs)]

    @property
    def n_inputs(self) -> int:
        return self.neurons[0].n_inputs

    @property
    def n_outputs(self) -> int:
        return len(self.neurons)

    def parameters(self) -> List[Node]:
        return [p for neuron in self.neurons for p in neuron.parameters()]

    def evaluate(self, inputs: Sequence) -> List[Node]:
        # one output per neuron, always a list (even for a single neuron)
        return [neuron.evaluate(inputs) for neuron in self.neurons]

    def __repr__(self):
        return f"Layer(n_inputs={self.n_inputs}, n_outputs={self.n_outputs})"
