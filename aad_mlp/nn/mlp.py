"""
Multi-layer perceptron

Sizes chain as [n_inputs, layer_sizes...]: layer i maps width sizes[i] to
sizes[i+1], so the output of each layer is exactly the input of the next.

Per-epoch contract (enacted by the training driver):

    evaluate all examples → assemble loss → zero_gradient → backward(loss) → step
"""

from typing import List, Optional, Sequence

import numpy as np

from ..aad.core.node import Node
from .layer import Layer
from .module import Module, make_rng


class MLP(Module):
    """
    Ordered stack of tanh layers.

    Usage:
        >>> rng = np.random.default_rng(0)
        >>> net = MLP(3, [4, 4, 1], rng=rng)
        >>> out = net.evaluate([2.0, 3.0, -1.0])
        >>> loss = sum_squared_error([out[0]], [1.0])
        >>> net.zero_gradient()
        >>> backward(loss)
        >>> net.step(0.01)
    """

    def __init__(self, n_inputs: int, layer_sizes: Sequence[int],
                 rng: Optional[np.random.Generator] = None):
        """
        Args:
            n_inputs: Width of the input vector
            layer_sizes: Output width of each layer, in order
            rng: Generator used for weight initialization (fresh default if None)
        """
        layer_sizes = list(layer_sizes)
        if not layer_sizes:
            raise ValueError("MLP needs at least one layer size")
        sizes = [n_inputs] + layer_sizes
        if any(s < 1 for s in sizes):
            raise ValueError(f"Layer widths must be positive, got {sizes}")

        rng = make_rng(rng)
        self.n_inputs = n_inputs
        self.layers = [Layer(sizes[i], sizes[i + 1], rng=rng) for i in range(len(layer_sizes))]

    @property
    def n_outputs(self) -> int:
        return self.layers[-1].n_outputs

    def evaluate(self, inputs: Sequence) -> List[Node]:
        if len(inputs) != self.n_inputs:
            raise ValueError(f"MLP expects {self.n_inputs} inputs, got {len(inputs)}")
        outputs = list(inputs)
        for layer in self.layers:
            outputs = layer.evaluate(outputs)
        return outputs

    def parameters(self) -> List[Node]:
        return [p for layer in self.layers for p in layer.parameters()]

    def step(self, learning_rate: float = 0.01):
        """Gradient descent: value += -learning_rate * gradient, in place."""
        for param in self.parameters():
            param.value += -learning_rate * param.gradient

    def __repr__(self):
        widths = [self.n_inputs] + [layer.n_outputs for layer in self.layers]
        return f"MLP({' -> '.join(str(w) for w in widths)})"
