"""
Base class for network components.

Every component exposes its trainable leaf nodes through `parameters()` in a
fixed order; gradient reset is shared.
"""

from abc import ABC, abstractmethod
from typing import List

import numpy as np

from ..aad.core.node import Node


def make_rng(rng=None) -> np.random.Generator:
    """Return `rng` unchanged, or a fresh default generator when None."""
    return rng if rng is not None else np.random.default_rng()


class Module(ABC):
    """
    Abstract base class for Neuron, Layer and MLP.
    """

    @abstractmethod
    def parameters(self) -> List[Node]:
        """
        Trainable leaf nodes, in a stable order.
        """
        pass

    def zero_gradient(self):
        """Set every parameter's gradient to 0.0."""
        for param in self.parameters():
            param.gradient = 0.0

    def __call__(self, inputs):
        return self.evaluate(inputs)
