"""
Full-batch gradient descent for an MLP with a single output.

Each epoch:
    1. Forward pass over every example
    2. Batch loss L = Σᵢ (ŷᵢ - yᵢ)²
    3. zero_gradient → backward(L) → step(learning_rate)
"""

import time
import warnings
from dataclasses import dataclass
from typing import Dict, Optional, Sequence

import numpy as np

from ..aad.core.engine import backward
from ..aad.core.node import Node
from .loss import sum_squared_error
from .mlp import MLP


@dataclass
class TrainingConfig:
    """Configuration for the training loop."""
    epochs: int = 20
    learning_rate: float = 0.01

    # Seed for weight initialization when build_network() creates the MLP
    seed: Optional[int] = None

    # Logging
    verbose: bool = True


def build_network(n_inputs: int, layer_sizes: Sequence[int],
                  config: Optional[TrainingConfig] = None) -> MLP:
    """MLP initialized from a generator seeded with `config.seed`."""
    config = config or TrainingConfig()
    return MLP(n_inputs, layer_sizes, rng=np.random.default_rng(config.seed))


def _as_leaves(xs, ys):
    # wrap the dataset once; the same leaves are reused every epoch
    inputs = [[x if isinstance(x, Node) else Node(x) for x in row] for row in xs]
    targets = [y if isinstance(y, Node) else Node(y) for y in ys]
    return inputs, targets


def train(network: MLP, xs: Sequence[Sequence], ys: Sequence,
          config: Optional[TrainingConfig] = None) -> Dict:
    """
    Train `network` on (xs, ys) by full-batch gradient descent.

    Args:
        network: MLP whose last layer has one output
        xs: One feature row (numbers or Nodes) per example
        ys: One target (number or Node) per example
        config: Training configuration (uses defaults if None)

    Returns:
        {
            'loss_history': List[float],   # summed batch loss per epoch
            'mse_history': List[float],    # mean squared loss per epoch
            'predictions': List[float],    # outputs from the last forward pass
            'epochs': int,
            'runtime_sec': float
        }
    """
    config = config or TrainingConfig()
    if len(xs) != len(ys):
        raise ValueError(f"Got {len(xs)} examples but {len(ys)} targets")
    if network.n_outputs != 1:
        raise ValueError(f"train() expects a single-output network, got {network.n_outputs} outputs")

    inputs, targets = _as_leaves(xs, ys)
    n_examples = len(targets)

    loss_history = []
    mse_history = []
    predictions = []

    start_time = time.time()
    for epoch in range(config.epochs):
        outputs = [network.evaluate(row)[0] for row in inputs]
        loss = sum_squared_error(outputs, targets)

        network.zero_gradient()
        backward(loss)
        network.step(config.learning_rate)

        loss_value = float(loss.value)
        loss_history.append(loss_value)
        mse_history.append(loss_value / n_examples)
        predictions = [float(out.value) for out in outputs]

        if not np.isfinite(loss_value):
            warnings.warn(
                f"Non-finite loss at epoch {epoch}: {loss_value}",
                RuntimeWarning
            )

        if config.verbose:
            print(f"Epoch: {epoch}, loss: {loss_value}")

    runtime = time.time() - start_time

    return {
        'loss_history': loss_history,
        'mse_history': mse_history,
        'predictions': predictions,
        'epochs': config.epochs,
        'runtime_sec': runtime,
    }
