"""
Squared-error loss assembled from graph operations, so the result is a Node
that `backward` can differentiate.
"""

from typing import Sequence

from ..aad.core.node import Node
from ..aad.ops.arithmetic import power, subtract, sum


def squared_error(prediction, target) -> Node:
    """(prediction - target)^2"""
    return power(subtract(prediction, target), 2)


def sum_squared_error(predictions: Sequence, targets: Sequence) -> Node:
    """
    Batch loss L = Σᵢ (ŷᵢ - yᵢ)²

    Raises:
        ValueError: if the two sequences differ in length or are empty
    """
    if len(predictions) != len(targets):
        raise ValueError(
            f"Got {len(predictions)} predictions but {len(targets)} targets"
        )
    return sum(squared_error(p, t) for p, t in zip(predictions, targets))
