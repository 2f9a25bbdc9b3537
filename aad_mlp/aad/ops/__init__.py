# aad/ops/__init__.py

# Convenience re-exports so users can do: from aad_mlp.aad.ops import multiply, tanh, ...
from .arithmetic import constant, add, subtract, multiply, negate, power, sum
from .transcendental import tanh

__all__ = [
    "constant",
    "add", "subtract", "multiply", "negate", "power", "sum",
    "tanh",
]
