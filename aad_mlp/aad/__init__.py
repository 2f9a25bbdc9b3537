# aad/__init__.py
# Scalar reverse-mode Automatic Adjoint Differentiation

from .core.node import Node
from .core.engine import backward, topological_order, zero_gradients
from .core.seeds import value, grad, grads, grads_list, numeric_grads, check_gradients
from .ops import constant, add, subtract, multiply, negate, power, sum, tanh

__all__ = [
    # Core
    'Node',
    # Engine
    'backward',
    'topological_order',
    'zero_gradients',
    # Seeds
    'value',
    'grad',
    'grads',
    'grads_list',
    'numeric_grads',
    'check_gradients',
    # Ops
    'constant',
    'add',
    'subtract',
    'multiply',
    'negate',
    'power',
    'sum',
    'tanh',
]
