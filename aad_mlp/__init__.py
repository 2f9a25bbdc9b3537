# aad_mlp/__init__.py
# Scalar reverse-mode AD engine and a small tanh MLP trained by gradient descent

from .aad import (
    Node,
    backward, topological_order, zero_gradients,
    value, grad, grads, grads_list, numeric_grads, check_gradients,
    constant, add, subtract, multiply, negate, power, sum, tanh,
)
from .nn import (
    Neuron, Layer, MLP,
    squared_error, sum_squared_error,
    TrainingConfig, build_network, train,
)

__version__ = "0.1.0"

__all__ = [
    'Node',
    'backward', 'topological_order', 'zero_gradients',
    'value', 'grad', 'grads', 'grads_list', 'numeric_grads', 'check_gradients',
    'constant', 'add', 'subtract', 'multiply', 'negate', 'power', 'sum', 'tanh',
    'Neuron', 'Layer', 'MLP',
    'squared_error', 'sum_squared_error',
    'TrainingConfig', 'build_network', 'train',
]
