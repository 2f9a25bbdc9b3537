"""
Neural-network components built on the scalar AAD engine:
- Neuron, Layer, MLP: tanh feed-forward network
- squared_error, sum_squared_error: loss assembly
- TrainingConfig, build_network, train: gradient-descent driver
"""

from .module import Module
from .neuron import Neuron
from .layer import Layer
from .mlp import MLP
from .loss import squared_error, sum_squared_error
from .trainer import TrainingConfig, build_network, train

__all__ = ['Module', 'Neuron', 'Layer', 'MLP',
           'squared_error', 'sum_squared_error',
           'TrainingConfig', 'build_network', 'train']
