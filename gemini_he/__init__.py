"""Tensor shapes, convolution shape inference, coefficient encoding, packing and triple checks for homomorphic secret-shared layers."""

__version__ = "0.1.0"