"""
constants.py
--------------

Tolerances and unit presets shared by every resolver.
"""
import numpy as np


class ToleranceConfig(object):
    """
    Tolerance values used for geometric comparisons.

    Parameters
    ------------
    zero : float
      Vectors and segments shorter than this are considered
      degenerate and are replaced with the zero vector.
    orthonormal : float
      Absolute tolerance used when comparing transforms
      and checking rotation matrices.
    """

    def __init__(self, **kwargs):
        self.zero = 1e-9
        self.orthonormal = 1e-6
        for key, value in kwargs.items():
            if not hasattr(self, key):
                raise KeyError(f'no tolerance named `{key}`!')
            setattr(self, key, float(value))


tol = ToleranceConfig()

# per-axis scale presets applied to positions only
IDENTITY_SCALE = np.ones(3, dtype=np.float64)
MM_TO_M = np.full(3, 0.001, dtype=np.float64)
