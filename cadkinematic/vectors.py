"""
vectors.py
--------------

Tolerance-guarded vector primitives.

A degenerate vector is never divided by its length: the exact
zero vector is returned instead, so callers have to check for
it with `is_zero` before trusting a direction.
"""
import numpy as np

from .constants import tol


def magnitude(vector):
    """
    Euclidean length of a vector.

    Parameters
    ------------
    vector : (3,) float
      Input vector

    Returns
    ------------
    length : float
      Length of `vector`
    """
    vector = np.asanyarray(vector, dtype=np.float64).reshape(3)
    return float(np.sqrt(np.dot(vector, vector)))


def is_degenerate(vector):
    """
    Is a vector too short to define a direction?
    """
    return magnitude(vector) < tol.zero


def is_zero(vector):
    """
    Is a vector the exact zero sentinel.
    """
    return not np.any(np.asanyarray(vector, dtype=np.float64))


def normalize(vector):
    """
    Scale a vector to unit length.

    Parameters
    ------------
    vector : (3,) float
      Vector to normalize

    Returns
    ------------
    unit : (3,) float
      Unit vector, or zeros if `vector` is shorter than `tol.zero`
    """
    vector = np.array(vector, dtype=np.float64).reshape(3)
    length = magnitude(vector)
    if length < tol.zero:
        return np.zeros(3, dtype=np.float64)
    return vector / length


def unit_vector_from_segment(start, end):
    """
    Direction of the segment going from `start` to `end`.

    Parameters
    ------------
    start : (3,) float
      First point of the segment
    end : (3,) float
      Second point of the segment

    Returns
    ------------
    unit : (3,) float
      Unit direction, or zeros for a zero-length segment
    """
    start = np.asanyarray(start, dtype=np.float64).reshape(3)
    end = np.asanyarray(end, dtype=np.float64).reshape(3)
    return normalize(end - start)
