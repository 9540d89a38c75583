"""
transforms.py
--------------

Rigid transforms and the adapter from the CAD-native
representation (origin + rotation columns) into them.
"""
import numpy as np

from trimesh import transformations as tf

from .constants import tol, IDENTITY_SCALE


class Transform(object):
    """
    A rigid transform: a position and a proper rotation stored
    as a (4, 4) homogeneous matrix.
    """

    def __init__(self, matrix=None):
        """
        Parameters
        ------------
        matrix : None or (4, 4) float
          Homogeneous transform, identity if None
        """
        if matrix is None:
            matrix = tf.identity_matrix()
        matrix = np.array(matrix, dtype=np.float64)
        if matrix.shape != (4, 4):
            raise ValueError('transform must be (4, 4) float!')
        self._matrix = matrix

    @classmethod
    def identity(cls):
        return cls()

    @classmethod
    def from_translation(cls, position):
        return cls(tf.translation_matrix(
            np.asanyarray(position, dtype=np.float64).reshape(3)))

    @classmethod
    def from_parts(cls, position, rotation):
        """
        Build a transform from a position and a rotation.

        Parameters
        ------------
        position : (3,) float
          Origin of the frame
        rotation : (3, 3) float
          Orthonormal rotation matrix

        Returns
        ------------
        transform : Transform
          Combined rigid transform
        """
        matrix = tf.identity_matrix()
        matrix[:3, :3] = np.asanyarray(rotation, dtype=np.float64).reshape((3, 3))
        matrix[:3, 3] = np.asanyarray(position, dtype=np.float64).reshape(3)
        return cls(matrix)

    @property
    def matrix(self):
        """
        A copy of the homogeneous matrix.

        Returns
        ------------
        matrix : (4, 4) float
          Homogeneous transform
        """
        return self._matrix.copy()

    @property
    def position(self):
        return self._matrix[:3, 3].copy()

    @property
    def rotation(self):
        return self._matrix[:3, :3].copy()

    def inverse(self):
        """
        The inverse rigid transform, computed as (R^T, -R^T p)
        rather than with a general matrix inverse.

        Returns
        ------------
        inverse : Transform
          Transform such that `self * inverse` is identity
        """
        rotation = self._matrix[:3, :3].T
        return Transform.from_parts(
            position=-np.dot(rotation, self._matrix[:3, 3]),
            rotation=rotation)

    def rotate(self, vector):
        """
        Apply only the rotation of this transform to a vector.
        """
        vector = np.asanyarray(vector, dtype=np.float64).reshape((1, 3))
        return tf.transform_points(vector, self._matrix, translate=False)[0]

    def __mul__(self, other):
        if isinstance(other, Transform):
            return Transform(tf.concatenate_matrices(
                self._matrix, other._matrix))
        point = np.asanyarray(other, dtype=np.float64)
        if point.shape != (3,):
            return NotImplemented
        return tf.transform_points(point.reshape((1, 3)), self._matrix)[0]

    def almost_equal(self, other, atol=None):
        if atol is None:
            atol = tol.orthonormal
        if isinstance(other, Transform):
            other = other._matrix
        return np.allclose(self._matrix, other, atol=atol)

    def is_identity(self, atol=None):
        return self.almost_equal(tf.identity_matrix(), atol=atol)

    def is_rigid(self, atol=None):
        """
        Check that the rotation is orthonormal with determinant +1.
        """
        if atol is None:
            atol = tol.orthonormal
        rotation = self._matrix[:3, :3]
        return (np.allclose(np.dot(rotation.T, rotation), np.eye(3), atol=atol) and
                abs(np.linalg.det(rotation) - 1.0) < atol)

    def __repr__(self):
        return f'Transform(position={self.position.tolist()})'


def from_cad(origin, rotation_columns, scale=None):
    """
    Convert a CAD-native transform into a `Transform`.

    The CAD representation stores the frame basis vectors
    (x, y, z axes) as three columns which become the columns
    of the rotation unchanged. The scale is a unit conversion
    of lengths, so it only touches the origin.

    Parameters
    ------------
    origin : (3,) float
      Frame origin in CAD length units
    rotation_columns : (3, 3) float
      The x, y and z basis vectors of the frame
    scale : None or (3,) float
      Per-axis multiplier applied to `origin`

    Returns
    ------------
    transform : Transform
      Position in target units and the unscaled rotation
    """
    if scale is None:
        scale = IDENTITY_SCALE
    scale = np.asanyarray(scale, dtype=np.float64).reshape(3)
    origin = np.asanyarray(origin, dtype=np.float64).reshape(3)
    columns = np.asanyarray(rotation_columns, dtype=np.float64).reshape((3, 3))
    return Transform.from_parts(
        position=origin * scale,
        rotation=columns.T)


def format_transform(transform):
    """
    Render a transform as readable text: the position on the
    first line followed by the three rows of the rotation.

    Parameters
    ------------
    transform : Transform
      Transform to render

    Returns
    ------------
    text : str
      Multi-line description
    """
    lines = ['position: ' + ' '.join(f'{v:.6f}' for v in transform.position)]
    lines.extend(' '.join(f'{v:.6f}' for v in row)
                 for row in transform.rotation)
    return '\n'.join(lines)
