"""
joint.py
--------------

Connections between `Link` objects, with a symbolic transform
parameterized by the joint position.
"""
import abc

import numpy as np
import sympy as sp

from trimesh import transformations as tf


class Joint(abc.ABC):
    """
    The base class for `Joint` objects, or connections
    between `Link` objects.
    """
    parameter = None

    def __init__(self, name, connects, initial=None, limits=None):
        self.name = name
        self.connects = connects
        if initial is None:
            initial = np.eye(4)
        # transform from the parent link frame to the child link frame
        self.initial = np.array(initial, dtype=np.float64).reshape((4, 4))
        self.limits = limits

    @property
    @abc.abstractmethod
    def matrix(self):
        """
        The symbolic homogenous transformation matrix between
        `self.connects[0]` and `self.connects[1]`.

        Returns
        -----------
        matrix : sympy.Matrix
          Transform with `self.parameter` as a variable
        """
        raise NotImplementedError('call a subclass!')

    @property
    def connects(self):
        """
        The name of the two links this joint is connecting.

        Returns
        -------------
        connects : (2,) list
          The name of the parent and child `Link` objects
        """
        return self._connects

    @connects.setter
    def connects(self, values):
        if values is None or len(values) != 2:
            raise ValueError('`connects` must be two link names!')
        self._connects = list(values)

    @property
    def limits(self):
        if hasattr(self, '_limits'):
            return self._limits
        return [-np.inf, np.inf]

    @limits.setter
    def limits(self, values):
        if values is not None:
            self._limits = list(values)


class RevoluteJoint(Joint):
    def __init__(self, name, axis, connects, initial=None, limits=None):
        """
        Create a revolute joint between two links.

        Parameters
        -------------
        name : str
          The name of this joint.
        axis : (3,) float
          Unit vector in the child frame this joint revolves around.
        connects : (2,) str
          The name of the parent and child `Link` objects
        initial : None or (4, 4) float
          Transform from the parent frame to the child frame
          at zero joint position.
        limits : None or (2,) float
          The limits of this joint in radians.
        """
        super().__init__(name=name, connects=connects,
                         initial=initial, limits=limits)
        self.axis = np.array(axis, dtype=np.float64).reshape(3)
        if not np.isclose(np.linalg.norm(self.axis), 1.0):
            raise ValueError('axis must be a unit vector!')
        # the value to symbolically represent joint position
        self.parameter = sp.Symbol(name)

    @property
    def matrix(self):
        # self.parameter is a `sympy.Symbol` so the returned
        # transformation matrix will also be symbolic
        rotation = sp.Matrix(tf.rotation_matrix(
            angle=self.parameter,
            direction=self.axis))
        return sp.Matrix(self.initial) * rotation


class FixedJoint(Joint):
    """
    A rigid connection with no joint variable.
    """

    @property
    def matrix(self):
        return sp.Matrix(self.initial)
