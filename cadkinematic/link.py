"""
link.py
--------------

Resolved rigid bodies of an exported kinematic chain.
"""
import numpy as np


class Link(object):
    def __init__(self, name, transform, frame_name=None, model=None):
        """
        `Link` objects store the resolved frame of a part.

        Parameters
        ------------
        name : str
          The name of the Link object
        transform : Transform
          From the assembly root to the link frame
        frame_name : None or str
          Name of the coordinate system the frame came from
        model : any
          The CAD part this link was resolved from
        """
        self.name = name
        self.transform = transform
        self.frame_name = frame_name
        self.model = model

    @property
    def matrix(self):
        """
        Homogeneous transform from the assembly root.

        Returns
        ----------
        matrix : (4, 4) float
          Root to link frame
        """
        return np.asarray(self.transform.matrix)
