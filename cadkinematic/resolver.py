"""
resolver.py
--------------

`GeometryResolver` bundles a catalog, a unit scale and a reporter
so an export loop can resolve one link or joint after another
without passing them around on every call.
"""
import numpy as np

from .axes import resolve_axis_direction
from .catalog import ComponentPath
from .constants import IDENTITY_SCALE
from .frames import resolve_part_local_frame, resolve_root_to_child_frame
from .reporting import get_reporter
from .transforms import Transform, from_cad


class GeometryResolver(object):
    def __init__(self, catalog, scale=None, reporter=None):
        """
        Parameters
        ------------
        catalog : ModelItemCatalog
          Catalog every query goes through
        scale : None or (3,) float
          Per-axis scale applied to positions
        reporter : None or Reporter
          Diagnostics sink, the process default if None
        """
        self.catalog = catalog
        if scale is None:
            scale = IDENTITY_SCALE
        self.scale = np.array(scale, dtype=np.float64).reshape(3)
        self.reporter = get_reporter(reporter)

    def placement(self, component):
        """
        Placement of a component in the assembly.

        Parameters
        ------------
        component : ComponentPath or Transform
          A placed part, or an already converted placement

        Returns
        ------------
        placement : Transform
          Scaled placement relative to the assembly root
        """
        if isinstance(component, Transform):
            return component
        if isinstance(component, ComponentPath):
            origin, columns = component.placement_transform()
            return from_cad(origin, columns, self.scale)
        raise TypeError('placement must be a `Transform` or `ComponentPath`!')

    def part_local_frame(self, model, frame_name):
        return resolve_part_local_frame(
            self.catalog, model, frame_name,
            scale=self.scale, reporter=self.reporter)

    def root_to_child_frame(self, component, frame_name, model=None):
        """
        Transform from the assembly root to a named part frame.

        Parameters
        ------------
        component : ComponentPath or Transform
          Placement of the part
        frame_name : str
          Name of the reference coordinate system
        model : any
          The part, taken from `component` if None

        Returns
        ------------
        success : bool
          Whether the frame was resolved
        transform : Transform
          Resolved transform, identity on failure
        """
        if model is None:
            if not isinstance(component, ComponentPath):
                raise ValueError('model is required with a `Transform`!')
            model = component.model
        return resolve_root_to_child_frame(
            self.placement(component), self.catalog, model, frame_name,
            scale=self.scale, reporter=self.reporter)

    def axis_direction(self, model, axis_name, frame_name):
        return resolve_axis_direction(
            self.catalog, model, axis_name, frame_name,
            scale=self.scale, reporter=self.reporter)
