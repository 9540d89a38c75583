"""
cadkinematic
--------------

Resolve reference frames and joint axes of CAD datums into
scaled rigid transforms and unit axes ready for a robot
description.
"""
from . import catalog, constants, datums, exchange, export, reporting, vectors

from .axes import resolve_axis_direction
from .catalog import DatumKind, MemoryCatalog
from .chain import KinematicChain
from .constants import tol, IDENTITY_SCALE, MM_TO_M
from .frames import resolve_part_local_frame, resolve_root_to_child_frame
from .reporting import Reporter, LogReporter, RecordingReporter
from .resolver import GeometryResolver
from .transforms import Transform, from_cad

__all__ = ['resolve_axis_direction',
           'resolve_part_local_frame',
           'resolve_root_to_child_frame',
           'GeometryResolver',
           'KinematicChain',
           'Transform',
           'from_cad',
           'DatumKind',
           'MemoryCatalog',
           'Reporter',
           'LogReporter',
           'RecordingReporter',
           'tol',
           'IDENTITY_SCALE',
           'MM_TO_M',
           'catalog',
           'constants',
           'datums',
           'exchange',
           'export',
           'reporting',
           'vectors']
