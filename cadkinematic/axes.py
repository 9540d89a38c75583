"""
axes.py
--------------

Resolve the direction of a joint axis datum, expressed in the
reference frame of the part that holds it.
"""
import numpy as np

from .catalog import DatumKind
from .datums import DatumError, list_datums, scan
from .frames import part_local_frame
from .reporting import get_reporter
from .vectors import normalize, unit_vector_from_segment, is_zero


def _failure():
    return False, np.zeros(3, dtype=np.float64)


def resolve_axis_direction(catalog, model, axis_name, frame_name,
                           scale=None, reporter=None):
    """
    Unit direction of a named axis in the named reference frame
    of the same part.

    If several axes share `axis_name` the last one listed wins.
    The direction is only returned if the reference frame could
    be resolved as well: rotating by an unresolved frame would
    give a direction in the wrong frame.

    Parameters
    ------------
    catalog : ModelItemCatalog
      Catalog to query
    model : any
      Part holding the axis and the coordinate system
    axis_name : str
      Name of the axis datum
    frame_name : str
      Name of the reference coordinate system
    scale : None or (3,) float
      Scale applied to positions, which leaves directions as is
    reporter : None or Reporter
      Diagnostics sink

    Returns
    ------------
    success : bool
      Whether a direction was resolved
    direction : (3,) float
      Unit direction in the reference frame, zeros on failure
    """
    reporter = get_reporter(reporter)
    name = catalog.full_name(model)

    axes = list_datums(catalog, model, DatumKind.AXIS, reporter)
    if len(axes) == 0:
        return _failure()
    if not axis_name:
        return _failure()

    axis = scan(axes, axis_name, last=True)
    if axis is None:
        reporter.warn(f'There is no axis named {axis_name} in {name}')
        return _failure()

    start, end = axis.line_endpoints()
    direction = unit_vector_from_segment(start, end)
    if is_zero(direction):
        # zero length axis, nothing to report
        return _failure()

    frame = part_local_frame(catalog, model, frame_name, scale, reporter)
    if not frame:
        if frame.reason is not DatumError.CATALOG_EMPTY:
            reporter.warn(f'Unable to express axis {axis_name} in '
                          f'frame {frame_name} of {name}')
        return _failure()

    direction = normalize(frame.value.inverse().rotate(direction))
    return True, direction
