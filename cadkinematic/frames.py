"""
frames.py
--------------

Resolve named reference frames of parts, either relative to the
part itself or relative to the root of the assembly.
"""
from .datums import DatumError, find_coordinate_system
from .reporting import get_reporter
from .transforms import Transform


def part_local_frame(catalog, model, frame_name, scale=None, reporter=None):
    """
    Query the named coordinate system of a part.

    Returns
    ------------
    result : Found or NotFound
      `Found(Transform)` from the part body frame to the
      named coordinate system
    """
    return find_coordinate_system(
        catalog, model, frame_name, scale=scale, reporter=reporter)


def resolve_part_local_frame(catalog, model, frame_name,
                             scale=None, reporter=None):
    """
    Transform from the body frame of a part to its named
    reference coordinate system.

    Parameters
    ------------
    catalog : ModelItemCatalog
      Catalog to query
    model : any
      Part holding the coordinate system
    frame_name : str
      Name of the reference coordinate system
    scale : None or (3,) float
      Scale applied to positions
    reporter : None or Reporter
      Diagnostics sink

    Returns
    ------------
    success : bool
      Whether the frame was found
    transform : Transform
      Resolved transform, identity on failure
    """
    result = part_local_frame(catalog, model, frame_name, scale, reporter)
    if not result:
        return False, Transform.identity()
    return True, result.value


def resolve_root_to_child_frame(placement, catalog, model, frame_name,
                                scale=None, reporter=None):
    """
    Transform from the assembly root to the named frame of a part.

    Parameters
    ------------
    placement : Transform
      Placement of the part relative to the assembly root
    catalog : ModelItemCatalog
      Catalog to query
    model : any
      The placed part
    frame_name : str
      Name of the reference coordinate system in the part
    scale : None or (3,) float
      Scale applied to positions
    reporter : None or Reporter
      Diagnostics sink

    Returns
    ------------
    success : bool
      Whether the frame was resolved
    transform : Transform
      `placement * part_local`, identity on failure
    """
    result = part_local_frame(catalog, model, frame_name, scale, reporter)
    if not result:
        # an empty catalog was already reported by the query
        if result.reason is not DatumError.CATALOG_EMPTY:
            get_reporter(reporter).warn(
                'Unable to get the transform from the root for ' +
                catalog.full_name(model))
        return False, Transform.identity()
    return True, placement * result.value
