"""
datums.py
--------------

Look up named coordinate systems and axes in a part.
"""
import collections
import enum

from .catalog import DatumKind
from .reporting import get_reporter
from .transforms import from_cad

__all__ = ['DatumKind', 'DatumError', 'Found', 'NotFound', 'AxisEndpoints',
           'list_datums', 'list_datum_names', 'find_coordinate_system',
           'find_axis', 'scan']


AxisEndpoints = collections.namedtuple('AxisEndpoints', ['start', 'end'])


class DatumError(enum.Enum):
    """
    Why a datum could not be resolved.
    """
    CATALOG_EMPTY = 'catalog empty'
    NAME_NOT_FOUND = 'name not found'
    EMPTY_NAME = 'empty name'
    DEGENERATE_AXIS = 'degenerate axis'


class Found(object):
    """
    A successful query, holding a `Transform` or `AxisEndpoints`.
    """

    def __init__(self, value):
        self.value = value

    def __bool__(self):
        return True

    def __repr__(self):
        return f'Found({self.value!r})'


class NotFound(object):
    """
    A failed query: the reason and some context for messages.
    """

    def __init__(self, reason, context=''):
        self.reason = reason
        self.context = context

    def __bool__(self):
        return False

    def __repr__(self):
        return f'NotFound({self.reason.name}, {self.context!r})'


def list_datums(catalog, model, kind, reporter=None):
    """
    Every datum of a kind on a model.

    Parameters
    ------------
    catalog : ModelItemCatalog
      Catalog to query
    model : any
      Model handle understood by `catalog`
    kind : DatumKind
      Kind of datum to list
    reporter : None or Reporter
      Receives a warning if there are no datums

    Returns
    ------------
    datums : (n,) Datum
      Datums in catalog order, empty if there are none
    """
    datums = list(catalog.list(model, kind))
    if len(datums) == 0:
        get_reporter(reporter).warn(
            f'There is no {kind.value} in {catalog.full_name(model)}')
    return datums


def list_datum_names(catalog, model, kind, reporter=None):
    return [d.name for d in list_datums(catalog, model, kind, reporter)]


def scan(datums, name, last=False):
    """
    Find a datum by exact name.

    Parameters
    ------------
    datums : (n,) Datum
      Candidates in catalog order
    name : str
      Name to match
    last : bool
      Return the last match rather than the first

    Returns
    ------------
    datum : None or Datum
      Matching datum
    """
    match = None
    for datum in datums:
        if datum.name != name:
            continue
        if not last:
            return datum
        match = datum
    return match


def find_coordinate_system(catalog, model, name, scale=None, reporter=None):
    """
    Find a coordinate system by name and convert its transform.

    If the part has duplicate names the first one wins.

    Parameters
    ------------
    catalog : ModelItemCatalog
      Catalog to query
    model : any
      Part holding the coordinate system
    name : str
      Name of the coordinate system
    scale : None or (3,) float
      Scale applied to the origin
    reporter : None or Reporter
      Receives a warning if the part has no coordinate systems

    Returns
    ------------
    result : Found or NotFound
      `Found(Transform)` on success
    """
    datums = list_datums(
        catalog, model, DatumKind.COORDINATE_SYSTEM, reporter)
    if len(datums) == 0:
        return NotFound(DatumError.CATALOG_EMPTY, catalog.full_name(model))
    datum = scan(datums, name)
    if datum is None:
        return NotFound(DatumError.NAME_NOT_FOUND,
                        f'{name} in {catalog.full_name(model)}')
    origin, columns = datum.transform()
    return Found(from_cad(origin, columns, scale))


def find_axis(catalog, model, name, reporter=None):
    """
    Find an axis by name and return the points defining it.

    If the part has duplicate names the last one wins.

    Parameters
    ------------
    catalog : ModelItemCatalog
      Catalog to query
    model : any
      Part holding the axis
    name : str
      Name of the axis, an empty name is never queried
    reporter : None or Reporter
      Receives a warning if the part has no axes

    Returns
    ------------
    result : Found or NotFound
      `Found(AxisEndpoints)` on success
    """
    if not name:
        return NotFound(DatumError.EMPTY_NAME)
    datums = list_datums(catalog, model, DatumKind.AXIS, reporter)
    if len(datums) == 0:
        return NotFound(DatumError.CATALOG_EMPTY, catalog.full_name(model))
    datum = scan(datums, name, last=True)
    if datum is None:
        return NotFound(DatumError.NAME_NOT_FOUND,
                        f'{name} in {catalog.full_name(model)}')
    return Found(AxisEndpoints(*datum.line_endpoints()))
