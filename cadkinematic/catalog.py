"""
catalog.py
--------------

Interfaces a CAD binding implements so the resolvers can query
named datums, plus `MemoryCatalog`, a plain in-memory binding
that is filled by `exchange.load_catalog` or built by hand.
"""
import abc
import enum

import numpy as np


class DatumKind(enum.Enum):
    """
    The kinds of named datums the resolvers query.
    """
    COORDINATE_SYSTEM = 'coordinate system'
    AXIS = 'axis'


class Datum(abc.ABC):
    """
    An opaque named datum handle returned by a catalog.
    """
    @property
    @abc.abstractmethod
    def name(self):
        raise NotImplementedError('call a subclass!')


class CoordinateSystemDatum(Datum):
    @abc.abstractmethod
    def transform(self):
        """
        The frame of this coordinate system in the part.

        Returns
        -----------
        origin : (3,) float
          Origin in CAD length units
        rotation_columns : (3, 3) float
          The x, y and z basis vectors
        """
        raise NotImplementedError('call a subclass!')


class AxisDatum(Datum):
    @abc.abstractmethod
    def line_endpoints(self):
        """
        The two points of the line defining this axis.

        Returns
        -----------
        start : (3,) float
          First point of the line
        end : (3,) float
          Second point of the line
        """
        raise NotImplementedError('call a subclass!')


class ModelItemCatalog(abc.ABC):
    """
    Lists the datums of a model.
    """
    @abc.abstractmethod
    def list(self, model, kind):
        """
        Every datum of `kind` defined on `model`.

        Parameters
        -----------
        model : any
          Model handle understood by this catalog
        kind : DatumKind
          Kind of datum requested

        Returns
        -----------
        datums : (n,) Datum
          Zero or more datums in model order
        """
        raise NotImplementedError('call a subclass!')

    @abc.abstractmethod
    def full_name(self, model):
        raise NotImplementedError('call a subclass!')


class ComponentPath(abc.ABC):
    """
    A part placed inside an assembly.
    """
    @property
    @abc.abstractmethod
    def model(self):
        raise NotImplementedError('call a subclass!')

    @abc.abstractmethod
    def placement_transform(self):
        """
        Placement of the part relative to the assembly root,
        as `(origin, rotation_columns)` in CAD units.
        """
        raise NotImplementedError('call a subclass!')


def _rotation_columns(columns):
    if columns is None:
        return np.eye(3, dtype=np.float64)
    return np.array(columns, dtype=np.float64).reshape((3, 3))


class CoordinateSystem(CoordinateSystemDatum):
    def __init__(self, name, origin=None, columns=None):
        """
        A coordinate system stored in memory.

        Parameters
        ------------
        name : str
          Datum name
        origin : None or (3,) float
          Origin in CAD units, zero if None
        columns : None or (3, 3) float
          The x, y and z basis vectors, identity if None
        """
        self._name = str(name)
        if origin is None:
            origin = np.zeros(3)
        self.origin = np.array(origin, dtype=np.float64).reshape(3)
        self.columns = _rotation_columns(columns)

    @property
    def name(self):
        return self._name

    def transform(self):
        return self.origin.copy(), self.columns.copy()


class Axis(AxisDatum):
    def __init__(self, name, start, end):
        self._name = str(name)
        self.start = np.array(start, dtype=np.float64).reshape(3)
        self.end = np.array(end, dtype=np.float64).reshape(3)

    @property
    def name(self):
        return self._name

    def line_endpoints(self):
        return self.start.copy(), self.end.copy()


class Part(object):
    def __init__(self, name, datums=None):
        """
        A part holding named datums.

        Parameters
        ------------
        name : str
          Full name of the part, used in messages
        datums : None or (n,) Datum
          Datums in model order
        """
        self.name = str(name)
        self.datums = list(datums) if datums is not None else []

    def add(self, datum):
        self.datums.append(datum)
        return datum


class Component(ComponentPath):
    def __init__(self, part, origin=None, columns=None):
        """
        A part placed in an assembly.

        Parameters
        ------------
        part : Part
          The placed part
        origin : None or (3,) float
          Placement origin in CAD units
        columns : None or (3, 3) float
          Placement basis vectors
        """
        self._part = part
        if origin is None:
            origin = np.zeros(3)
        self.origin = np.array(origin, dtype=np.float64).reshape(3)
        self.columns = _rotation_columns(columns)

    @property
    def model(self):
        return self._part

    def placement_transform(self):
        return self.origin.copy(), self.columns.copy()


class MemoryCatalog(ModelItemCatalog):
    """
    Catalog over `Part` objects held in memory.
    """
    _types = {DatumKind.COORDINATE_SYSTEM: CoordinateSystemDatum,
              DatumKind.AXIS: AxisDatum}

    def __init__(self, parts=None, components=None):
        self.parts = {}
        self.components = {}
        for part in (parts or []):
            self.parts[part.name] = part
        if components is not None:
            self.components.update(components)

    def list(self, model, kind):
        datum_type = self._types[kind]
        return [d for d in model.datums if isinstance(d, datum_type)]

    def full_name(self, model):
        return model.name
