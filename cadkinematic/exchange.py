"""
exchange.py
--------------

Load a datum catalog from an XML description of an assembly:

    <assembly>
      <part name="LINK1.PRT">
        <csys name="REF" origin="0 0 0" x="1 0 0" y="0 1 0" z="0 0 1"/>
        <axis name="A1" end1="0 0 0" end2="0 0 1"/>
      </part>
      <component name="link1" part="LINK1.PRT" origin="0 0 100"/>
    </assembly>

Rotations are given as the `x`, `y` and `z` basis vectors of
the frame and default to identity.
"""
import numpy as np
import trimesh

from lxml import etree

from .catalog import Axis, Component, CoordinateSystem, MemoryCatalog, Part


def _parse_file(file_obj, ext):
    """
    Load an XML file from a file path or ZIP archive.

    Parameters
    ----------
    file_obj : str
      Path to an XML file or ZIP archive
    ext : str
      Desired extension of XML-like file

    Returns
    -----------
    tree : lxml.etree.ElementTree
      Parsed XML document
    """
    # make sure extension is in the format '.extension'
    ext = '.' + ext.lower().strip().lstrip('.')

    if not isinstance(file_obj, str):
        raise NotImplementedError('must load by file name')

    if file_obj.lower().endswith(ext):
        return etree.parse(file_obj)
    elif file_obj.lower().endswith('.zip'):
        with open(file_obj, 'rb') as f:
            archive = trimesh.util.decompress(f, 'zip')
        # find the first key in the archive that matches our extension
        key = next((k for k in archive.keys()
                    if k.lower().endswith(ext)), None)
        if key is None:
            raise ValueError(f'no {ext} file in {file_obj}!')
        return etree.parse(archive[key])
    raise ValueError(f'must be {ext} or ZIP with {ext} inside!')


def _vector(element, attribute, default=None):
    if attribute not in element.attrib:
        if default is None:
            raise ValueError(
                f'<{element.tag}> is missing `{attribute}`!')
        return np.array(default, dtype=np.float64)
    value = np.array(element.attrib[attribute].replace(',', ' ').split(),
                     dtype=np.float64)
    if value.shape != (3,):
        raise ValueError(f'`{attribute}` must be three numbers!')
    return value


def _columns(element):
    return np.array([_vector(element, 'x', [1, 0, 0]),
                     _vector(element, 'y', [0, 1, 0]),
                     _vector(element, 'z', [0, 0, 1])])


def parse_catalog(tree):
    """
    Build a catalog from a parsed XML document.

    Parameters
    ------------
    tree : lxml.etree.ElementTree or lxml.etree.Element
      Document with an `assembly` root

    Returns
    ------------
    catalog : MemoryCatalog
      Parts keyed by name and components keyed by name
    """
    root = tree.getroot() if hasattr(tree, 'getroot') else tree

    def parse_part(p):
        part = Part(name=p.attrib['name'])
        # keep datums in document order
        for child in p:
            if not isinstance(child.tag, str):
                continue
            tag = etree.QName(child).localname.lower()
            if tag == 'csys':
                part.add(CoordinateSystem(
                    name=child.attrib['name'],
                    origin=_vector(child, 'origin', [0, 0, 0]),
                    columns=_columns(child)))
            elif tag == 'axis':
                part.add(Axis(
                    name=child.attrib['name'],
                    start=_vector(child, 'end1'),
                    end=_vector(child, 'end2')))
        return part

    catalog = MemoryCatalog()
    for p in root.iter('{*}part'):
        part = parse_part(p)
        catalog.parts[part.name] = part

    for c in root.iter('{*}component'):
        part_name = c.attrib['part']
        if part_name not in catalog.parts:
            raise ValueError(f'component references unknown part `{part_name}`!')
        name = c.attrib.get('name', part_name)
        catalog.components[name] = Component(
            part=catalog.parts[part_name],
            origin=_vector(c, 'origin', [0, 0, 0]),
            columns=_columns(c))

    return catalog


def load_catalog(file_obj):
    """
    Load a datum catalog from a ZIP or file path.

    Parameters
    ------------
    file_obj : str
      Path to XML file or ZIP with XML inside

    Returns
    ------------
    catalog : MemoryCatalog
      Loaded result from XML
    """
    return parse_catalog(_parse_file(file_obj=file_obj, ext='.xml'))
