import os
import zipfile

import numpy as np
import pytest

from cadkinematic import exchange
from cadkinematic.catalog import Part
from cadkinematic.constants import MM_TO_M
from cadkinematic.export import LinkSpec, JointSpec, build_chain
from cadkinematic.joint import RevoluteJoint, FixedJoint
from cadkinematic.reporting import RecordingReporter
from cadkinematic.resolver import GeometryResolver
from cadkinematic.transforms import Transform

ASSEMBLY = """<?xml version="1.0"?>
<assembly>
  <part name="BASE.PRT">
    <csys name="REF"/>
  </part>
  <part name="ARM.PRT">
    <csys name="CS0" origin="0 0 0"/>
    <csys name="REF" origin="100 0 0"/>
    <axis name="A1" end1="100 0 0" end2="100 0 50"/>
  </part>
  <part name="TOOL.PRT">
    <csys name="TIP" origin="0 0 20"/>
  </part>
  <part name="LOOSE.PRT">
    <csys name="CS0"/>
  </part>
  <component name="base" part="BASE.PRT"/>
  <component name="arm" part="ARM.PRT" origin="0 0 100"/>
  <component name="tool" part="TOOL.PRT" origin="100 0 100"/>
  <component name="loose" part="LOOSE.PRT" origin="0 0 0"/>
</assembly>
"""


@pytest.fixture
def assembly_path(tmp_path):
    path = tmp_path / 'assembly.xml'
    path.write_text(ASSEMBLY)
    return str(path)


def test_load_catalog(assembly_path):
    catalog = exchange.load_catalog(assembly_path)
    assert set(catalog.parts.keys()) == {
        'BASE.PRT', 'ARM.PRT', 'TOOL.PRT', 'LOOSE.PRT'}
    arm = catalog.components['arm']
    assert arm.model is catalog.parts['ARM.PRT']
    assert np.allclose(arm.placement_transform()[0], [0, 0, 100])
    names = [d.name for d in arm.model.datums]
    assert names == ['CS0', 'REF', 'A1']


def test_load_catalog_zip(tmp_path):
    path = str(tmp_path / 'assembly.zip')
    with zipfile.ZipFile(path, 'w') as z:
        z.writestr('robot/assembly.xml', ASSEMBLY)
    catalog = exchange.load_catalog(path)
    assert 'arm' in catalog.components


def test_load_catalog_bad_extension(tmp_path):
    path = str(tmp_path / 'assembly.json')
    with pytest.raises(ValueError):
        exchange.load_catalog(path)


def test_resolver_placement(assembly_path):
    catalog = exchange.load_catalog(assembly_path)
    resolver = GeometryResolver(catalog, scale=MM_TO_M,
                                reporter=RecordingReporter())
    ok, t = resolver.root_to_child_frame(catalog.components['arm'], 'REF')
    assert ok
    assert np.allclose(t.position, [0.1, 0, 0.1])

    placement = Transform.from_translation([1, 0, 0])
    ok, t = resolver.root_to_child_frame(
        placement, 'REF', model=catalog.parts['BASE.PRT'])
    assert ok
    assert np.allclose(t.position, [1, 0, 0])

    with pytest.raises(ValueError):
        resolver.root_to_child_frame(placement, 'REF')
    with pytest.raises(TypeError):
        resolver.placement('arm')

    ok, axis = resolver.axis_direction(catalog.parts['ARM.PRT'], 'A1', 'REF')
    assert ok
    assert np.allclose(axis, [0, 0, 1])


def test_build_chain(assembly_path):
    catalog = exchange.load_catalog(assembly_path)
    reporter = RecordingReporter()
    resolver = GeometryResolver(catalog, scale=MM_TO_M, reporter=reporter)
    c = catalog.components
    links = [LinkSpec('base', c['base'], 'REF'),
             LinkSpec('arm', c['arm'], 'REF'),
             LinkSpec('tool', c['tool'], 'TIP'),
             LinkSpec('loose', c['loose'], 'REF')]
    joints = [JointSpec('shoulder', 'base', 'arm', 'A1', limits=[1, -1]),
              JointSpec('mount', 'arm', 'tool', kind='fixed'),
              JointSpec('dangling', 'arm', 'loose', 'A1')]

    chain, report = build_chain(resolver, links, joints)

    assert not report.complete
    assert report.skipped_links == ['loose']
    assert report.skipped_joints == ['dangling']
    assert any('loose' in w for w in reporter.warnings)

    assert chain.base_link == 'base'
    assert isinstance(chain.joints['shoulder'], RevoluteJoint)
    assert isinstance(chain.joints['mount'], FixedJoint)
    assert np.allclose(chain.joints['shoulder'].axis, [0, 0, 1])
    assert [str(p) for p in chain.parameters] == ['shoulder']
    assert np.allclose(chain.limits, [[-1, 1]])

    paths = chain.paths()
    assert paths['base'] == []
    assert paths['tool'] == ['shoulder', 'mount']

    forward = chain.forward_kinematics_lambda()
    # at zero the chain reproduces the resolved frames
    for name, link in chain.links.items():
        matrix = np.asarray(forward[name](0.0), dtype=np.float64)
        assert np.allclose(matrix, link.matrix)

    # a quarter turn about the shoulder swings the tool around +Z
    tool = np.asarray(forward['tool'](np.pi / 2), dtype=np.float64)
    assert np.allclose(tool[:3, 3], [0.1, 0.0, 0.12])
    assert np.allclose(tool[:3, :3].dot([1, 0, 0]), [0, 1, 0])


def test_build_chain_unsupported_kind():
    resolver = GeometryResolver(exchange.parse_catalog(
        exchange.etree.fromstring(ASSEMBLY.split('\n', 1)[1])),
        reporter=RecordingReporter())
    c = resolver.catalog.components
    links = [LinkSpec('base', c['base'], 'REF'),
             LinkSpec('arm', c['arm'], 'REF')]
    with pytest.raises(ValueError):
        build_chain(resolver, links,
                    [JointSpec('slide', 'base', 'arm', 'A1', kind='prismatic')])


def test_build_chain_empty():
    resolver = GeometryResolver(exchange.parse_catalog(
        exchange.etree.fromstring('<assembly/>')),
        reporter=RecordingReporter())
    chain, report = build_chain(resolver, [], [])
    assert report.complete
    assert chain.links == {}
    assert chain.base_link == 'base'


def test_example_model_loads():
    path = os.path.join(os.path.dirname(__file__), '..', 'models', 'arm.xml')
    catalog = exchange.load_catalog(os.path.abspath(path))
    assert isinstance(catalog.parts['SHOULDER.PRT'], Part)
