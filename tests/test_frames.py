import numpy as np

from cadkinematic.catalog import CoordinateSystem, Part
from cadkinematic.constants import MM_TO_M
from cadkinematic.frames import (resolve_part_local_frame,
                                 resolve_root_to_child_frame)
from cadkinematic.transforms import Transform, from_cad


def test_part_local_frame(catalog, rotated_part, reporter):
    ok, t = resolve_part_local_frame(
        catalog, rotated_part, 'REF', MM_TO_M, reporter)
    assert ok
    assert np.allclose(t.position, [0.01, 0, 0])
    assert np.allclose(t.rotate([1, 0, 0]), [0, 1, 0])


def test_part_local_frame_missing(catalog, part, reporter):
    ok, t = resolve_part_local_frame(catalog, part, 'NOPE', reporter=reporter)
    assert not ok
    assert t.is_identity()
    assert reporter.messages == []


def test_root_to_child_translation(catalog, part, reporter):
    placement = Transform.from_translation([1, 0, 0])
    ok, t = resolve_root_to_child_frame(
        placement, catalog, part, 'REF', [1, 1, 1], reporter)
    assert ok
    assert t.almost_equal(Transform.from_translation([1, 0, 0]))
    assert reporter.messages == []


def test_root_to_child_composes(catalog, rotated_part, reporter):
    placement = from_cad([0, 0, 500], np.eye(3), MM_TO_M)
    ok, t = resolve_root_to_child_frame(
        placement, catalog, rotated_part, 'REF', MM_TO_M, reporter)
    assert ok
    assert np.allclose(t.position, [0.01, 0, 0.5])
    assert np.allclose(t.rotate([1, 0, 0]), [0, 1, 0])
    assert t.is_rigid()


def test_root_to_child_empty_catalog(catalog, reporter):
    placement = Transform.from_translation([1, 0, 0])
    ok, t = resolve_root_to_child_frame(
        placement, catalog, Part('EMPTY.PRT'), 'REF', reporter=reporter)
    assert not ok
    assert t.is_identity()
    assert len(reporter.warnings) == 1
    assert 'EMPTY.PRT' in reporter.warnings[0]


def test_root_to_child_missing_name(catalog, reporter):
    model = Part('P.PRT', [CoordinateSystem('CS0'), CoordinateSystem('CS1')])
    placement = Transform.from_translation([1, 0, 0])
    ok, t = resolve_root_to_child_frame(
        placement, catalog, model, 'REF', reporter=reporter)
    # identity rather than the placement: nothing was composed
    assert not ok
    assert t.is_identity()
    assert len(reporter.warnings) == 1
    assert 'no coordinate system' not in reporter.warnings[0]
    assert 'P.PRT' in reporter.warnings[0]


def test_repeated_calls_are_independent(catalog, part, reporter):
    placement = Transform.from_translation([0, 2, 0])
    first = resolve_root_to_child_frame(placement, catalog, part, 'REF',
                                        reporter=reporter)
    second = resolve_root_to_child_frame(placement, catalog, part, 'REF',
                                         reporter=reporter)
    assert first[0] and second[0]
    assert first[1].almost_equal(second[1])
