import numpy as np
import pytest

from cadkinematic.catalog import Axis, CoordinateSystem, MemoryCatalog, Part
from cadkinematic.reporting import RecordingReporter


@pytest.fixture
def reporter():
    return RecordingReporter()


@pytest.fixture
def catalog():
    return MemoryCatalog()


@pytest.fixture
def part():
    # one reference frame at the origin and an axis along +Z
    return Part('LINK1.PRT', [
        CoordinateSystem('REF'),
        Axis('A1', [0, 0, 0], [0, 0, 2]),
    ])


@pytest.fixture
def rotated_part():
    # reference frame rotated 90 degrees about Z and moved
    columns = np.array([[0, 1, 0],
                        [-1, 0, 0],
                        [0, 0, 1]], dtype=np.float64)
    return Part('LINK2.PRT', [
        CoordinateSystem('REF', origin=[10, 0, 0], columns=columns),
        Axis('A1', [10, 0, 0], [15, 0, 0]),
    ])
