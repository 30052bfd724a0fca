import pytest

from dodeca.faces import DODECAHEDRON_FACES
from dodeca.geometry import create_dodecahedron, regular_edge_length
from dodeca.solid import (
    build_polyhedron_solid,
    create_polygon_face,
    regular_dodecahedron_area,
    regular_dodecahedron_volume,
    solid_properties,
)


def test_pentagon_face():
    vertices = create_dodecahedron()
    face = create_polygon_face([vertices[v] for v in DODECAHEDRON_FACES[0]])

    assert face is not None
    assert len(face.Edges()) == 5


def test_closed_solid():
    shape = build_polyhedron_solid(create_dodecahedron(), DODECAHEDRON_FACES)
    assert shape is not None

    props = solid_properties(shape)
    a = regular_edge_length()

    assert props['valid']
    assert props['faces'] == 12
    assert props['edges'] == 30
    assert props['vertices'] == 20
    assert props['volume'] > 0
    assert props['volume'] == pytest.approx(regular_dodecahedron_volume(a), rel=1e-6)
    assert props['area'] == pytest.approx(regular_dodecahedron_area(a), rel=1e-6)


def test_reversed_face_still_gives_outward_solid():
    faces = list(DODECAHEDRON_FACES)
    faces[0] = tuple(reversed(faces[0]))
    shape = build_polyhedron_solid(create_dodecahedron(), faces)
    assert shape is not None

    props = solid_properties(shape)

    assert props['valid']
    assert props['volume'] > 0
    assert props['volume'] == pytest.approx(regular_dodecahedron_volume(regular_edge_length()), rel=1e-6)


def test_open_shell_rejected():
    shape = build_polyhedron_solid(create_dodecahedron(), DODECAHEDRON_FACES[:-1])

    assert shape is None


def test_closed_form_values():
    # Unit edge
    assert regular_dodecahedron_volume(1.0) == pytest.approx(7.663119, rel=1e-6)
    assert regular_dodecahedron_area(1.0) == pytest.approx(20.645729, rel=1e-6)
