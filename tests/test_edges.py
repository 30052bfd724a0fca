import pytest

from dodeca.edges import (
    EDGE_TOLERANCE,
    compute_pairwise_distances,
    derive_edges,
    format_edges_literal,
    format_edge_report_text,
    main,
    vertex_degrees,
)
from dodeca.faces import DODECAHEDRON_EDGES
from dodeca.geometry import PHI, create_dodecahedron, distance, regular_edge_length


def test_all_pairs_sorted():
    distances = compute_pairwise_distances(create_dodecahedron())

    assert len(distances) == 190
    assert all(d['i'] < d['j'] for d in distances)
    values = [d['dist'] for d in distances]
    assert values == sorted(values)


def test_thirty_edges_of_degree_three():
    report = derive_edges(create_dodecahedron())

    assert set(report) == {'edge_length', 'edge_count', 'edges', 'degrees'}
    assert report['edge_count'] == 30
    assert len(report['edges']) == 30
    assert report['degrees'] == [3] * 20


def test_edge_length_is_minimal_distance():
    vertices = create_dodecahedron()
    report = derive_edges(vertices)

    all_distances = [
        distance(vertices[i], vertices[j])
        for i in range(20) for j in range(i + 1, 20)
    ]
    assert report['edge_length'] == min(all_distances)
    assert report['edge_length'] == pytest.approx(regular_edge_length(), abs=1e-9)
    for i, j in report['edges']:
        assert abs(distance(vertices[i], vertices[j]) - report['edge_length']) < 1e-3


def test_cube_corner_joins_golden_rectangle():
    vertices = create_dodecahedron()
    assert vertices[0] == (1.0, 1.0, 1.0)
    assert vertices[8] == (0.0, PHI, 1 / PHI)

    assert (0, 8) in derive_edges(vertices)['edges']


def test_every_vertex_used():
    report = derive_edges(create_dodecahedron())

    used = {v for edge in report['edges'] for v in edge}
    assert used == set(range(20))


def test_matches_transcribed_edges():
    report = derive_edges(create_dodecahedron())

    assert set(report['edges']) == set(DODECAHEDRON_EDGES)


def test_degrees_ignore_endpoint_order():
    edges = [(0, 1), (2, 1), (0, 2)]
    assert vertex_degrees(edges, 3) == vertex_degrees([(j, i) for i, j in edges], 3)
    assert vertex_degrees(edges, 4) == [2, 2, 2, 0]


def test_tolerance_groups_rounded_lengths():
    # Two unit edges, one slightly off, and a diagonal
    vertices = [(0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (0.0, 1.0005, 0.0)]
    report = derive_edges(vertices)

    assert report['edge_count'] == 2
    assert report['degrees'] == [2, 1, 1]

    strict = derive_edges(vertices, tolerance=1e-6)
    assert strict['edges'] == [(0, 1)]


def test_irregular_input_reported_not_raised():
    vertices = [(0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (5.0, 0.0, 0.0)]
    report = derive_edges(vertices)

    assert report['edge_count'] == 1
    assert report['degrees'] == [1, 1, 0]


def test_too_few_vertices():
    with pytest.raises(ValueError):
        derive_edges([(0.0, 0.0, 0.0)])


def test_default_tolerance():
    assert EDGE_TOLERANCE == 0.001


def test_edges_literal_rows():
    text = format_edges_literal([(0, 8), (0, 12), (0, 16)], per_row=2)

    assert text.splitlines() == [
        "DODECAHEDRON_EDGES = [",
        "    (0, 8), (0, 12),",
        "    (0, 16),",
        "]",
    ]


def test_report_text():
    text = format_edge_report_text(derive_edges(create_dodecahedron()))

    assert "Number of edges at this length: 30" in text
    assert "V0: 3 edges" in text
    assert "V19: 3 edges" in text
    assert "(0, 8)" in text


def test_main_is_repeatable(capsys):
    assert main() == 0
    first = capsys.readouterr().out
    assert main() == 0
    second = capsys.readouterr().out

    assert first == second
    assert "Vertex degrees:" in first
