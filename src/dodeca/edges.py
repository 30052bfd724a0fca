"""
Edge derivation for the regular dodecahedron.

The edges are not listed anywhere: they are recovered from the vertex
coordinates as the vertex pairs lying at the shortest pairwise distance.
"""

from typing import Any, Dict, List, Sequence

from .geometry import (
    Point3D,
    Edge,
    distance,
    create_dodecahedron,
)

# Absorbs float rounding of the golden-ratio coordinates, not geometric variation
EDGE_TOLERANCE = 0.001


def compute_pairwise_distances(vertices: Sequence[Point3D]) -> List[Dict[str, Any]]:
    """
    Compute the distance between every unordered pair of distinct vertices.

    Args:
        vertices: Vertex coordinates

    Returns:
        List of {'i', 'j', 'dist'} records (i < j), sorted by ascending distance
    """
    distances = []

    for i in range(len(vertices)):
        for j in range(i + 1, len(vertices)):
            distances.append({
                'i': i,
                'j': j,
                'dist': distance(vertices[i], vertices[j]),
            })

    # sort() is stable, so equal distances keep their (i, j) generation order
    distances.sort(key=lambda d: d['dist'])

    return distances


def vertex_degrees(edges: Sequence[Edge], num_vertices: int) -> List[int]:
    """Count how many edges touch each vertex."""
    degree = [0] * num_vertices

    for i, j in edges:
        degree[i] += 1
        degree[j] += 1

    return degree


def derive_edges(vertices: Sequence[Point3D],
                 tolerance: float = EDGE_TOLERANCE) -> Dict[str, Any]:
    """
    Derive the edge set of a polyhedron from its vertex coordinates.

    The shortest pairwise distance is taken as the edge length; every pair
    whose distance differs from it by less than `tolerance` is an edge.
    Nothing is asserted about the result: a wrong edge count or degree
    shows up in the returned numbers only.

    Args:
        vertices: Vertex coordinates
        tolerance: Absolute tolerance for matching the edge length

    Returns:
        Dict with 'edge_length', 'edge_count', 'edges' (sorted by distance)
        and 'degrees' (one count per vertex)
    """
    if len(vertices) < 2:
        raise ValueError(f"need at least 2 vertices to derive edges, got {len(vertices)}")

    distances = compute_pairwise_distances(vertices)
    edge_length = distances[0]['dist']

    edges = [
        (d['i'], d['j'])
        for d in distances
        if abs(d['dist'] - edge_length) < tolerance
    ]

    return {
        'edge_length': edge_length,
        'edge_count': len(edges),
        'edges': edges,
        'degrees': vertex_degrees(edges, len(vertices)),
    }


# =============================================================================
# OUTPUT FORMATTING
# =============================================================================

def format_edges_literal(edges: Sequence[Edge],
                         name: str = "DODECAHEDRON_EDGES",
                         per_row: int = 6) -> str:
    """
    Format edges as a Python list literal ready to paste into source code.
    """
    lines = [f"{name} = ["]

    for start in range(0, len(edges), per_row):
        row = ", ".join(f"({i}, {j})" for i, j in edges[start:start + per_row])
        lines.append(f"    {row},")

    lines.append("]")

    return "\n".join(lines)


def format_edge_report_text(report: Dict[str, Any]) -> str:
    """
    Format an edge derivation report as human-readable text.
    """
    lines = []
    lines.append(f"Edge length: {report['edge_length']!r}")
    lines.append(f"Number of edges at this length: {report['edge_count']}")
    lines.append("")

    lines.append(f"Edges ({report['edge_count']} total):")
    lines.append(format_edges_literal(report['edges']))
    lines.append("")

    lines.append("Vertex degrees:")
    for i, d in enumerate(report['degrees']):
        lines.append(f"V{i}: {d} edges")

    return "\n".join(lines)


# =============================================================================
# MAIN
# =============================================================================

def main() -> int:
    report = derive_edges(create_dodecahedron())
    print(format_edge_report_text(report))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
