"""
Face validation for the regular dodecahedron.

The 12 pentagonal faces are hand-authored vertex cycles. Each one is
checked against the adjacency list built from the derived edges, and the
set as a whole is checked for closing up into a surface.
"""

from collections import Counter
from typing import Any, Dict, List, Optional, Sequence

from .geometry import Edge, Face

# Transcribed from the output of dodeca.edges (sorted by distance)
DODECAHEDRON_EDGES: List[Edge] = [
    (8, 9), (10, 11), (12, 13), (14, 15), (16, 17), (18, 19),
    (0, 8), (0, 12), (0, 16), (1, 9), (1, 14), (1, 16),
    (2, 10), (2, 12), (2, 17), (3, 11), (3, 14), (3, 17),
    (4, 8), (4, 13), (4, 19), (5, 9), (5, 15), (5, 19),
    (6, 10), (6, 13), (6, 18), (7, 11), (7, 15), (7, 18),
]

# Wound counter-clockwise seen from outside the solid
DODECAHEDRON_FACES: List[Face] = [
    (0, 8, 4, 13, 12),     # +y+z
    (0, 16, 1, 9, 8),
    (0, 12, 2, 17, 16),
    (1, 16, 17, 3, 14),
    (1, 14, 15, 5, 9),
    (2, 12, 13, 6, 10),
    (2, 10, 11, 3, 17),
    (4, 8, 9, 5, 19),
    (4, 19, 18, 6, 13),
    (5, 15, 7, 18, 19),
    (6, 18, 7, 11, 10),
    (3, 11, 7, 15, 14),    # -y-z
]


def build_adjacency(edges: Sequence[Edge],
                    num_vertices: Optional[int] = None) -> Dict[int, List[int]]:
    """
    Build a symmetric adjacency list from an edge list.

    Args:
        edges: List of edges (vertex index pairs, either order)
        num_vertices: Number of vertices; defaults to the largest index + 1

    Returns:
        Dict mapping every vertex index to its neighbours, in edge order
    """
    if num_vertices is None:
        num_vertices = max((max(e) for e in edges), default=-1) + 1

    adjacency: Dict[int, List[int]] = {v: [] for v in range(num_vertices)}

    for i, j in edges:
        adjacency[i].append(j)
        adjacency[j].append(i)

    return adjacency


def face_edges(face: Sequence[int]) -> List[Edge]:
    """Consecutive vertex pairs of a face, including the wrap-around pair."""
    count = len(face)
    return [(face[k], face[(k + 1) % count]) for k in range(count)]


def is_cycle(face: Sequence[int], adjacency: Dict[int, List[int]]) -> bool:
    """Check that every consecutive pair of the face is an edge."""
    for curr, nxt in face_edges(face):
        if nxt not in adjacency.get(curr, ()):
            return False
    return True


def validate_faces(faces: Sequence[Sequence[int]],
                   adjacency: Dict[int, List[int]]) -> List[Dict[str, Any]]:
    """
    Validate each candidate face as a cycle of the edge graph.

    Invalid faces are reported, never raised.

    Returns:
        List of {'index' (1-based), 'face', 'valid'} dicts
    """
    return [
        {'index': n, 'face': list(face), 'valid': is_cycle(face, adjacency)}
        for n, face in enumerate(faces, start=1)
    ]


def check_face_tiling(faces: Sequence[Sequence[int]],
                      edges: Sequence[Edge],
                      num_vertices: int) -> Dict[str, Any]:
    """
    Check that the faces jointly close up into a polyhedral surface.

    The per-face cycle check says nothing about gaps or overlaps; here every
    edge must border exactly two faces, no face side may be a non-edge, and
    the Euler characteristic V - E + F must be 2.

    Returns:
        Dict with 'edge_face_counts', 'unused_edges', 'overused_edges',
        'foreign_edges', 'euler_characteristic' and 'closed'
    """
    edge_set = {(min(i, j), max(i, j)) for i, j in edges}

    usage: Counter = Counter()
    for face in faces:
        for i, j in face_edges(face):
            usage[(min(i, j), max(i, j))] += 1

    edge_face_counts = {e: usage.get(e, 0) for e in sorted(edge_set)}
    unused = [e for e, c in edge_face_counts.items() if c == 0]
    overused = [e for e, c in edge_face_counts.items() if c > 2]
    foreign = sorted(e for e in usage if e not in edge_set)

    euler = num_vertices - len(edge_set) + len(faces)

    closed = (
        all(c == 2 for c in edge_face_counts.values())
        and not foreign
        and euler == 2
    )

    return {
        'edge_face_counts': edge_face_counts,
        'unused_edges': unused,
        'overused_edges': overused,
        'foreign_edges': foreign,
        'euler_characteristic': euler,
        'closed': closed,
    }


# =============================================================================
# OUTPUT FORMATTING
# =============================================================================

def format_adjacency_text(adjacency: Dict[int, List[int]]) -> str:
    lines = ["Adjacency list:"]
    for v, neighbours in adjacency.items():
        lines.append(f"V{v}: [{', '.join(str(n) for n in neighbours)}]")
    return "\n".join(lines)


def format_faces_literal(faces: Sequence[Sequence[int]],
                         name: str = "DODECAHEDRON_FACES",
                         per_row: int = 3) -> str:
    """
    Format faces as a Python list literal ready to paste into source code.
    """
    lines = [f"{name} = ["]

    for start in range(0, len(faces), per_row):
        row = ", ".join(
            "(" + ", ".join(str(v) for v in face) + ")"
            for face in faces[start:start + per_row]
        )
        lines.append(f"    {row},")

    lines.append("]")

    return "\n".join(lines)


def format_face_report_text(adjacency: Dict[int, List[int]],
                            results: List[Dict[str, Any]],
                            tiling: Optional[Dict[str, Any]] = None) -> str:
    """
    Format the adjacency list, per-face validity table and tiling summary.
    """
    lines = [format_adjacency_text(adjacency), ""]

    lines.append("Face validation:")
    for r in results:
        status = "VALID" if r['valid'] else "INVALID"
        lines.append(f"F{r['index']} [{','.join(str(v) for v in r['face'])}]: {status}")
    lines.append("")

    lines.append(format_faces_literal([r['face'] for r in results]))

    if tiling is not None:
        lines.append("")
        lines.append("Surface check:")
        lines.append(f"  Euler characteristic: {tiling['euler_characteristic']}")
        lines.append(f"  Edges not on any face: {len(tiling['unused_edges'])}")
        lines.append(f"  Edges on more than two faces: {len(tiling['overused_edges'])}")
        lines.append(f"  Face sides that are not edges: {len(tiling['foreign_edges'])}")
        lines.append(f"  Closed surface: {'yes' if tiling['closed'] else 'NO'}")

    return "\n".join(lines)


# =============================================================================
# MAIN
# =============================================================================

def main() -> int:
    adjacency = build_adjacency(DODECAHEDRON_EDGES)
    results = validate_faces(DODECAHEDRON_FACES, adjacency)
    tiling = check_face_tiling(DODECAHEDRON_FACES, DODECAHEDRON_EDGES, len(adjacency))
    print(format_face_report_text(adjacency, results, tiling))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
