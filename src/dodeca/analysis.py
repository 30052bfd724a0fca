"""
Shape Analysis for the Dodecahedron.

Provides functions to check that derived edges and faces describe a regular
solid: uniform edge lengths, planar outward-wound faces, identical vertex
figures and a single dihedral angle.
"""

import math
from collections import Counter
from typing import List, Dict, Tuple, Any, Sequence

from .geometry import (
    Point3D,
    Edge,
    normalize,
    sub,
    add,
    scale,
    dot,
    distance,
    centroid,
)
from .faces import build_adjacency, face_edges


def generate_cut_list(vertices: Sequence[Point3D],
                      edges: Sequence[Edge],
                      precision: int = 3) -> Dict[float, int]:
    """
    Group edges by length.

    Args:
        vertices: Vertex coordinates
        edges: List of edges
        precision: Decimal places to round to for grouping

    Returns:
        Dict mapping length (rounded) to count
    """
    lengths: Dict[float, int] = {}

    for i, j in edges:
        length_rounded = round(distance(vertices[i], vertices[j]), precision)
        lengths[length_rounded] = lengths.get(length_rounded, 0) + 1

    return dict(sorted(lengths.items()))


def face_normal(vertices: Sequence[Point3D], face: Sequence[int]) -> Point3D:
    """
    Unit normal of a polygon by Newell's method.

    Follows the right-hand rule, so a counter-clockwise winding seen from
    outside gives an outward normal.
    """
    nx = ny = nz = 0.0
    for i, j in face_edges(face):
        a, b = vertices[i], vertices[j]
        nx += (a[1] - b[1]) * (a[2] + b[2])
        ny += (a[2] - b[2]) * (a[0] + b[0])
        nz += (a[0] - b[0]) * (a[1] + b[1])
    return normalize((nx, ny, nz))


def face_planarity(vertices: Sequence[Point3D], face: Sequence[int]) -> float:
    """Largest distance of a face vertex from the face's mean plane."""
    points = [vertices[v] for v in face]
    center = centroid(points)
    normal = face_normal(vertices, face)
    return max(abs(dot(sub(p, center), normal)) for p in points)


def calculate_polygon_size(vertices: Sequence[Point3D], face: Sequence[int]) -> float:
    """
    Calculate the side-to-side distance of a polygon.

    For odd-sided polygons (pentagons) this is twice the apothem, the
    distance from the centroid to an edge midpoint.
    """
    n = len(face)
    if n < 3:
        return 0.0

    center = centroid([vertices[v] for v in face])

    apothem_sum = 0.0
    for i, j in face_edges(face):
        midpoint = tuple(c / 2 for c in add(vertices[i], vertices[j]))
        apothem_sum += distance(midpoint, center)

    return 2 * apothem_sum / n


def check_face_winding(vertices: Sequence[Point3D],
                       faces: Sequence[Sequence[int]]) -> Dict[str, Any]:
    """
    Check that every face normal points away from the solid's centroid.

    Returns:
        Dict with 'outward' (one bool per face), 'inward_faces'
        (0-based indices) and 'consistent'
    """
    solid_center = centroid(vertices)

    outward = []
    for face in faces:
        face_center = centroid([vertices[v] for v in face])
        outward.append(dot(face_normal(vertices, face), sub(face_center, solid_center)) > 0)

    return {
        'outward': outward,
        'inward_faces': [i for i, ok in enumerate(outward) if not ok],
        'consistent': all(outward),
    }


def dihedral_angles(vertices: Sequence[Point3D],
                    faces: Sequence[Sequence[int]],
                    angle_tol_deg: float = 0.001) -> Dict[Edge, float]:
    """
    Interior dihedral angle, in degrees, at every edge shared by two faces.

    Measured between the face centroids in the plane perpendicular to the
    edge, so face winding does not matter. Angles are rounded to
    `angle_tol_deg`.
    """
    edge_faces: Dict[Edge, List[int]] = {}
    for face_idx, face in enumerate(faces):
        for i, j in face_edges(face):
            edge_faces.setdefault((min(i, j), max(i, j)), []).append(face_idx)

    centers = [centroid([vertices[v] for v in face]) for face in faces]

    angles: Dict[Edge, float] = {}
    for (i, j), face_indices in sorted(edge_faces.items()):
        if len(face_indices) != 2:
            continue
        axis = normalize(sub(vertices[j], vertices[i]))
        midpoint = scale(add(vertices[i], vertices[j]), 0.5)

        # Perpendiculars from the edge towards each face center
        spokes = []
        for face_idx in face_indices:
            to_center = sub(centers[face_idx], midpoint)
            spokes.append(normalize(sub(to_center, scale(axis, dot(to_center, axis)))))

        cos_angle = dot(spokes[0], spokes[1])
        angle = math.degrees(math.acos(max(-1, min(1, cos_angle))))
        angles[(i, j)] = round(angle / angle_tol_deg) * angle_tol_deg

    return angles


def classify_vertices(vertices: Sequence[Point3D],
                      edges: Sequence[Edge],
                      angle_tol_deg: float = 0.1) -> Dict[Tuple, int]:
    """
    Group vertices by their vertex figure.

    A vertex is characterized by its degree and the sorted angles between
    each pair of incident edges. A regular solid has a single signature.

    Returns:
        Dict mapping (degree, angles) signature to vertex count
    """
    adjacency = build_adjacency(edges, len(vertices))
    signatures = Counter()

    for v_idx, neighbours in adjacency.items():
        vertex = vertices[v_idx]
        directions = [normalize(sub(vertices[n], vertex)) for n in neighbours]

        angles = []
        for i in range(len(directions)):
            for j in range(i + 1, len(directions)):
                cos_angle = dot(directions[i], directions[j])
                angle_deg = math.degrees(math.acos(max(-1, min(1, cos_angle))))
                angles.append(round(angle_deg / angle_tol_deg) * angle_tol_deg)

        signatures[(len(neighbours), tuple(sorted(angles)))] += 1

    return dict(signatures)


def analyze_dodecahedron(vertices: Sequence[Point3D],
                         edges: Sequence[Edge],
                         faces: Sequence[Sequence[int]]) -> Dict[str, Any]:
    """
    Run the full shape analysis.

    Returns:
        Dictionary containing all analysis results
    """
    sizes = [calculate_polygon_size(vertices, face) for face in faces]
    dihedrals = dihedral_angles(vertices, faces)

    return {
        'totals': {
            'vertices': len(vertices),
            'edges': len(edges),
            'faces': len(faces),
        },
        'cut_list': generate_cut_list(vertices, edges),
        'max_planarity_error': max(face_planarity(vertices, face) for face in faces),
        'face_sizes': {
            'min': min(sizes),
            'max': max(sizes),
            'avg': sum(sizes) / len(sizes),
        },
        'winding': check_face_winding(vertices, faces),
        'dihedral_angles': dict(Counter(dihedrals.values())),
        'vertex_figures': classify_vertices(vertices, edges),
    }


def format_analysis_text(summary: Dict[str, Any]) -> str:
    """
    Format the analysis as human-readable text.
    """
    lines = []
    lines.append("=" * 70)
    lines.append("DODECAHEDRON SHAPE ANALYSIS")
    lines.append("=" * 70)
    lines.append("")

    totals = summary['totals']
    lines.append("STRUCTURE SUMMARY")
    lines.append("-" * 70)
    lines.append(f"  Vertices:           {totals['vertices']}")
    lines.append(f"  Edges:              {totals['edges']}")
    lines.append(f"  Faces:              {totals['faces']}")
    lines.append("")

    lines.append("EDGE LENGTHS")
    lines.append("-" * 70)
    for length, count in summary['cut_list'].items():
        lines.append(f"  {length:.3f}: {count} edges")
    lines.append("")

    lines.append("FACES")
    lines.append("-" * 70)
    sizes = summary['face_sizes']
    lines.append(f"  Side-to-side:       {sizes['min']:.4f} - {sizes['max']:.4f}")
    lines.append(f"  Planarity error:    {summary['max_planarity_error']:.2e}")
    winding = summary['winding']
    if winding['consistent']:
        lines.append("  Winding:            all outward")
    else:
        inward = ", ".join(f"F{i + 1}" for i in winding['inward_faces'])
        lines.append(f"  Winding:            inward faces {inward}")
    for angle, count in sorted(summary['dihedral_angles'].items()):
        lines.append(f"  Dihedral {angle:.3f} deg: {count} edges")
    lines.append("")

    lines.append("VERTEX FIGURES")
    lines.append("-" * 70)
    for (degree, angles), count in summary['vertex_figures'].items():
        angle_text = ", ".join(f"{a:.1f}" for a in angles)
        lines.append(f"  {count} vertices of degree {degree} (angles {angle_text})")
    lines.append("")

    lines.append("=" * 70)

    return "\n".join(lines)
