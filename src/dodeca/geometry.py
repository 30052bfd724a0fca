"""
Dodecahedron geometry primitives.
Pure Python - no CadQuery dependencies, so it can be tested standalone.
"""

import math
from typing import List, Sequence, Tuple

# Type aliases for clarity
Point3D = Tuple[float, float, float]
Edge = Tuple[int, int]
Face = Tuple[int, ...]

PHI = (1 + math.sqrt(5)) / 2  # Golden ratio ~ 1.618


# =============================================================================
# VECTOR MATH HELPERS
# =============================================================================

def dot(a: Point3D, b: Point3D) -> float:
    return a[0]*b[0] + a[1]*b[1] + a[2]*b[2]

def sub(a: Point3D, b: Point3D) -> Point3D:
    return (a[0]-b[0], a[1]-b[1], a[2]-b[2])

def add(a: Point3D, b: Point3D) -> Point3D:
    return (a[0]+b[0], a[1]+b[1], a[2]+b[2])

def scale(a: Point3D, s: float) -> Point3D:
    return (a[0]*s, a[1]*s, a[2]*s)

def norm(a: Point3D) -> float:
    return math.sqrt(dot(a, a))

def normalize(a: Point3D) -> Point3D:
    l = norm(a)
    if l < 1e-9: return (0.0, 0.0, 0.0)
    return scale(a, 1.0/l)


def distance(a: Point3D, b: Point3D) -> float:
    """Euclidean distance between two points."""
    dx = a[0] - b[0]
    dy = a[1] - b[1]
    dz = a[2] - b[2]

    return math.sqrt(dx*dx + dy*dy + dz*dz)


def centroid(points: Sequence[Point3D]) -> Point3D:
    """Average of a non-empty collection of points."""
    n = len(points)
    return (
        sum(p[0] for p in points) / n,
        sum(p[1] for p in points) / n,
        sum(p[2] for p in points) / n,
    )


# =============================================================================
# DODECAHEDRON CONSTRUCTION
# =============================================================================

# Vertex order matters: the hand-authored edge and face tables index into it.
DODECAHEDRON_VERTICES: Tuple[Point3D, ...] = (
    # Cube corners (+-1, +-1, +-1)
    (1.0, 1.0, 1.0), (1.0, 1.0, -1.0), (1.0, -1.0, 1.0), (1.0, -1.0, -1.0),
    (-1.0, 1.0, 1.0), (-1.0, 1.0, -1.0), (-1.0, -1.0, 1.0), (-1.0, -1.0, -1.0),
    # (0, +-phi, +-1/phi)
    (0.0, PHI, 1 / PHI), (0.0, PHI, -1 / PHI),
    (0.0, -PHI, 1 / PHI), (0.0, -PHI, -1 / PHI),
    # (+-1/phi, 0, +-phi)
    (1 / PHI, 0.0, PHI), (-1 / PHI, 0.0, PHI),
    (1 / PHI, 0.0, -PHI), (-1 / PHI, 0.0, -PHI),
    # (+-phi, +-1/phi, 0)
    (PHI, 1 / PHI, 0.0), (PHI, -1 / PHI, 0.0),
    (-PHI, -1 / PHI, 0.0), (-PHI, 1 / PHI, 0.0),
)


def create_dodecahedron() -> List[Point3D]:
    """
    Create the 20 vertices of a regular dodecahedron.

    The construction is the cube (+-1, +-1, +-1) plus three golden
    rectangles, giving an edge length of 2/phi and a circumradius of sqrt(3).

    Returns:
        A fresh list of vertex coordinates, indexed 0-19
    """
    return list(DODECAHEDRON_VERTICES)


def regular_edge_length() -> float:
    """Edge length of the dodecahedron returned by create_dodecahedron()."""
    return 2 / PHI
