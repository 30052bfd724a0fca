"""
Dodeca - Regular Dodecahedron Structure Toolkit

Derives the edges of a regular dodecahedron from its vertex coordinates,
validates its pentagonal faces, and builds a CadQuery solid from them.
"""

from .geometry import (
    Point3D,
    Edge,
    Face,
    PHI,
    DODECAHEDRON_VERTICES,
    create_dodecahedron,
    distance,
)

from .edges import (
    EDGE_TOLERANCE,
    compute_pairwise_distances,
    derive_edges,
    vertex_degrees,
    format_edges_literal,
    format_edge_report_text,
)

from .faces import (
    DODECAHEDRON_EDGES,
    DODECAHEDRON_FACES,
    build_adjacency,
    is_cycle,
    validate_faces,
    check_face_tiling,
    format_faces_literal,
    format_face_report_text,
)

from .analysis import (
    analyze_dodecahedron,
    check_face_winding,
    dihedral_angles,
    format_analysis_text,
)

from .solid import (
    build_polyhedron_solid,
    solid_properties,
)

__version__ = "0.1.0"
__all__ = [
    # Types
    "Point3D",
    "Edge",
    "Face",
    # Geometry
    "PHI",
    "DODECAHEDRON_VERTICES",
    "create_dodecahedron",
    "distance",
    # Edge derivation
    "EDGE_TOLERANCE",
    "compute_pairwise_distances",
    "derive_edges",
    "vertex_degrees",
    "format_edges_literal",
    "format_edge_report_text",
    # Face validation
    "DODECAHEDRON_EDGES",
    "DODECAHEDRON_FACES",
    "build_adjacency",
    "is_cycle",
    "validate_faces",
    "check_face_tiling",
    "format_faces_literal",
    "format_face_report_text",
    # Analysis
    "analyze_dodecahedron",
    "check_face_winding",
    "dihedral_angles",
    "format_analysis_text",
    # Solid
    "build_polyhedron_solid",
    "solid_properties",
]
