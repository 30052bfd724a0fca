"""
Full dodecahedron report.

Chains the steps that the two standalone scripts run separately: derive
the edges from the vertices, validate the face table against them, then
analyze the shape and sew it into a solid.
"""

from typing import Any, Dict

from .geometry import create_dodecahedron
from .edges import derive_edges, format_edge_report_text
from .faces import (
    DODECAHEDRON_FACES,
    build_adjacency,
    validate_faces,
    check_face_tiling,
    format_face_report_text,
)
from .analysis import analyze_dodecahedron, format_analysis_text
from .solid import build_polyhedron_solid, solid_properties, format_solid_text


def generate_report() -> Dict[str, Any]:
    """
    Run every step on the built-in dodecahedron.

    The face table is validated against the freshly derived edges rather
    than the transcribed copy, so a transcription slip shows up here.

    Returns:
        Dict with 'vertices', 'edges', 'adjacency', 'faces', 'tiling',
        'analysis' and 'solid' (None when the faces do not sew)
    """
    vertices = create_dodecahedron()
    edge_report = derive_edges(vertices)
    edges = edge_report['edges']

    adjacency = build_adjacency(edges, len(vertices))
    face_results = validate_faces(DODECAHEDRON_FACES, adjacency)
    tiling = check_face_tiling(DODECAHEDRON_FACES, edges, len(vertices))

    shape = build_polyhedron_solid(vertices, DODECAHEDRON_FACES)

    return {
        'vertices': vertices,
        'edges': edge_report,
        'adjacency': adjacency,
        'faces': face_results,
        'tiling': tiling,
        'analysis': analyze_dodecahedron(vertices, edges, DODECAHEDRON_FACES),
        'solid': solid_properties(shape) if shape is not None else None,
    }


def format_report_text(report: Dict[str, Any]) -> str:
    lines = [
        format_edge_report_text(report['edges']),
        "",
        format_face_report_text(report['adjacency'], report['faces'], report['tiling']),
        "",
        format_analysis_text(report['analysis']),
        "",
    ]

    if report['solid'] is None:
        lines.append("SOLID CHECK: faces could not be sewn into a closed solid")
    else:
        lines.append(format_solid_text(report['solid'], report['edges']['edge_length']))

    return "\n".join(lines)


def main() -> int:
    print(format_report_text(generate_report()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
