"""
Solid model of the dodecahedron.

Sews the validated pentagons into a closed CadQuery solid, which gives an
independent check of the face table: OCC only closes the shell when the
faces meet edge to edge with no gaps.
"""

import math
import cadquery as cq
from OCP.BRepBuilderAPI import (
    BRepBuilderAPI_MakePolygon,
    BRepBuilderAPI_MakeFace,
    BRepBuilderAPI_MakeSolid,
    BRepBuilderAPI_Sewing
)
from OCP.gp import gp_Pnt
from OCP.TopAbs import TopAbs_SHELL
from OCP.TopoDS import TopoDS
from typing import Any, Dict, Optional, Sequence

from .geometry import Point3D


def create_face_wire(points: Sequence[Point3D]) -> Optional[BRepBuilderAPI_MakePolygon]:
    """Closed polygon wire through the given points, or None if OCC rejects it."""
    poly = BRepBuilderAPI_MakePolygon()
    for pt in points:
        poly.Add(gp_Pnt(float(pt[0]), float(pt[1]), float(pt[2])))
    poly.Close()

    return poly if poly.IsDone() else None


def create_polygon_face(points: Sequence[Point3D]) -> Optional[cq.Face]:
    """
    Create a planar face bounded by a closed polygon.

    Args:
        points: Polygon corners in winding order (counter-clockwise seen
                from the side the face normal should point to)

    Returns:
        CadQuery Face, or None for a degenerate or non-planar polygon
    """
    poly = create_face_wire(points)
    if poly is None:
        return None

    face = BRepBuilderAPI_MakeFace(poly.Wire())
    if not face.IsDone():
        return None

    return cq.Face(face.Face())


def build_polyhedron_solid(vertices: Sequence[Point3D],
                           faces: Sequence[Sequence[int]],
                           tolerance: float = 1e-6) -> Optional[cq.Shape]:
    """
    Build a solid from polygonal faces.

    Args:
        vertices: Vertex coordinates
        faces: Faces as vertex index cycles
        tolerance: Sewing tolerance

    Returns:
        CadQuery Shape of the solid, or None when the faces do not sew
        into a single closed shell
    """
    sewing = BRepBuilderAPI_Sewing(tolerance)

    for face in faces:
        polygon = create_polygon_face([vertices[v] for v in face])
        if polygon is None:
            return None
        sewing.Add(polygon.wrapped)

    sewing.Perform()
    sewn_shape = sewing.SewedShape()

    # Free edges border only one face: the shell has a hole
    if sewing.NbFreeEdges() > 0 or sewn_shape.ShapeType() != TopAbs_SHELL:
        return None

    solid_maker = BRepBuilderAPI_MakeSolid()
    solid_maker.Add(TopoDS.Shell_s(sewn_shape))

    if not solid_maker.IsDone():
        return None

    # Sewing orients the shell after its first face; flip an inside-out result
    solid = solid_maker.Solid()
    if cq.Shape(solid).Volume() < 0:
        solid = solid.Reversed()

    return cq.Shape(solid)


def solid_properties(shape: cq.Shape) -> Dict[str, Any]:
    """
    Measure a solid.

    Returns:
        Dict with 'valid', 'volume', 'area' and topology counts
    """
    return {
        'valid': shape.isValid(),
        'volume': shape.Volume(),
        'area': shape.Area(),
        'faces': len(shape.Faces()),
        'edges': len(shape.Edges()),
        'vertices': len(shape.Vertices()),
    }


def regular_dodecahedron_volume(edge_length: float) -> float:
    """Closed-form volume of a regular dodecahedron."""
    return (15 + 7 * math.sqrt(5)) / 4 * edge_length ** 3


def regular_dodecahedron_area(edge_length: float) -> float:
    """Closed-form surface area of a regular dodecahedron."""
    return 3 * math.sqrt(25 + 10 * math.sqrt(5)) * edge_length ** 2


def format_solid_text(props: Dict[str, Any], edge_length: float) -> str:
    lines = []
    lines.append("SOLID CHECK")
    lines.append("-" * 70)
    lines.append(f"  Valid solid:        {'yes' if props['valid'] else 'NO'}")
    lines.append(f"  Topology:           {props['vertices']} V, {props['edges']} E, {props['faces']} F")
    lines.append(f"  Volume:             {props['volume']:.6f} (expected {regular_dodecahedron_volume(edge_length):.6f})")
    lines.append(f"  Surface area:       {props['area']:.6f} (expected {regular_dodecahedron_area(edge_length):.6f})")
    return "\n".join(lines)
