"""
VTK and Geometry Utilities
Hands built meshes and colliders over to PyVista for rendering and export.
"""
import numpy as np
import numpy.typing as npt
import pyvista as pv

import logging

from spritemesh.config import COLLIDER_CIRCLE_SEGMENTS
from spritemesh.model.geometry_utils import circle_to_polyline
from spritemesh.model.mesh_data import MeshData, ColliderKind, ColliderShape

logger = logging.getLogger(__name__)


class VtkUtils:
    @staticmethod
    def as_closed_xy(a: npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
        """
        Ensure the polyline is closed by repeating the first point at the end if necessary.

        Args:
            a: List of (x, y) tuples or (N, 2) array of points.

        Returns:
            (N, 2) array of points with the first point repeated at the end if needed.

        Raises:
            ValueError: If the input is not of shape (N, 2).
        """
        arr = np.asarray(a, dtype=np.float64).reshape(-1, 2)

        if arr.shape[0] == 0:
            raise ValueError(f"Expected shape (N, 2), got {arr.shape}.")

        if not np.allclose(arr[0], arr[-1]):
            arr = np.vstack([arr, arr[0]])

        return arr

    @staticmethod
    def mesh_to_polydata(mesh: MeshData) -> pv.PolyData:
        """
        Triangulated PolyData with texture coordinates and point normals.
        """
        faces = np.column_stack([
            np.full(mesh.triangle_count, 3, dtype=np.int_),
            mesh.faces.astype(np.int_),
        ]).ravel()

        pd = pv.PolyData(np.array(mesh.vertices), faces=faces)
        pd.active_texture_coordinates = np.array(mesh.uvs)
        pd.point_data["Normals"] = np.array(mesh.normals)
        return pd

    @staticmethod
    def collider_rings(
        collider: ColliderShape,
        segments: int = COLLIDER_CIRCLE_SEGMENTS
    ) -> list[npt.NDArray[np.float64]]:
        """Closed (N, 2) outlines of a collider, circles discretized."""
        match collider.kind:
            case ColliderKind.POLYGON:
                return [VtkUtils.as_closed_xy(collider.points)]
            case ColliderKind.CIRCLE:
                return [circle_to_polyline(collider.circle, segments)]
            case ColliderKind.CIRCLE_WITH_TRIANGLE:
                return [
                    circle_to_polyline(collider.circle.circle, segments),
                    VtkUtils.as_closed_xy(collider.triangle.points),
                ]
            case _:
                raise TypeError(f"Unsupported collider: {collider!r}")

    @staticmethod
    def collider_to_polydata(
        collider: ColliderShape,
        segments: int = COLLIDER_CIRCLE_SEGMENTS
    ) -> pv.PolyData:
        """All collider outlines as polyline cells of one PolyData."""
        pts3_list: list[npt.NDArray[np.float64]] = []
        cells_list: list[npt.NDArray[np.int_]] = []
        offset = 0

        for ring in VtkUtils.collider_rings(collider, segments):
            n = ring.shape[0]
            pts3_list.append(np.c_[ring, np.zeros((n, 1), dtype=np.float64)])

            # polyline cell: [n, id0, id1, ..., id(n-1)]
            cells_list.append(np.hstack([[n], np.arange(offset, offset + n, dtype=np.int_)]))
            offset += n

        pd = pv.PolyData(np.vstack(pts3_list))
        pd.lines = np.concatenate(cells_list).astype(np.int_)
        return pd

    @staticmethod
    def export(mesh: MeshData, filepath: str) -> None:
        """
        Save the mesh in any format PyVista writes (.vtp, .vtk, .ply, .stl, ...).
        """
        try:
            VtkUtils.mesh_to_polydata(mesh).save(filepath)
            logger.info(f"Mesh exported to: {filepath}")
        except Exception:
            logger.exception("Failed to export mesh file")
            raise
