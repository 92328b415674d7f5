"""
Input/Output Manager (HDF5 + JSON presets)
Handles saving and loading shapes (parameters + built geometry) to .h5 files
and reading preset catalogs.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from importlib.metadata import version, PackageNotFoundError
from typing import Any, Dict, Optional

import h5py
import numpy as np

from spritemesh.config import DEFAULT_PRESETS_PATH
from spritemesh.model.geometry_primitives import Point, Circle
from spritemesh.model.mesh_data import (
    MeshData, ColliderKind, ColliderShape, PolygonCollider, CircleCollider,
    CircleWithTriangleCollider, BuildResult
)
from spritemesh.model.params import ShapeParams, params_from_dict

# Get module logger
logger = logging.getLogger(__name__)

try:
    APP_VERSION = version("spritemesh")
except PackageNotFoundError:
    APP_VERSION = "0.0.0-dev"

MESH_ARRAYS = ("vertices", "triangles", "uvs", "normals")


@dataclass(frozen=True)
class ShapeRecord:
    """Everything a shape file holds."""
    params: ShapeParams
    mesh: MeshData
    collider: ColliderShape


class IOManager:

    @staticmethod
    def save_shape(params: ShapeParams, filepath: str, result: Optional[BuildResult] = None) -> None:
        """
        Save a shape's parameters together with its geometry.

        If `result` is None the shape is built from `params` first.

        Raises:
            ValidationError: If the shape cannot be built.
        """
        if result is None:
            # Delayed import: builders depend on the model layer, not the other way round
            from spritemesh.builders.registry import build_shape
            result = build_shape(params)
        mesh, collider = result.unwrap()

        logger.info(f"Saving {params.kind} to: {filepath}")
        try:
            with h5py.File(filepath, "w") as f:
                f.attrs["version"] = APP_VERSION
                f.attrs["kind"] = str(params.kind)
                f.attrs["parameters_class"] = params.__class__.__name__

                # --- 1. SAVE PARAMETERS ---
                # Scalars as attributes, point lists as datasets
                grp_params = f.create_group("parameters")
                for key, val in params.to_dict().items():
                    if key == "kind":
                        continue
                    if isinstance(val, list):
                        grp_params.create_dataset(key, data=np.asarray(val, dtype=np.float64))
                    else:
                        grp_params.attrs[key] = val

                # --- 2. SAVE MESH ---
                grp_mesh = f.create_group("mesh")
                for name in MESH_ARRAYS:
                    grp_mesh.create_dataset(name, data=getattr(mesh, name))

                # --- 3. SAVE COLLIDER ---
                IOManager._save_collider(f.create_group("collider"), collider)

            logger.info(f"Shape saved: {mesh.vertex_count} vertices, collider '{collider.kind}'.")

        except Exception as e:
            logger.exception(f"Failed to save shape: {e}")
            raise

    @staticmethod
    def load_shape(filepath: str) -> ShapeRecord:
        logger.info(f"Loading shape from: {filepath}")
        if not h5py.is_hdf5(filepath):
            msg = f"File '{filepath}' is not a valid HDF5 file."
            logger.error(msg)
            raise ValueError(msg)

        try:
            with h5py.File(filepath, "r") as f:
                # --- 1. LOAD PARAMETERS ---
                loaded_values: Dict[str, Any] = {"kind": IOManager._native(f.attrs["kind"])}
                grp_params = f["parameters"]
                for key in grp_params.attrs.keys():
                    loaded_values[key] = IOManager._native(grp_params.attrs[key])
                for key in grp_params.keys():
                    loaded_values[key] = grp_params[key][:].tolist()
                params = params_from_dict(loaded_values)

                # --- 2. LOAD MESH ---
                grp_mesh = f["mesh"]
                mesh = MeshData(**{name: grp_mesh[name][:] for name in MESH_ARRAYS})

                # --- 3. LOAD COLLIDER ---
                collider = IOManager._load_collider(f["collider"])

            logger.info(f"Shape loaded from: {filepath}")
            return ShapeRecord(params=params, mesh=mesh, collider=collider)

        except Exception as e:
            logger.exception(f"Failed to load shape: {e}")
            raise

    @staticmethod
    def load_presets(path: str = DEFAULT_PRESETS_PATH) -> Dict[str, ShapeParams]:
        """
        Read a JSON catalog of named shapes: {name: {"kind": ..., fields...}}.
        """
        logger.debug(f"Loading presets from: {path}")
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise IOError(f"Failed to read presets: {e}") from e

        presets = {name: params_from_dict(entry) for name, entry in data.items()}
        logger.info(f"Loaded {len(presets)} presets.")
        return presets

    # --- COLLIDER HELPERS ---

    @staticmethod
    def _save_collider(grp: h5py.Group, collider: ColliderShape) -> None:
        grp.attrs["kind"] = str(collider.kind)
        match collider.kind:
            case ColliderKind.POLYGON:
                grp.create_dataset("path", data=collider.points)
            case ColliderKind.CIRCLE:
                grp.attrs["center"] = collider.center.to_array()
                grp.attrs["radius"] = collider.radius
            case ColliderKind.CIRCLE_WITH_TRIANGLE:
                grp.attrs["center"] = collider.circle.center.to_array()
                grp.attrs["radius"] = collider.circle.radius
                grp.create_dataset("triangle", data=collider.triangle.points)

    @staticmethod
    def _load_collider(grp: h5py.Group) -> ColliderShape:
        kind = ColliderKind(IOManager._native(grp.attrs["kind"]))
        if kind == ColliderKind.POLYGON:
            return PolygonCollider(tuple(Point.coerce(row) for row in grp["path"][:]))

        circle = CircleCollider(Circle(
            center=Point.coerce(grp.attrs["center"]),
            radius=float(grp.attrs["radius"]),
        ))
        if kind == ColliderKind.CIRCLE:
            return circle
        triangle = PolygonCollider(tuple(Point.coerce(row) for row in grp["triangle"][:]))
        return CircleWithTriangleCollider(circle=circle, triangle=triangle)

    @staticmethod
    def _native(val: Any) -> Any:
        # HDF5 often returns numpy types, convert to native python
        if isinstance(val, bytes):
            return val.decode('utf-8')
        if hasattr(val, 'item'):
            return val.item()
        return val
