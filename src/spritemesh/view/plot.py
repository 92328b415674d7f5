from __future__ import annotations

from datetime import datetime
from typing import Optional, TYPE_CHECKING

import matplotlib.pyplot as plt

from spritemesh.view.vtk_utils import VtkUtils

if TYPE_CHECKING:
    from matplotlib.axes import Axes
    from spritemesh.model.mesh_data import MeshData, ColliderShape


def plot_shape(
    mesh: MeshData,
    collider: Optional[ColliderShape] = None,
    ax: Optional[Axes] = None,
    show: bool = True,
    title: Optional[str] = None,
) -> Axes:
    """
    Draw a mesh with its vertex indices and the collider outline on top.

    Args:
        mesh: Built mesh.
        collider: Collider to overlay, if any.
        ax: Axes to draw on; a new figure is created when omitted.
        show: Call ``plt.show()`` when done.
        title: Plot title, a timestamp by default.

    Returns:
        The axes that were drawn on.
    """
    if ax is None:
        _, ax = plt.subplots()

    xy = mesh.vertices[:, :2]
    if mesh.triangle_count:
        ax.triplot(xy[:, 0], xy[:, 1], mesh.faces, color='tab:blue', lw=1, label="mesh")

    for index, (x, y) in enumerate(xy):
        ax.plot(x, y, 'ko', ms=3)
        ax.text(x, y, str(index), fontsize=9, color='k', ha='left', va='bottom')

    if collider is not None:
        for i, ring in enumerate(VtkUtils.collider_rings(collider)):
            ax.plot(ring[:, 0], ring[:, 1], color='tab:red', lw=2, ls='--',
                    label=f"collider ({collider.kind})" if i == 0 else "_nolegend_")

    ax.set_aspect('equal')
    ax.grid(visible=True, which='major', axis='both', linestyle='-', color='gray', lw=0.5)
    ax.minorticks_on()
    ax.grid(visible=True, which='minor', axis='both', linestyle=':', color='gray', lw=0.5)

    ax.set_title(title or f"Shape plotted at {datetime.now().strftime('%d.%m.%Y %H:%M:%S')}")
    ax.set_xlabel("X Coordinate")
    ax.set_ylabel("Y Coordinate")
    ax.legend(loc='best')

    if show:
        plt.show()
    return ax
