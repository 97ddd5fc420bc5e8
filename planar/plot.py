# -*- coding: utf-8 -*-
# planar/plot.py

"""
Project: Planar
Date: 10/19/2026

Purpose:
--------
Plotting utilities for geometry values using matplotlib. Meant for quick visual
QA of predicates and set operations (operands and result on one set of axes).
"""

from typing import Optional, Sequence
import numpy as np
import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.patches import PathPatch
from matplotlib.path import Path

from .core.geometry import Geometry
from .core.kinds import GeometryKind
from .kernels.loop import orient_ring
from .topology.relate import require_supported


def _polygon_path(poly: Geometry) -> Path:
    verts, codes = [], []
    for i, r in enumerate(poly.rings):
        if len(r) < 3:
            continue
        # nonzero fill: shell CCW, holes CW
        R = orient_ring(r.xy, ccw=(i == 0))
        verts.extend(R.tolist())
        codes.extend([Path.MOVETO] + [Path.LINETO] * (R.shape[0] - 2) + [Path.CLOSEPOLY])
    return Path(np.array(verts, dtype=float).reshape(-1, 2), codes)


def draw_geometry(g: Geometry, ax: Axes, *, color: str = "C0", label: Optional[str] = None,
                  alpha: float = 0.35) -> None:
    """Draw every atomic member of `g` on `ax` (polygons filled, lines, points)."""
    require_supported(g)
    first = True
    for leaf in g.iter_atomic():
        lab = label if first else None
        first = False
        if leaf.kind == GeometryKind.POLYGON:
            patch = PathPatch(_polygon_path(leaf), facecolor=color, edgecolor=color,
                              alpha=alpha, lw=1.2, label=lab)
            ax.add_patch(patch)
        elif leaf.kind == GeometryKind.LINESTRING:
            xy = leaf.coords.xy
            ax.plot(xy[:, 0], xy[:, 1], "-", color=color, lw=1.5, label=lab)
        else:
            x, y = leaf.coords.coordinate(0)
            ax.plot([x], [y], "o", color=color, ms=4, label=lab)


def plot_geometry(g: Geometry,
                  *,
                  name: str = "geometry",
                  show: bool = True,
                  save_path: Optional[str] = None,
                  ax: Optional[Axes] = None) -> Axes:
    """
        Plot one geometry.

        Parameters
        ----------
        g : Geometry
            Geometry to draw.
        name : str
            Title label for the figure.
        show : bool
            If True and we created the figure, display it.
        save_path : Optional[str]
            If given, save the figure to this path.
        ax : Optional[matplotlib.axes.Axes]
            Existing Axes to draw on; if None, a figure is created.
        """
    return plot_layers([g], labels=[name], title="Geometry: {}".format(name),
                       show=show, save_path=save_path, ax=ax)


def plot_layers(layers: Sequence[Geometry],
                *,
                labels: Optional[Sequence[str]] = None,
                title: str = "Geometries",
                show: bool = True,
                save_path: Optional[str] = None,
                ax: Optional[Axes] = None) -> Axes:
    """
       QA helper: draw several geometries (e.g. A, B and A ∩ B) with distinct colors.

       Parameters
       ----------
       layers : Sequence[Geometry]
           Geometries drawn bottom to top.
       labels : Sequence[str], optional
           Legend entries, one per layer.
       show, save_path, ax
           Same semantics as `plot_geometry`.
       """
    created_fig = False
    if ax is None:
        plt.figure(figsize=(6, 6))
        ax = plt.gca()
        created_fig = True

    for i, g in enumerate(layers):
        lab = labels[i] if labels is not None and i < len(labels) else None
        draw_geometry(g, ax, color="C{}".format(i % 10), label=lab)

    ax.autoscale_view()
    ax.set_aspect("equal", adjustable="datalim")
    ax.set_title(title)
    ax.set_xlabel("x")
    ax.set_ylabel("y")
    ax.grid(True)
    if labels:
        handles, _ = ax.get_legend_handles_labels()
        if handles:
            ax.legend()

    if save_path:
        ax.figure.savefig(save_path, dpi=300)
    if show and created_fig:
        plt.show()
    elif created_fig:
        plt.close(ax.figure)
    return ax
