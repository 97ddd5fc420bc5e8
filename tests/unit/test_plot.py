"""
QA plotting (Agg backend, see conftest).
"""

import matplotlib.pyplot as plt
import pytest
from matplotlib.axes import Axes

from planar import GeometryKind, UnsupportedOperandError, curved, geometry_collection, st_intersection
from planar.plot import plot_geometry, plot_layers


class TestPlot:
    """plot_geometry / plot_layers"""

    def test_plot_geometry_saves_file(self, square_with_hole, tmp_path) -> None:
        out = tmp_path / "poly.png"
        ax = plot_geometry(square_with_hole, name="holed", show=False, save_path=str(out))
        assert isinstance(ax, Axes)
        assert out.exists() and out.stat().st_size > 0
        assert ax.get_title() == "Geometry: holed"

    def test_plot_layers_on_existing_axes(self, square, shifted_square, diagonal, origin) -> None:
        fig, ax = plt.subplots()
        try:
            inter = st_intersection(square, shifted_square)
            out = plot_layers([square, shifted_square, inter, geometry_collection([diagonal, origin])],
                              labels=["A", "B", "A ∩ B", "misc"], title="overlay", show=False, ax=ax)
            assert out is ax
            assert len(ax.patches) == 3
            assert len(ax.lines) == 2
            labels = sorted(t.get_text() for t in ax.get_legend().get_texts())
            assert labels == sorted(["A", "B", "A ∩ B", "misc"])
        finally:
            plt.close(fig)

    def test_curved_rejected(self) -> None:
        try:
            with pytest.raises(UnsupportedOperandError):
                plot_geometry(curved(GeometryKind.CIRCULARSTRING, [(0, 0), (1, 1), (2, 0)]), show=False)
        finally:
            plt.close("all")
