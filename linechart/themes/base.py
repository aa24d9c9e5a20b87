from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from matplotlib.axes import Axes
    from matplotlib.figure import Figure


class Theme:
    """Figure styling for line charts; subclasses only change the palette"""

    name = "base"
    background_color = "#FFFFFF"
    text_color = "#000000"
    grid_color = "#E0E0E0"
    legend_background = "#FFFFFF"
    font_family = "sans-serif"
    font_size = 10

    def apply(self, fig: "Figure", ax: "Axes") -> None:
        fig.patch.set_facecolor(self.background_color)
        ax.set_facecolor(self.background_color)

        ax.xaxis.label.set_color(self.text_color)
        ax.yaxis.label.set_color(self.text_color)
        ax.tick_params(colors=self.text_color, labelsize=self.font_size)

        for spine in ax.spines.values():
            spine.set_edgecolor(self.grid_color)

        ax.grid(True, alpha=0.5, color=self.grid_color)

    def style_legend(self, ax: "Axes") -> None:
        """Add the caption legend, if any line carries a label"""
        handles, labels = ax.get_legend_handles_labels()
        if not handles:
            return
        legend = ax.legend(
            handles,
            labels,
            loc="upper center",
            bbox_to_anchor=(0.5, -0.06),
            ncol=min(len(labels), 5),
            frameon=True,
            prop={"family": self.font_family, "size": self.font_size},
        )
        legend.get_frame().set_facecolor(self.legend_background)
        legend.get_frame().set_edgecolor(self.grid_color)
        for text in legend.get_texts():
            text.set_color(self.text_color)
