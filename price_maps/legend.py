"""Vertical threshold legend: color swatches and price tick labels."""

from dataclasses import dataclass

import numpy as np

import config as ui_config
from helpers import format_si_price
from price_maps import map_config as config


@dataclass(frozen=True)
class LegendEntry:
    """One swatch: the value range of a bucket, its color and pixel span."""
    lower_bound: float
    upper_bound: float
    color: str
    y_top: float
    y_bottom: float

    @property
    def height(self):
        return self.y_bottom - self.y_top


@dataclass(frozen=True)
class LegendTick:
    value: float
    label: str
    y: float


def linear_scale(domain, range):
    """Return a function mapping [d0, d1] linearly onto [r0, r1].

    Values outside the domain clamp to the range ends; a zero-width domain
    maps everything to the middle of the range.
    """
    d0, d1 = (float(v) for v in domain)
    r0, r1 = (float(v) for v in range)

    if d0 > d1:
        # np.interp needs ascending x; the output pair may run either way
        d0, d1, r0, r1 = d1, d0, r1, r0

    def scale(value):
        if d1 == d0:
            return (r0 + r1) / 2
        return float(np.interp(float(value), (d0, d1), (r0, r1)))

    return scale


@dataclass(frozen=True)
class Legend:
    entries: tuple
    ticks: tuple
    height: float
    width: float = config.LEGEND_WIDTH_PX
    x_offset: float = config.LEGEND_X_OFFSET_PX
    y_offset: float = config.LEGEND_Y_OFFSET_PX

    def _y(self, y):
        # pixel offsets below the top edge of the plot area
        return -(self.y_offset + y)

    def to_shapes(self):
        """Plotly layout shapes: one rect per entry, the axis line and tick marks."""
        base = dict(xref="paper", yref="paper", xsizemode="pixel", ysizemode="pixel",
                    xanchor=0, yanchor=1, layer="above")
        axis_x = self.x_offset + self.width

        shapes = [
            dict(base, type="rect",
                 x0=self.x_offset, x1=axis_x,
                 y0=self._y(e.y_bottom), y1=self._y(e.y_top),
                 fillcolor=e.color, line=dict(width=0))
            for e in self.entries
        ]
        shapes.append(dict(base, type="line", x0=axis_x, x1=axis_x,
                           y0=self._y(self.height), y1=self._y(0),
                           line=dict(color="#333333", width=1)))
        shapes.extend(
            dict(base, type="line",
                 x0=axis_x, x1=axis_x + config.LEGEND_TICK_SIZE_PX,
                 y0=self._y(t.y), y1=self._y(t.y),
                 line=dict(color="#333333", width=1))
            for t in self.ticks
        )
        return shapes

    def to_annotations(self):
        """Plotly annotations holding the tick labels right of the swatches."""
        return [
            dict(x=0, y=1, xref="paper", yref="paper",
                 xanchor="left", yanchor="middle",
                 xshift=self.x_offset + self.width + config.LEGEND_TICK_SIZE_PX + 3,
                 yshift=self._y(t.y),
                 text=t.label, showarrow=False, font=ui_config.LEGEND_FONT)
            for t in self.ticks
        ]


def build_legend(color_model, domain=None, vertical_extent_px=config.LEGEND_HEIGHT_PX):
    """Derive legend swatches and tick labels from a threshold color model.

    Each range color becomes one entry spanning the values that map to it.
    Open-ended first and last buckets are clamped to the domain min/max, so
    they collapse to zero height.

    Args:
        color_model (ThresholdColorModel): The model to describe.
        domain (Sequence[float] | None): Breakpoints for the scale and ticks.
            Defaults to the model's domain.
        vertical_extent_px (float): Legend height in pixels.

    Returns:
        Legend: Entries (one per range color) and ticks (one per breakpoint).
    """
    domain = list(color_model.domain if domain is None else domain)
    lo, hi = min(domain), max(domain)
    y_scale = linear_scale((lo, hi), (vertical_extent_px, 0))

    entries = []
    for color in color_model.range:
        low, high = color_model.invert_extent(color)
        low = lo if low is None else low
        high = hi if high is None else high
        entries.append(LegendEntry(
            lower_bound=low,
            upper_bound=high,
            color=color,
            y_top=y_scale(high),
            y_bottom=y_scale(low),
        ))

    ticks = tuple(LegendTick(value=v, label=format_si_price(v), y=y_scale(v)) for v in domain)
    return Legend(entries=tuple(entries), ticks=ticks, height=vertical_extent_px)
