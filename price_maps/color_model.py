"""Threshold color scale mapping house prices to discrete color buckets."""

import numpy as np
import pandas as pd

from price_maps.exceptions import ColorModelError


class ThresholdColorModel:
    """Step function from numeric values to one of len(domain) + 1 colors.

    Values below ``domain[0]`` get ``range[0]``, values in
    ``[domain[i], domain[i + 1])`` get ``range[i + 1]`` and values at or
    above ``domain[-1]`` get ``range[-1]``.
    """

    def __init__(self, domain, range):
        domain = tuple(float(d) for d in domain)
        colors = tuple(range)

        if not domain:
            raise ColorModelError("Threshold domain must contain at least one breakpoint")
        if any(not np.isfinite(d) for d in domain):
            raise ColorModelError(f"Threshold domain must be finite: {list(domain)}")
        if len(colors) != len(domain) + 1:
            raise ColorModelError(
                f"Expected {len(domain) + 1} colors for {len(domain)} breakpoints, "
                f"got {len(colors)}",
                details={"domain": list(domain), "range": list(colors)},
            )
        if any(lo >= hi for lo, hi in zip(domain, domain[1:])):
            raise ColorModelError(
                f"Threshold domain must be strictly ascending: {list(domain)}",
                details={"domain": list(domain)},
            )
        duplicates = sorted({c for c in colors if colors.count(c) > 1})
        if duplicates:
            raise ColorModelError(
                f"Threshold colors must be unique, repeated: {duplicates}",
                details={"range": list(colors)},
            )

        self._domain = domain
        self._range = colors
        self._breakpoints = np.asarray(domain, dtype="float64")

    @classmethod
    def from_config(cls, thresholds):
        """Build a model from a ThresholdConfig."""
        return cls(thresholds.domain, thresholds.range)

    @property
    def domain(self):
        return self._domain

    @property
    def range(self):
        return self._range

    def bucket_index(self, value):
        """Return the index into ``range`` for a defined numeric value.

        Raises:
            ColorModelError: If value is missing or NaN.
        """
        if pd.isnull(value):
            raise ColorModelError("Cannot pick a color for a missing value")
        return int(np.searchsorted(self._breakpoints, float(value), side="right"))

    def color_for(self, value):
        return self._range[self.bucket_index(value)]

    __call__ = color_for

    def invert_extent(self, color):
        """Return the (low, high) values mapping to color.

        The first bucket has no lower bound and the last has no upper bound;
        open ends are returned as None.

        Raises:
            ColorModelError: If color is not part of the range.
        """
        try:
            i = self._range.index(color)
        except ValueError:
            raise ColorModelError(f"Color {color!r} is not in the threshold range")
        low = self._domain[i - 1] if i > 0 else None
        high = self._domain[i] if i < len(self._domain) else None
        return low, high

    def __repr__(self):
        return f"ThresholdColorModel(domain={list(self._domain)}, range={list(self._range)})"
