"""Join region geometries to prices, draw them and track hover state."""

from dataclasses import dataclass, field, replace
from typing import Optional

from plotly import graph_objects as go

import config as ui_config
from helpers import tooltip_html
from price_maps import map_config as config


@dataclass(frozen=True)
class RegionFeature:
    """A named region shape from a GeoJSON source."""
    name: str
    geometry: dict


@dataclass(frozen=True)
class ShapeHandle:
    """One drawn region: its name, joined price and fill."""
    name: str
    price: Optional[float]
    fill: str
    bucket: Optional[int]
    geometry: dict = field(repr=False)

    @property
    def has_data(self) -> bool:
        return self.price is not None


@dataclass(frozen=True)
class Tooltip:
    visible: bool = False
    html: str = ""
    left: Optional[float] = None
    top: Optional[float] = None

    def moved_to(self, x, y):
        """Return the tooltip repositioned next to the pointer at (x, y)."""
        return replace(
            self,
            left=x + config.TOOLTIP_OFFSET_X,
            top=y + config.TOOLTIP_OFFSET_Y,
        )

    def bbox(self):
        """Position as a zero-size box, the shape dcc.Tooltip expects."""
        if self.left is None or self.top is None:
            return None
        return {"x0": self.left, "x1": self.left, "y0": self.top, "y1": self.top}


@dataclass(frozen=True)
class HoverState:
    """Visual state of every shape plus the tooltip, after one pointer event."""
    shape_states: tuple
    tooltip: Tooltip = Tooltip()
    active: Optional[str] = None

    def to_dict(self):
        return {
            "shape_states": list(self.shape_states),
            "tooltip": {
                "visible": self.tooltip.visible,
                "html": self.tooltip.html,
                "left": self.tooltip.left,
                "top": self.tooltip.top,
            },
            "active": self.active,
        }

    @classmethod
    def from_dict(cls, data):
        return cls(
            shape_states=tuple(data["shape_states"]),
            tooltip=Tooltip(**data["tooltip"]),
            active=data.get("active"),
        )


class RegionRenderer:
    """Draws one shape per region feature, colored by its joined price.

    Regions without a price get the configured no-data fill. Hover events
    never mutate the renderer: each one returns a complete HoverState.
    """

    def __init__(self, features, index, color_model, no_data_color=config.NO_DATA_COLOR):
        self.color_model = color_model
        self.no_data_color = no_data_color
        self._index = index
        self.handles = tuple(self._join(feature) for feature in features)

    def _join(self, feature):
        price = self._index.get(feature.name)
        if price is None:
            return ShapeHandle(feature.name, None, self.no_data_color, None, feature.geometry)
        return ShapeHandle(
            name=feature.name,
            price=price,
            fill=self.color_model.color_for(price),
            bucket=self.color_model.bucket_index(price),
            geometry=feature.geometry,
        )

    def __len__(self):
        return len(self.handles)

    def handle_for(self, name):
        return next((h for h in self.handles if h.name == name), None)

    def price_for(self, name):
        return self._index.get(name)

    def set_all(self, state, override=None):
        """Put every shape in ``state``, then override the shapes named in ``override``.

        Args:
            state (str): State applied to all shapes.
            override (tuple[str, str] | None): Optional (name, state) pair.

        Returns:
            tuple[str, ...]: One state per shape handle.
        """
        if state not in ui_config.SHAPE_STATES:
            raise ValueError(f"Unknown shape state: {state}")
        if override is None:
            return tuple(state for _ in self.handles)
        name, override_state = override
        if override_state not in ui_config.SHAPE_STATES:
            raise ValueError(f"Unknown shape state: {override_state}")
        return tuple(override_state if h.name == name else state for h in self.handles)

    def idle_state(self):
        return HoverState(shape_states=self.set_all("normal"))

    def pointer_enter(self, name, x, y):
        tooltip = Tooltip(visible=True, html=tooltip_html(name, self.price_for(name))).moved_to(x, y)
        return HoverState(
            shape_states=self.set_all("dimmed", override=(name, "active")),
            tooltip=tooltip,
            active=name,
        )

    def pointer_move(self, hover_state, x, y):
        if not hover_state.tooltip.visible:
            return hover_state
        return replace(hover_state, tooltip=hover_state.tooltip.moved_to(x, y))

    def pointer_leave(self):
        return self.idle_state()

    def opacities(self, hover_state):
        return [ui_config.SHAPE_OPACITY[s] for s in hover_state.shape_states]

    def line_widths(self, hover_state):
        return [ui_config.SHAPE_LINE_WIDTH[s] for s in hover_state.shape_states]

    def feature_collection(self):
        """GeoJSON of the drawn shapes, with feature ids matching trace locations."""
        return {
            "type": "FeatureCollection",
            "features": [
                {
                    "type": "Feature",
                    "id": i,
                    "properties": {"name": h.name},
                    "geometry": h.geometry,
                }
                for i, h in enumerate(self.handles)
            ],
        }

    def fill_categories(self):
        """Colors in z order: no-data first, then the threshold range."""
        return (self.no_data_color,) + tuple(self.color_model.range)

    def z_values(self):
        # half-step offsets keep each z inside its own colorscale band
        return [(0 if h.bucket is None else h.bucket + 1) + 0.5 for h in self.handles]

    def colorscale(self):
        """Stepped colorscale with one flat band per fill category."""
        colors = self.fill_categories()
        n = len(colors)
        scale = []
        for i, color in enumerate(colors):
            scale.append([i / n, color])
            scale.append([(i + 1) / n, color])
        return scale

    def to_trace(self, hover_state=None):
        """Build the Plotly choropleth trace for all shapes.

        Args:
            hover_state (HoverState | None): State to draw; idle if None.

        Returns:
            go.Choropleth: The trace, with the tooltip markup in customdata.
        """
        hover_state = hover_state or self.idle_state()
        return go.Choropleth(
            geojson=self.feature_collection(),
            featureidkey="id",
            locations=list(range(len(self.handles))),
            z=self.z_values(),
            zmin=0,
            zmax=len(self.fill_categories()),
            colorscale=self.colorscale(),
            showscale=False,
            customdata=[[h.name, tooltip_html(h.name, h.price)] for h in self.handles],
            hoverinfo="none",
            hovertemplate=None,
            marker=dict(
                opacity=self.opacities(hover_state),
                line=dict(
                    color=ui_config.SHAPE_LINE_COLOR,
                    width=self.line_widths(hover_state),
                ),
            ),
        )
