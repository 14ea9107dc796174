"""Compose price index, renderer and legend into Plotly map figures."""

from dataclasses import dataclass

from plotly import graph_objects as go

import config as ui_config
from price_maps.color_model import ThresholdColorModel
from price_maps.legend import Legend, build_legend
from price_maps.loaders import to_region_features
from price_maps.map_config import MapConfig
from price_maps.price_index import build_price_index
from price_maps.renderer import RegionRenderer
from price_maps.utils import logging_utils

logger = logging_utils.get_logger(__name__)


@dataclass(frozen=True)
class MapView:
    """A rendered map: its configuration, drawn shapes and legend."""
    config: MapConfig
    renderer: RegionRenderer
    legend: Legend


def build_map_view(map_config, price_records, geometries):
    """Join one geometry set to its price year and build its legend.

    Args:
        map_config (MapConfig): Which year, name property and thresholds to use.
        price_records (list[dict]): Flat price records.
        geometries (gpd.GeoDataFrame): Region shapes for this map.

    Returns:
        MapView: The renderer and legend for the map.
    """
    index = build_price_index(price_records, map_config.year_key)
    color_model = ThresholdColorModel.from_config(map_config.thresholds)
    features = to_region_features(geometries, map_config.select_name)
    renderer = RegionRenderer(features, index, color_model, map_config.no_data_color)

    matched = sum(1 for h in renderer.handles if h.has_data)
    logger.info(
        "%s map: %d regions, %d with %s prices",
        map_config.key, len(renderer), matched, map_config.year_key,
    )
    if matched < len(renderer):
        missing = sorted(h.name for h in renderer.handles if not h.has_data)
        logger.warning("%s map: no price data for %s", map_config.key, ", ".join(missing))

    return MapView(config=map_config, renderer=renderer, legend=build_legend(color_model))


def build_map_figure(view, hover_state=None):
    """Build the figure for one map, legend included.

    Args:
        view (MapView): The map to draw.
        hover_state (HoverState | None): Shape states to draw; idle if None.

    Returns:
        go.Figure: The constructed Plotly figure.
    """
    width, height = ui_config.MAP_SIZES.get(view.config.key, (None, None))
    fig = go.Figure(data=[view.renderer.to_trace(hover_state)])

    fig.update_geos(
        projection_type="mercator",
        center={"lat": view.config.center_lat, "lon": view.config.center_lon},
        fitbounds="locations",
        visible=False,
    )
    fig.update_layout(
        width=width,
        height=height,
        title={
            'text': view.config.title,
            'x': 0.5,
            'xanchor': 'center'
        },
        margin={"r": 0, "t": 45, "l": 0, "b": 0},
        shapes=view.legend.to_shapes(),
        annotations=view.legend.to_annotations(),
        dragmode=False,
    )
    return fig
