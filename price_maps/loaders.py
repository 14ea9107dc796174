"""Load price records and region geometries.

The price file and the two geometry files are fetched concurrently. The
geometry loads are gathered together and every load must succeed before
any map is built; a failed load raises DataLoadError.
"""

import json
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path

import geopandas as gpd
import pandas as pd
import requests
from shapely.errors import ShapelyError

from price_maps import map_config as config
from price_maps.exceptions import DataLoadError
from price_maps.renderer import RegionFeature
from price_maps.utils import logging_utils

logger = logging_utils.get_logger(__name__)


@dataclass(frozen=True)
class MapData:
    """Everything the dashboard needs once loading has finished."""
    price_records: list
    england: gpd.GeoDataFrame
    london: gpd.GeoDataFrame

    @property
    def geometries(self):
        """Geometries keyed like map_config.MAPS."""
        return {
            config.ENGLAND_MAP.key: self.england,
            config.LONDON_MAP.key: self.london,
        }


def _is_url(source):
    return str(source).startswith(("http://", "https://"))


def read_json(source):
    """Read a JSON document from a local path or an http(s) URL.

    Args:
        source (str | Path): File path or URL.

    Returns:
        Any: The decoded JSON document.

    Raises:
        DataLoadError: If the source is unreachable or not valid JSON.
    """
    source = str(source)
    try:
        if _is_url(source):
            response = requests.get(source, timeout=config.REQUEST_TIMEOUT_SECONDS)
            response.raise_for_status()
            return response.json()
        with Path(source).open("r", encoding="utf-8") as handle:
            return json.load(handle)
    except (requests.exceptions.RequestException, OSError) as e:
        raise DataLoadError(source, str(e)) from e
    except ValueError as e:
        raise DataLoadError(source, f"invalid JSON: {e}") from e


def load_price_records(source):
    """Load the flat list of price records.

    Raises:
        DataLoadError: If the document is not a JSON array.
    """
    records = read_json(source)
    if not isinstance(records, list):
        raise DataLoadError(str(source), "expected a JSON array of price records")
    logger.info("Loaded %d price records from %s", len(records), source)
    return records


def load_geometry(source):
    """Load a GeoJSON feature collection into a GeoDataFrame.

    Features with no geometry are dropped.

    Raises:
        DataLoadError: If the document is not a feature collection or a
            feature has an unreadable geometry.
    """
    collection = read_json(source)
    if not isinstance(collection, dict) or collection.get("type") != "FeatureCollection":
        raise DataLoadError(str(source), "expected a GeoJSON FeatureCollection")

    try:
        gdf = gpd.GeoDataFrame.from_features(collection.get("features", []))
    except (KeyError, TypeError, ValueError, AttributeError, ShapelyError) as e:
        raise DataLoadError(str(source), f"malformed features: {e}") from e

    if "geometry" not in gdf.columns:
        gdf = gpd.GeoDataFrame({"geometry": []}, geometry="geometry")
    gdf = gdf[gdf.geometry.notna() & ~gdf.geometry.is_empty].reset_index(drop=True)
    logger.info("Loaded %d features from %s", len(gdf), source)
    return gdf


def load_map_data(sources=None):
    """Load the price records and both geometry sets concurrently.

    Args:
        sources (DataSources | None): Input locations. Defaults to
            `map_config.get_data_sources()`.

    Returns:
        MapData: The loaded inputs.

    Raises:
        DataLoadError: If any of the three loads fails.
    """
    sources = sources or config.get_data_sources()
    with ThreadPoolExecutor(max_workers=config.LOAD_WORKERS) as executor:
        prices_future = executor.submit(load_price_records, sources.prices)
        geometry_futures = [
            executor.submit(load_geometry, sources.england_geojson),
            executor.submit(load_geometry, sources.london_geojson),
        ]
        try:
            england, london = [f.result() for f in geometry_futures]
            price_records = prices_future.result()
        except DataLoadError as e:
            logger.error("Map data load failed: %s", e)
            raise
    return MapData(price_records=price_records, england=england, london=london)


def _scalar_properties(row):
    return {
        k: v for k, v in row.items()
        if k != "geometry" and not (pd.api.types.is_scalar(v) and pd.isnull(v))
    }


def to_region_features(gdf, name_selector):
    """Turn GeoDataFrame rows into RegionFeatures named by ``name_selector``.

    Args:
        gdf (gpd.GeoDataFrame): Loaded geometries.
        name_selector (Callable[[dict], str | None]): Picks the join key from
            a feature's properties.

    Returns:
        list[RegionFeature]: Features with a name, in source order.
    """
    features = []
    skipped = 0
    for _, row in gdf.iterrows():
        name = name_selector(_scalar_properties(row))
        if name is None:
            skipped += 1
            continue
        features.append(RegionFeature(name=name, geometry=row.geometry.__geo_interface__))
    if skipped:
        logger.warning("Skipped %d features without a region name", skipped)
    return features
