"""Configuration settings for the house price maps."""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

BASE_DIR = Path(__file__).resolve().parent.parent
APP_DATA_DIR = BASE_DIR / "app_data"
LOG_DIR = BASE_DIR / "logs"

LOG_FILE_BASENAME = "price_maps.log"
LOG_MAX_BYTES = 5 * 1024 * 1024
LOG_BACKUP_COUNT = 5
DEFAULT_LOG_LEVEL = "INFO"

REQUEST_TIMEOUT_SECONDS = 30
LOAD_WORKERS = 3

# name field of the price records
PRICE_NAME_KEY = "Column1"

NO_DATA_COLOR = "#d9d9d9"

LEGEND_HEIGHT_PX = 200
LEGEND_WIDTH_PX = 20
LEGEND_X_OFFSET_PX = 20
LEGEND_Y_OFFSET_PX = 50
LEGEND_TICK_SIZE_PX = 5

TOOLTIP_OFFSET_X = 10
TOOLTIP_OFFSET_Y = -10


@dataclass(frozen=True)
class ThresholdConfig:
    """Breakpoints and colors for a threshold color scale."""
    domain: tuple[float, ...]
    range: tuple[str, ...]


@dataclass(frozen=True)
class MapConfig:
    """Configuration for an individual choropleth map."""
    key: str
    title: str
    year_key: str
    name_property: str
    thresholds: ThresholdConfig
    center_lat: float
    center_lon: float
    no_data_color: str = NO_DATA_COLOR

    def select_name(self, properties):
        """Return the join key from a GeoJSON feature's properties, or None."""
        if not properties:
            return None
        name = properties.get(self.name_property)
        if name is None:
            return None
        return str(name).strip() or None


# between 200k and 550k
ENGLAND_THRESHOLDS = ThresholdConfig(
    domain=(200000, 250000, 300000, 350000, 400000, 450000, 500000, 550000),
    range=(
        "#f7fbff", "#deebf7", "#c6dbef", "#9ecae1", "#6baed6",
        "#4292c6", "#2171b5", "#08519c", "#08306b",
    ),
)

# between 400k and 2m, more steps for the wider spread of borough prices
LONDON_THRESHOLDS = ThresholdConfig(
    domain=(
        400000, 500000, 600000, 700000, 800000, 1000000,
        1200000, 1400000, 1600000, 1800000, 2000000,
    ),
    range=(
        "#eff3ff", "#c6dbef", "#9ecae1", "#6baed6", "#4292c6", "#2171b5",
        "#08519c", "#08306b", "#041945", "#030b1e", "#02050f", "#010204",
    ),
)

ENGLAND_MAP = MapConfig(
    key="england",
    title="Average House Price by Region, 2023",
    year_key="2023",
    name_property="EER13NM",
    thresholds=ENGLAND_THRESHOLDS,
    center_lat=53.0,
    center_lon=0.0,
)

LONDON_MAP = MapConfig(
    key="london",
    title="Average House Price by London Borough, 2017",
    year_key="2017",
    name_property="name",
    thresholds=LONDON_THRESHOLDS,
    center_lat=51.5,
    center_lon=0.0,
)

MAPS = {
    ENGLAND_MAP.key: ENGLAND_MAP,
    LONDON_MAP.key: LONDON_MAP,
}


@dataclass(frozen=True)
class DataSources:
    """Locations of the three input files (paths or http(s) URLs)."""
    prices: str
    england_geojson: str
    london_geojson: str


def get_data_sources():
    """Resolve input locations, letting environment variables override defaults.

    Returns:
        DataSources: Where to read price records and geometries from.
    """
    return DataSources(
        prices=os.getenv("PRICE_MAPS_PRICES", str(APP_DATA_DIR / "combined-data.json")),
        england_geojson=os.getenv("PRICE_MAPS_ENGLAND_GEOJSON", str(APP_DATA_DIR / "england.json")),
        london_geojson=os.getenv("PRICE_MAPS_LONDON_GEOJSON", str(APP_DATA_DIR / "london_boroughs.json")),
    )


def get_log_level():
    """Log level name, overridable with PRICE_MAPS_LOG_LEVEL."""
    return os.getenv("PRICE_MAPS_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()


def get_log_file():
    """Log file path; PRICE_MAPS_LOG_DIR moves the log directory."""
    log_dir = Path(os.getenv("PRICE_MAPS_LOG_DIR", str(LOG_DIR)))
    return log_dir / LOG_FILE_BASENAME
