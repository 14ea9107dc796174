import json

import pytest

from price_maps import map_config
from price_maps.color_model import ThresholdColorModel
from price_maps.renderer import RegionFeature


def square(x, y, size=1.0):
    """GeoJSON polygon for an axis-aligned square with its corner at (x, y)."""
    return {
        "type": "Polygon",
        "coordinates": [[
            [x, y], [x + size, y], [x + size, y + size], [x, y + size], [x, y],
        ]],
    }


def feature_collection(names, name_property="name"):
    return {
        "type": "FeatureCollection",
        "features": [
            {
                "type": "Feature",
                "properties": {name_property: name},
                "geometry": square(i, 50),
            }
            for i, name in enumerate(names)
        ],
    }


@pytest.fixture
def england_model():
    return ThresholdColorModel.from_config(map_config.ENGLAND_THRESHOLDS)


@pytest.fixture
def london_model():
    return ThresholdColorModel.from_config(map_config.LONDON_THRESHOLDS)


@pytest.fixture
def features():
    return [
        RegionFeature(name="A", geometry=square(0, 50)),
        RegionFeature(name="B", geometry=square(1, 50)),
        RegionFeature(name="C", geometry=square(2, 50)),
    ]


@pytest.fixture
def write_json(tmp_path):
    def _write(filename, payload):
        path = tmp_path / filename
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def make_collection():
    return feature_collection
