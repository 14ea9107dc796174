"""Name to price lookup built from flat price records."""

from collections.abc import Mapping

import pandas as pd

from price_maps import map_config as config


def build_price_index(records, year_key, name_key=config.PRICE_NAME_KEY):
    """Build a region name to price mapping for one year column.

    Records that are not mappings, have no name, or have no usable value at
    ``year_key`` are left out. Later records win over earlier ones with the
    same name.

    Args:
        records (Iterable[Mapping]): Flat price records.
        year_key (str): Year column to read prices from (e.g. "2023").
        name_key (str): Field holding the region name.

    Returns:
        dict[str, float]: Region name to price.
    """
    rows = [r for r in records if isinstance(r, Mapping)]
    if not rows:
        return {}

    df = pd.DataFrame.from_records(
        [{"name": r.get(name_key), "value": r.get(year_key)} for r in rows],
        columns=["name", "value"],
    )
    df["value"] = pd.to_numeric(df["value"], errors="coerce")
    df = df.dropna(subset=["name", "value"])
    df["name"] = df["name"].astype(str).str.strip()
    df = df[df["name"] != ""]

    return dict(zip(df["name"], df["value"].astype("float64")))
