"""Tabular views of a loaded nodelist using polars."""

import polars as pl

from nodelist.lib.nodelist import Nodelist

SCHEMA = {
    "zone": pl.Int64,
    "network": pl.Int64,
    "node": pl.Int64,
    "kind": pl.Utf8,
    "name": pl.Utf8,
    "location": pl.Utf8,
    "sysop_name": pl.Utf8,
    "phone": pl.Utf8,
    "speed": pl.Int64,
    "flags": pl.List(pl.Utf8),
}


def nodelist_to_df(nodelist: Nodelist) -> pl.DataFrame:
    """
    Flatten a nodelist into one row per entry.

    Parameters
    ----------
    nodelist : Nodelist
        Loaded nodelist

    Returns
    -------
    polars.DataFrame
        DataFrame with columns: zone, network, node, kind, name, location,
        sysop_name, phone, speed, flags. Missing levels are null.
    """
    data = {column: [] for column in SCHEMA}
    for zone, network, node, entry in nodelist.iter_entries():
        data["zone"].append(zone)
        data["network"].append(network)
        data["node"].append(node)
        data["kind"].append(entry.kind.name)
        data["name"].append(entry.name)
        data["location"].append(entry.location)
        data["sysop_name"].append(entry.sysop_name)
        data["phone"].append(entry.phone)
        data["speed"].append(entry.speed)
        data["flags"].append(list(entry.flags))

    return pl.DataFrame(data, schema=SCHEMA)


def get_df_polars(filename: str) -> pl.DataFrame:
    """Load a nodelist file straight into a DataFrame."""
    return nodelist_to_df(Nodelist.from_path(filename))


def filter_by_flag(df: pl.DataFrame, flag: str) -> pl.DataFrame:
    """Rows whose flags contain ``flag`` exactly."""
    return df.filter(pl.col("flags").list.contains(flag))
