"""
Ouidah Flow Map — Port Clustering
K-means grouping of destination ports and per-cluster aggregation.
"""
import logging
from typing import Callable

import numpy as np
import pandas as pd
from sklearn.cluster import KMeans

import config

logger = logging.getLogger(__name__)

Clusterer = Callable[[np.ndarray, int], np.ndarray]


def assign_clusters(
    points: np.ndarray,
    k: int,
    random_state: int = config.KMEANS_RANDOM_STATE,
) -> np.ndarray:
    """
    K-means over (lon, lat) positions. Returns one cluster label per point.

    k is capped at the number of points; a fixed random_state keeps repeated
    renders of the same data identical.
    """
    points = np.asarray(points, dtype=float)
    n_points = len(points)
    if n_points == 0:
        return np.array([], dtype=int)

    k = max(1, min(int(k), n_points))
    if k == 1:
        return np.zeros(n_points, dtype=int)

    model = KMeans(n_clusters=k, n_init=10, random_state=random_state)
    return model.fit_predict(points)


def aggregate_clusters(
    records: pd.DataFrame,
    k: int,
    clusterer: Clusterer = assign_clusters,
) -> pd.DataFrame:
    """
    Group records into k clusters and aggregate each one.

    Returns one row per non-empty cluster: cluster, lon, lat (centroid = mean
    of member positions), volume (sum), port_count, members (names, largest first).
    """
    columns = ["cluster", "lon", "lat", "volume", "port_count", "members"]
    if records.empty:
        return pd.DataFrame(columns=columns)

    labels = clusterer(records[["lon", "lat"]].to_numpy(), k)
    df = records.assign(cluster=labels).sort_values("volume", ascending=False)

    grouped = df.groupby("cluster", sort=True)
    clusters = grouped.agg(
        lon=("lon", "mean"),
        lat=("lat", "mean"),
        volume=("volume", "sum"),
        port_count=("name", "size"),
        members=("name", list),
    ).reset_index()

    logger.debug(f"Aggregated {len(records)} ports into {len(clusters)} clusters (k={k})")
    return clusters[columns]
