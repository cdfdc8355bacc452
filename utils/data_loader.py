"""
Ouidah Flow Map — Data Loading
Fetch the two GeoJSON documents (local files or HTTP) and run the staged
load pipeline: origin -> destinations -> session.
"""
import json
import logging
import os
from dataclasses import dataclass
from typing import Any, Callable

import requests

import config
from utils.data_prep import Origin, build_origin, build_records
from utils.session import MapSession, build_session

logger = logging.getLogger(__name__)


class DataLoadError(ValueError):
    """A GeoJSON document could not be fetched or parsed."""


class EmptyCollectionError(ValueError):
    """A GeoJSON document was fetched but contains no features."""


@dataclass(frozen=True)
class StageResult:
    """
    Outcome of one pipeline stage. A failed result carries the error and
    short-circuits every following stage chained with then().
    """

    stage: str
    value: Any = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def then(self, step: Callable[[Any], "StageResult"]) -> "StageResult":
        if not self.ok:
            return self
        return step(self.value)


@dataclass(frozen=True)
class LoadedData:
    origin: Origin
    destinations: list[dict]


def resolve_source(filename: str, source: str = config.DATA_SOURCE) -> str:
    """Join a document name onto a directory or base URL."""
    if source.startswith(("http://", "https://")):
        return f"{source.rstrip('/')}/{filename}"
    return os.path.join(source, filename)


def fetch_geojson(location: str, timeout: int = config.REQUEST_TIMEOUT) -> dict:
    """
    Load a GeoJSON document from an http(s) URL or a local path.

    Raises DataLoadError on network, I/O or JSON errors.
    """
    if location.startswith(("http://", "https://")):
        logger.info(f"Downloading {location}...")
        try:
            resp = requests.get(location, timeout=timeout)
            resp.raise_for_status()
            return resp.json()
        except requests.RequestException as e:
            raise DataLoadError(f"Failed to download {location}: {e}") from e
        except ValueError as e:
            raise DataLoadError(f"Invalid JSON in {location}: {e}") from e

    logger.info(f"Loading {location}")
    try:
        with open(location, "r", encoding="utf-8") as f:
            return json.load(f)
    except OSError as e:
        raise DataLoadError(f"Failed to read {location}: {e}") from e
    except ValueError as e:
        raise DataLoadError(f"Invalid JSON in {location}: {e}") from e


def load_features(location: str, timeout: int = config.REQUEST_TIMEOUT) -> list[dict]:
    """Fetch a FeatureCollection and return its features; an empty collection is an error."""
    data = fetch_geojson(location, timeout=timeout)
    features = data.get("features") if isinstance(data, dict) else None
    if not features:
        raise EmptyCollectionError(f"No features in {location}")
    return features


def _run_stage(stage: str, fn: Callable[[], Any]) -> StageResult:
    try:
        return StageResult(stage, value=fn())
    except (ValueError, KeyError, TypeError, AttributeError) as e:
        logger.error(f"{stage} failed: {e}")
        return StageResult(stage, error=e)


def load_origin(source: str = config.DATA_SOURCE) -> StageResult:
    """Stage 1: the origin port document."""
    location = resolve_source(config.ORIGIN_FILE, source)
    return _run_stage("origin", lambda: build_origin(load_features(location)))


def load_destinations(origin: Origin, source: str = config.DATA_SOURCE) -> StageResult:
    """Stage 2: the destination ports document. Only runs once the origin is known."""
    location = resolve_source(config.DESTINATIONS_FILE, source)
    return _run_stage(
        "destinations",
        lambda: LoadedData(origin=origin, destinations=load_features(location)),
    )


def prepare_session(loaded: LoadedData) -> StageResult:
    """Stage 3: filter records and compute the scales."""
    def build() -> MapSession:
        records = build_records(loaded.destinations)
        logger.info(
            f"Kept {len(records)}/{len(loaded.destinations)} destination ports "
            f"with Point geometry and numeric volume"
        )
        return build_session(loaded.origin, records)

    return _run_stage("session", build)


def run_pipeline(source: str = config.DATA_SOURCE) -> tuple[StageResult, StageResult]:
    """
    Run every stage in order.

    Returns (origin_result, final_result). The origin result is kept apart so
    the caller can still place the origin marker when a later stage fails.
    """
    origin_result = load_origin(source)
    final = (
        origin_result
        .then(lambda origin: load_destinations(origin, source))
        .then(prepare_session)
    )
    return origin_result, final
