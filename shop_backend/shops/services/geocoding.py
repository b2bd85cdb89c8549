# shops/services/geocoding.py
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any
from urllib.error import HTTPError, URLError
from urllib.parse import urlencode
from urllib.request import Request, urlopen

from django.conf import settings

from shops.services import geohash
from shops.services.exceptions import GeocodingError

logger = logging.getLogger("geocoding")

DEFAULT_BASE_URL = "https://maps.googleapis.com/maps/api/geocode/json"


@dataclass(frozen=True)
class GeocodeResult:
    lat: float
    lng: float
    geohash: str


def _geocoding_cfg() -> dict:
    cfg = getattr(settings, "GEOCODING", {}) or {}
    return cfg if isinstance(cfg, dict) else {}


def geocoding_enabled() -> bool:
    return bool(_geocoding_cfg().get("ENABLED"))


def _get_api_key() -> str:
    key = (_geocoding_cfg().get("API_KEY") or "").strip()
    if not key:
        raise GeocodingError(
            "Geocoding API key is not configured. Expected settings.GEOCODING['API_KEY'] "
            "(env GEOCODING_API_KEY)."
        )
    return key


def _safe_preview(text: str, limit: int = 300) -> str:
    text = (text or "").strip()
    if len(text) <= limit:
        return text
    return text[:limit] + " ...(truncated)"


def _request_json(url: str, *, timeout: int) -> dict[str, Any]:
    req = Request(url, headers={"Accept": "application/json"}, method="GET")

    try:
        with urlopen(req, timeout=timeout) as resp:
            raw = resp.read().decode("utf-8", errors="replace")
    except HTTPError as e:
        raise GeocodingError(f"Geocoding API failed with status: {e.code}") from e
    except URLError as e:
        raise GeocodingError(f"Geocoding API unreachable: {e.reason}") from e

    try:
        parsed = json.loads(raw)
    except ValueError as e:
        raise GeocodingError(
            f"Geocoding API returned non-JSON: {_safe_preview(raw)}"
        ) from e

    if not isinstance(parsed, dict):
        raise GeocodingError("Geocoding API returned an unexpected payload")

    return parsed


def fetch_coordinates(address: str) -> tuple[float, float]:
    address = (address or "").strip()
    if not address:
        raise GeocodingError("Address is required for geocoding")

    cfg = _geocoding_cfg()
    base_url = (cfg.get("BASE_URL") or DEFAULT_BASE_URL).strip()
    timeout = int(cfg.get("TIMEOUT_SECONDS") or 15)

    query = urlencode({"address": address, "key": _get_api_key()})
    data = _request_json(f"{base_url}?{query}", timeout=timeout)

    status = data.get("status")
    results = data.get("results") or []
    if status != "OK" or not results:
        detail = data.get("error_message") or "No results found."
        logger.warning(
            "Geocoding returned no usable result",
            extra={"geocode_status": status},
        )
        raise GeocodingError(f"Geocoding failed: {status} - {detail}")

    try:
        location = results[0]["geometry"]["location"]
        lat = float(location["lat"])
        lng = float(location["lng"])
    except (KeyError, TypeError, ValueError) as e:
        raise GeocodingError("Geocoding result is missing geometry.location") from e

    return lat, lng


def geocode_address(address: str, *, precision: int | None = None) -> GeocodeResult:
    """
    Address -> (lat, lng, geohash).
    """
    lat, lng = fetch_coordinates(address)

    if precision is None:
        precision = int(_geocoding_cfg().get("GEOHASH_PRECISION") or geohash.DEFAULT_PRECISION)

    try:
        gh = geohash.encode(lat, lng, precision)
    except ValueError as e:
        raise GeocodingError(f"Geocoder returned invalid coordinates: {e}") from e

    logger.info("Geocoded address", extra={"geohash": gh})
    return GeocodeResult(lat=lat, lng=lng, geohash=gh)
