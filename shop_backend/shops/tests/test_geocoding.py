# shops/tests/test_geocoding.py

import json
from unittest import mock
from urllib.error import HTTPError, URLError

from django.test import SimpleTestCase, override_settings

from shops.services.exceptions import GeocodingError
from shops.services.geocoding import geocode_address

GEOCODING_ON = {
    "ENABLED": True,
    "API_KEY": "test-key",
    "BASE_URL": "https://geocoder.test/json",
    "TIMEOUT_SECONDS": 3,
    "GEOHASH_PRECISION": 9,
}


def _http_body(payload) -> mock.MagicMock:
    raw = payload if isinstance(payload, (bytes, str)) else json.dumps(payload)
    if isinstance(raw, str):
        raw = raw.encode("utf-8")
    cm = mock.MagicMock()
    cm.__enter__.return_value.read.return_value = raw
    return cm


@override_settings(GEOCODING=GEOCODING_ON)
class GeocodeAddressTests(SimpleTestCase):
    """
    GUARANTEES:
    - First result's geometry.location is used
    - Every failure mode surfaces as GeocodingError
    """

    @mock.patch("shops.services.geocoding.urlopen")
    def test_success_returns_coordinates_and_geohash(self, urlopen):
        urlopen.return_value = _http_body(
            {
                "status": "OK",
                "results": [
                    {"geometry": {"location": {"lat": 57.64911, "lng": 10.40744}}},
                    {"geometry": {"location": {"lat": 0.0, "lng": 0.0}}},
                ],
            }
        )

        result = geocode_address("Somewhere 1")

        self.assertEqual(result.lat, 57.64911)
        self.assertEqual(result.lng, 10.40744)
        self.assertEqual(result.geohash, "u4pruydqq")

        request = urlopen.call_args.args[0]
        self.assertIn("address=Somewhere+1", request.full_url)
        self.assertIn("key=test-key", request.full_url)
        self.assertTrue(request.full_url.startswith("https://geocoder.test/json?"))

    @mock.patch("shops.services.geocoding.urlopen")
    def test_precision_override(self, urlopen):
        urlopen.return_value = _http_body(
            {"status": "OK", "results": [{"geometry": {"location": {"lat": 42.6, "lng": -5.6}}}]}
        )
        self.assertEqual(geocode_address("x", precision=5).geohash, "ezs42")

    @mock.patch("shops.services.geocoding.urlopen")
    def test_non_ok_status_includes_error_message(self, urlopen):
        urlopen.return_value = _http_body(
            {"status": "REQUEST_DENIED", "error_message": "API key invalid", "results": []}
        )

        with self.assertRaises(GeocodingError) as ctx:
            geocode_address("Somewhere 1")

        self.assertIn("REQUEST_DENIED", str(ctx.exception))
        self.assertIn("API key invalid", str(ctx.exception))

    @mock.patch("shops.services.geocoding.urlopen")
    def test_zero_results(self, urlopen):
        urlopen.return_value = _http_body({"status": "ZERO_RESULTS", "results": []})

        with self.assertRaises(GeocodingError) as ctx:
            geocode_address("Nowhere")

        self.assertIn("ZERO_RESULTS", str(ctx.exception))

    @mock.patch("shops.services.geocoding.urlopen")
    def test_non_json_body(self, urlopen):
        urlopen.return_value = _http_body("<html>oops</html>")

        with self.assertRaises(GeocodingError):
            geocode_address("Somewhere 1")

    @mock.patch("shops.services.geocoding.urlopen")
    def test_http_error(self, urlopen):
        urlopen.side_effect = HTTPError("https://geocoder.test/json", 500, "boom", {}, None)

        with self.assertRaises(GeocodingError) as ctx:
            geocode_address("Somewhere 1")

        self.assertIn("500", str(ctx.exception))

    @mock.patch("shops.services.geocoding.urlopen")
    def test_network_error(self, urlopen):
        urlopen.side_effect = URLError("connection refused")

        with self.assertRaises(GeocodingError):
            geocode_address("Somewhere 1")

    @mock.patch("shops.services.geocoding.urlopen")
    def test_blank_address_never_calls_api(self, urlopen):
        with self.assertRaises(GeocodingError):
            geocode_address("   ")
        urlopen.assert_not_called()

    @override_settings(GEOCODING={**GEOCODING_ON, "API_KEY": ""})
    @mock.patch("shops.services.geocoding.urlopen")
    def test_missing_api_key(self, urlopen):
        with self.assertRaises(GeocodingError):
            geocode_address("Somewhere 1")
        urlopen.assert_not_called()
