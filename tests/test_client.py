"""HTTP client tests against an in-process ``httpx.MockTransport``."""

from __future__ import annotations

import json
import os
import unittest
from unittest import mock

import httpx

from launchview import client, config

BASE_URL = "https://cdn.example/data"

DOCUMENT = {
    "updatedAt": "2026-02-18T10:00:00Z",
    "launches": [
        {
            "id": "abc-123",
            "name": "Falcon 9 | Starlink",
            "slug": "falcon-9-starlink",
            "status": {"id": 1, "name": "Go for Launch", "abbrev": "Go"},
            "net": "2026-03-01T12:00:00Z",
            "mission": None,
            "rocket": {"name": "Falcon 9 Block 5"},
            "pad": {"name": "SLC-40", "latitude": 28.5, "longitude": -80.5},
        }
    ],
}


def _client(handler) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(handler))


class UpcomingUrlTests(unittest.TestCase):
    def test_explicit_base_url_drops_trailing_slash(self) -> None:
        self.assertEqual(client.upcoming_url(BASE_URL + "/"), f"{BASE_URL}/upcoming.json")

    def test_default_base_url_comes_from_environment(self) -> None:
        with mock.patch.dict(os.environ, {config.CDN_URL_ENV: "https://env.example"}):
            self.assertEqual(client.upcoming_url(), "https://env.example/upcoming.json")


class GetUpcomingLaunchesTests(unittest.TestCase):
    def test_success_decodes_document(self) -> None:
        requested: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requested.append(str(request.url))
            return httpx.Response(200, json=DOCUMENT)

        with _client(handler) as http:
            document = client.get_upcoming_launches(BASE_URL, client=http)

        self.assertEqual(requested, [f"{BASE_URL}/upcoming.json"])
        self.assertEqual(document.updated_at, "2026-02-18T10:00:00Z")
        self.assertEqual(document.launches[0].id, "abc-123")

    def test_http_error_status_is_reported(self) -> None:
        with _client(lambda request: httpx.Response(404)) as http:
            with self.assertRaises(client.FetchError) as ctx:
                client.get_upcoming_launches(BASE_URL, client=http)
        self.assertEqual(str(ctx.exception), "Failed to fetch launch data (HTTP 404)")

    def test_timeout_is_reported_in_milliseconds(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        with _client(handler) as http:
            with self.assertRaises(client.FetchError) as ctx:
                client.get_upcoming_launches(BASE_URL, client=http)
        self.assertEqual(str(ctx.exception), "Request timed out after 10000ms")

    def test_transport_error_is_wrapped(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with _client(handler) as http:
            with self.assertRaises(client.FetchError) as ctx:
                client.get_upcoming_launches(BASE_URL, client=http)
        self.assertIn("connection refused", str(ctx.exception))

    def test_invalid_json_is_reported(self) -> None:
        with _client(lambda request: httpx.Response(200, text="<html>")) as http:
            with self.assertRaises(client.FetchError) as ctx:
                client.get_upcoming_launches(BASE_URL, client=http)
        self.assertTrue(str(ctx.exception).startswith("Invalid launch data"))

    def test_wrong_shape_is_reported(self) -> None:
        payload = json.dumps({"launches": [{"id": "x"}]})
        with _client(lambda request: httpx.Response(200, text=payload)) as http:
            with self.assertRaises(client.FetchError):
                client.get_upcoming_launches(BASE_URL, client=http)


class GetLaunchByIdTests(unittest.TestCase):
    def setUp(self) -> None:
        self.http = _client(lambda request: httpx.Response(200, json=DOCUMENT))
        self.addCleanup(self.http.close)

    def test_matches_id_and_slug(self) -> None:
        by_id = client.get_launch_by_id("abc-123", BASE_URL, client=self.http)
        by_slug = client.get_launch_by_id("falcon-9-starlink", BASE_URL, client=self.http)
        self.assertEqual(by_id, by_slug)
        self.assertEqual(by_id.name, "Falcon 9 | Starlink")

    def test_unknown_key_returns_none(self) -> None:
        self.assertIsNone(client.get_launch_by_id("nope", BASE_URL, client=self.http))


if __name__ == "__main__":
    unittest.main()
