from __future__ import annotations

import json
import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from launchview import config


class ConfigBehaviorTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.config_path = Path(self._tmp.name) / "nested" / "config.json"
        patcher = mock.patch("launchview.config.CONFIG_PATH", self.config_path)
        patcher.start()
        self.addCleanup(patcher.stop)
        self.addCleanup(self._tmp.cleanup)
        env = mock.patch.dict(os.environ)
        env.start()
        self.addCleanup(env.stop)
        os.environ.pop(config.CDN_URL_ENV, None)

    def test_missing_file_loads_empty_config_and_defaults(self) -> None:
        self.assertEqual(config.load_config(), {})
        self.assertEqual(config.load_cdn_url(), config.DEFAULT_CDN_URL)
        self.assertFalse(config.load_use_local_time())
        self.assertIsNone(config.load_theme_name())

    def test_malformed_or_non_object_config_is_ignored(self) -> None:
        self.config_path.parent.mkdir(parents=True)
        for text in ("{not json", "[1, 2]", '"string"'):
            self.config_path.write_text(text, encoding="utf-8")
            self.assertEqual(config.load_config(), {})

    def test_preferences_round_trip_through_one_file(self) -> None:
        config.save_use_local_time(True)
        config.save_theme_name("plain")
        config.save_cdn_url("https://mirror.example/data/")

        saved = json.loads(self.config_path.read_text(encoding="utf-8"))
        self.assertEqual(saved, {"local_time": True, "theme": "plain", "cdn_url": "https://mirror.example/data/"})
        self.assertTrue(config.load_use_local_time())
        self.assertEqual(config.load_theme_name(), "plain")
        self.assertEqual(config.load_cdn_url(), "https://mirror.example/data")

    def test_non_boolean_local_time_means_utc(self) -> None:
        config.save_config({"local_time": "yes"})
        self.assertFalse(config.load_use_local_time())

    def test_blank_values_are_not_saved(self) -> None:
        config.save_theme_name("   ")
        config.save_cdn_url("")
        self.assertEqual(config.load_config(), {})

    def test_environment_overrides_config_file(self) -> None:
        config.save_cdn_url("https://from-config.example")
        with mock.patch.dict(os.environ, {config.CDN_URL_ENV: "https://from-env.example//"}):
            self.assertEqual(config.load_cdn_url(), "https://from-env.example")
        self.assertEqual(config.load_cdn_url(), "https://from-config.example")

    def test_unwritable_location_does_not_raise(self) -> None:
        blocker = Path(self._tmp.name) / "blocker"
        blocker.write_text("", encoding="utf-8")
        with mock.patch("launchview.config.CONFIG_PATH", blocker / "config.json"):
            config.save_use_local_time(True)
            self.assertFalse(config.load_use_local_time())


if __name__ == "__main__":
    unittest.main()
