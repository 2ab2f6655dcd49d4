import json
import os
import tempfile
import unittest
from unittest.mock import patch

from user_browser.config import DEFAULT_CONFIG, load_config, save_config, validate_config
from user_browser.di import build_container
from user_browser.errors import ConfigError
from user_browser.services.gateway import HttpUserGateway
from .fakes import FakeGateway


class TestConfig(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.config_file = os.path.join(self.tmp.name, "config.json")
        env = {k: v for k, v in os.environ.items() if not k.startswith("USER_BROWSER_")}
        self.env = patch.dict(os.environ, env, clear=True)
        self.env.start()

    def tearDown(self):
        self.env.stop()
        self.tmp.cleanup()

    def test_defaults_without_file(self):
        config = load_config(self.config_file)
        self.assertEqual(config, DEFAULT_CONFIG)
        self.assertIsNot(config["ui"], DEFAULT_CONFIG["ui"])

    def test_file_overrides_single_keys(self):
        with open(self.config_file, "w") as f:
            json.dump({"ui": {"per_page": 5}}, f)

        config = load_config(self.config_file)

        self.assertEqual(config["ui"]["per_page"], 5)
        self.assertEqual(config["ui"]["fetch_delay"], DEFAULT_CONFIG["ui"]["fetch_delay"])
        self.assertEqual(DEFAULT_CONFIG["ui"]["per_page"], 3)

    def test_environment_overrides(self):
        os.environ["USER_BROWSER_BASE_URL"] = "http://localhost:8000/"
        os.environ["USER_BROWSER_PER_PAGE"] = "4"
        os.environ["USER_BROWSER_FETCH_DELAY"] = "0"

        config = load_config(self.config_file)

        self.assertEqual(config["service"]["base_url"], "http://localhost:8000/")
        self.assertEqual(config["ui"]["per_page"], 4)
        self.assertEqual(config["ui"]["fetch_delay"], 0.0)

    def test_non_numeric_environment_value(self):
        os.environ["USER_BROWSER_PER_PAGE"] = "three"
        with self.assertRaises(ConfigError):
            load_config(self.config_file)

    def test_validate_rejects_bad_values(self):
        for ui in ({"per_page": 0}, {"per_page": "3"}, {"per_page": 3, "fetch_delay": -1}):
            with self.subTest(ui=ui):
                with self.assertRaises(ConfigError):
                    validate_config({"service": {"base_url": "http://x/"}, "ui": ui})

    def _write(self, content):
        with open(self.config_file, "w") as f:
            json.dump(content, f)

    def test_file_must_hold_an_object(self):
        self._write([1, 2])
        with self.assertRaises(ConfigError):
            load_config(self.config_file)

    def test_section_must_stay_an_object(self):
        for content in ({"ui": 5}, {"service": "http://x/"}, {"logging": None}):
            with self.subTest(content=content):
                self._write(content)
                with self.assertRaises(ConfigError):
                    load_config(self.config_file)

    def test_unknown_log_level(self):
        self._write({"logging": {"level": "VERBOSE"}})
        with self.assertRaises(ConfigError):
            load_config(self.config_file)

    def test_log_level_is_case_insensitive(self):
        self._write({"logging": {"level": "debug"}})
        self.assertEqual(load_config(self.config_file)["logging"]["level"], "debug")

    def test_save_then_load(self):
        config = load_config(self.config_file)
        config["ui"]["per_page"] = 6
        self.assertTrue(save_config(config, self.config_file))
        self.assertEqual(load_config(self.config_file)["ui"]["per_page"], 6)


class TestContainer(unittest.TestCase):
    def test_builds_http_gateway_from_config(self):
        container = build_container({
            "service": {"base_url": "http://localhost:9000/", "resource": "people", "timeout": 2},
            "ui": {"per_page": 4, "fetch_delay": 0},
        })

        self.assertIsInstance(container.gateway, HttpUserGateway)
        self.assertEqual(container.gateway.url, "http://localhost:9000/people")
        self.assertEqual(container.fetch_controller.page_size, 4)
        self.assertIs(container.fetch_controller, container.fetch_controller)

    def test_uses_injected_gateway(self):
        gateway = FakeGateway()
        container = build_container({"ui": {"per_page": 3}}, gateway)
        self.assertIs(container.gateway, gateway)


if __name__ == "__main__":
    unittest.main()
