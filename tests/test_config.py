import logging
import os
import unittest

from config import logging_config
from config.config import Config


class TestConfig(unittest.TestCase):
    def test_config_defaults(self):
        self.assertEqual(Config.PROMETHEUS_QUERY_URL, "http://127.0.0.1:9090/api/v1/query")
        self.assertEqual(Config.INSTANCE, "default")
        self.assertEqual(Config.TAGS, "")
        self.assertEqual(Config.TIMEOUT_WARNING, 5.0)
        self.assertEqual(Config.TIMEOUT_CRITICAL, 30.0)
        self.assertIsNone(Config.REQUEST_TIMEOUT)

    def test_config_env_override(self):
        os.environ["PROBE_INSTANCE"] = "web1"
        os.environ["PROBE_REQUEST_TIMEOUT"] = "2.5"
        # Reload config class
        import importlib

        import config.config as config_mod

        try:
            importlib.reload(config_mod)
            self.assertEqual(config_mod.Config.INSTANCE, "web1")
            self.assertEqual(config_mod.Config.REQUEST_TIMEOUT, 2.5)
        finally:
            del os.environ["PROBE_INSTANCE"]
            del os.environ["PROBE_REQUEST_TIMEOUT"]
            importlib.reload(config_mod)


class TestLoggingConfig(unittest.TestCase):
    def test_logging_setup(self):
        # Should not raise
        try:
            logging_config.setup_logging()
        except Exception as e:
            self.fail(f"setup_logging() raised {e}")
        logger = logging.getLogger()
        self.assertTrue(logger.hasHandlers())

    def test_console_handler_uses_stderr(self):
        console = logging_config.LOGGING_CONFIG["handlers"]["console"]
        self.assertEqual(console["stream"], "ext://sys.stderr")


if __name__ == "__main__":
    unittest.main()
