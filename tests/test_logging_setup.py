from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path
import tempfile
import unittest

from app.logging_setup import setup_logging
from config.logging_config import LoggingConfig


class LoggingSetupTests(unittest.TestCase):
    def setUp(self) -> None:
        root = logging.getLogger()
        self._saved_handlers = list(root.handlers)
        self._saved_level = root.level

    def tearDown(self) -> None:
        root = logging.getLogger()
        for handler in list(root.handlers):
            handler.close()
        root.handlers[:] = self._saved_handlers
        root.setLevel(self._saved_level)

    def test_relative_log_file_resolved_against_project_root(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            cfg = LoggingConfig.from_strings(level="DEBUG", log_file="logs/cad.log")
            path = setup_logging(cfg, project_root=Path(tmp))

            self.assertEqual(path, (Path(tmp) / "logs" / "cad.log").resolve())
            self.assertTrue(path.parent.is_dir())
            root = logging.getLogger()
            self.assertEqual(root.level, logging.DEBUG)

            logging.getLogger("console.test").debug("hello")
            for handler in root.handlers:
                handler.flush()
                handler.close()
            self.assertIn("hello", path.read_text(encoding="utf-8"))

    def test_repeated_setup_keeps_single_handler(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            cfg = LoggingConfig.from_strings(log_file=Path(tmp) / "cad.log")
            setup_logging(cfg)
            setup_logging(cfg)
            handlers = logging.getLogger().handlers
            self.assertEqual(len(handlers), 1)
            self.assertIsInstance(handlers[0], logging.handlers.RotatingFileHandler)
            handlers[0].close()


if __name__ == "__main__":
    unittest.main()
