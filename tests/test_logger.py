import io
import logging
import unittest

from conwords.utils.logger import configure_logging, get_logger, resolve_level


class LoggerTests(unittest.TestCase):
    def setUp(self) -> None:
        root = logging.getLogger()
        handlers, level = list(root.handlers), root.level

        def restore() -> None:
            root.handlers[:] = handlers
            root.setLevel(level)

        self.addCleanup(restore)

    def test_level_names_resolve(self) -> None:
        self.assertEqual(resolve_level("debug"), logging.DEBUG)
        self.assertEqual(resolve_level(" WARNING "), logging.WARNING)
        self.assertEqual(resolve_level(logging.ERROR), logging.ERROR)
        self.assertEqual(resolve_level("LOUD"), logging.INFO)

    def test_loggers_share_namespace(self) -> None:
        self.assertEqual(get_logger().name, "conwords")
        self.assertEqual(get_logger("cli").name, "conwords.cli")
        self.assertEqual(get_logger("conwords.engine.placer").name, "conwords.engine.placer")

    def test_configure_writes_formatted_records(self) -> None:
        stream = io.StringIO()
        configure_logging("info", stream=stream)
        get_logger("cli").info("seed %s", "ABC")
        get_logger("cli").debug("hidden")
        output = stream.getvalue()
        self.assertIn("| INFO    | conwords.cli | seed ABC", output)
        self.assertNotIn("hidden", output)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
