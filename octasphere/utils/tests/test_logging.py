import io
import logging

from octasphere.core.sphere import create_sphere
from octasphere.core.subdivide import create_unit_sphere
from octasphere.utils.logging import (CustomHandler, configure_logger,
                                      get_logger, logger)


def test_logger_file(tmp_path):
    filename = tmp_path / "log.txt"
    _logger = get_logger("octasphere_test_file", filename=filename,
                         force=True)
    _logger.info("A message for file")
    _logger.info("")
    _logger.warning("A warning for file")
    _logger.debug("A debug message")
    for handler in _logger.handlers:
        handler.flush()
        handler.close()
    assert filename.exists()
    with open(filename, "r") as f:
        content = f.read()
    assert "A message for file" in content
    assert "\n\n" in content
    assert "WARNING: A warning for file" in content
    assert "A debug message" not in content


def test_get_logger_reuses_handler():
    stream = io.StringIO()
    first = get_logger("octasphere_test_reuse", force=True)
    first.handlers[0].stream = stream
    second = get_logger("octasphere_test_reuse")
    assert first is second
    assert len(second.handlers) == 1
    second.info("once")
    assert stream.getvalue().count("once") == 1


def test_custom_handler_writes_empty_line():
    stream = io.StringIO()
    handler = CustomHandler(stream=stream)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    _logger = logging.getLogger("octasphere_custom_handler_test")
    _logger.handlers.clear()
    _logger.addHandler(handler)
    _logger.setLevel(logging.INFO)
    _logger.propagate = False
    _logger.info("")
    _logger.info("line")
    assert stream.getvalue() == "\nINFO: line\n"


def test_generation_logging():
    stream = io.StringIO()
    configure_logger(level=logging.DEBUG, stream=stream)
    try:
        create_unit_sphere(2)
        create_sphere(recursion_depth=1)
    finally:
        configure_logger(level=logging.INFO)
    output = stream.getvalue()
    assert "subdivision level 1: 31 vertices, 32 faces" in output
    assert "subdivision level 2: 127 vertices, 128 faces" in output
    assert "INFO: Created sphere with 31 vertices and 32 faces" in output
    assert logger.level == logging.INFO
