import io
import logging
from collections.abc import Generator
from pathlib import Path

import pytest

from sqlclause.config import BuilderConfig

here = Path(__file__).parent
root_path = here.parent


@pytest.fixture
def output_stream() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def capture_config(output_stream: io.StringIO) -> BuilderConfig:
    """Builder config writing ``print()``/``debug()`` output to a buffer."""
    return BuilderConfig(output=output_stream)


@pytest.fixture(autouse=True)
def restore_sqlclause_logger() -> Generator[None, None, None]:
    """Undo ``configure_logging`` side effects on the package logger."""
    logger = logging.getLogger("sqlclause")
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
