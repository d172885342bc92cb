import io
import os

# Must be set before namesmith.config settings are first read
os.environ["NAMESMITH_ENV"] = "testing"

import pytest  # noqa: E402
from rich.console import Console  # noqa: E402


def _capture_console() -> tuple[Console, io.StringIO]:
    """Create a Console that writes to a StringIO for test capturing."""
    buf = io.StringIO()
    return Console(file=buf, force_terminal=True, width=120), buf


@pytest.fixture
def captured_console() -> tuple[Console, io.StringIO]:
    return _capture_console()
