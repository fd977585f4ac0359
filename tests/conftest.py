"""Test configuration and fixtures for dirclip."""

import pytest

from dirclip.cli.signal_handler import signal_handler


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


@pytest.fixture(autouse=True)
def reset_signal_handler():
    """Make sure a signal recorded by one test never leaks into the next."""
    signal_handler.reset()
    yield
    signal_handler.reset()


@pytest.fixture
def sample_project(tmp_path):
    """Create the small project used throughout the tests.

    Layout:
        a.js           "1"
        b.txt          "hello"
        node_modules/
            x.js
        src/
            main.py
            util/
                helpers.py
    """
    (tmp_path / "a.js").write_text("1")
    (tmp_path / "b.txt").write_text("hello")
    (tmp_path / "node_modules").mkdir()
    (tmp_path / "node_modules" / "x.js").write_text("module.exports = 1;\n")
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "main.py").write_text("print('hi')\n")
    (tmp_path / "src" / "util").mkdir()
    (tmp_path / "src" / "util" / "helpers.py").write_text("def helper():\n    pass\n")
    return tmp_path
