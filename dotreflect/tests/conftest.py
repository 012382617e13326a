"""Unit tests configuration file."""

import logging

import pytest
from family import Child, Grandchild, Parent


def pytest_configure(config):
    """Disable verbose output when running tests."""
    terminal = config.pluginmanager.getplugin("terminal")
    if terminal:
        terminal.TerminalReporter.showfspath = False


@pytest.fixture
def family_tree():
    """A Parent whose child and grandchild are both assigned."""
    return Parent(
        parent_string="hail hydra",
        child=Child(child_string="testChildString", grandchild=Grandchild()),
    )


@pytest.fixture
def debug_log(caplog):
    """Capture dotreflect debug logging."""
    caplog.set_level(logging.DEBUG, logger="dotreflect")
    return caplog
