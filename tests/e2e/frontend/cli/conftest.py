"""Shared fixtures for running the `xtend` command end to end."""

import logging

import click
import pytest
from click.testing import CliRunner

from xtend.entrypoints.cli.main import xtend

# pylint: disable=redefined-outer-name


@click.command(name="log-demo")
def log_demo():
    """Log one record per level on xtend.demo, a few on some.thirdparty."""
    own = logging.getLogger("xtend.demo")
    foreign = logging.getLogger("some.thirdparty")
    own.debug("This is a debug-level test message.")
    own.info("This is an info-level test message.")
    own.warning("This is a warning-level test message.")
    own.error("This is an error-level test message.")
    own.critical("This is a critical-level test message.")
    foreign.debug("This is a debug-level third-party test message.")
    foreign.info("This is an info-level third-party test message.")
    foreign.warning("This is a warning-level third-party test message.")
    # logged after the last WARNING, so only a forced flush writes it
    own.debug("This is a final debug-level test message.")


def _unregister(group: click.Group, name: str) -> None:
    group.commands.pop(name, None)
    # click-extra also files commands under help sections
    sections = [getattr(group, "_default_section", None)]
    sections.extend(getattr(group, "_sections", []))
    for section in sections:
        getattr(section, "commands", {}).pop(name, None)


@pytest.fixture
def registered_log_demo():
    """Make `xtend log-demo` available while the test runs."""
    xtend.add_command(log_demo)
    yield log_demo
    _unregister(xtend, log_demo.name)


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def fs(runner):
    """Run the test inside a fresh temporary working directory."""
    with runner.isolated_filesystem():
        yield
