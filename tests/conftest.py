"""Pytest configuration and shared fixtures for the nbast test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import json
import logging
import os
from pathlib import Path

import pytest

# Configure Hypothesis for property-based testing
from hypothesis import Phase, Verbosity, settings

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=30)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)

# Load profile from environment or use default
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")
    config.addinivalue_line("markers", "fuzzing: Property-based tests driven by Hypothesis")


SAMPLE_NOTEBOOK = {
    "nbformat": 4,
    "nbformat_minor": 5,
    "metadata": {
        "kernelspec": {"name": "python3", "display_name": "Python 3", "language": "python"},
        "language_info": {"name": "python", "version": "3.11.4"},
    },
    "cells": [
        {
            "cell_type": "markdown",
            "metadata": {},
            "source": ["# Analysis\n", "\n", "Some *notes*."],
        },
        {
            "cell_type": "code",
            "execution_count": 1,
            "metadata": {"tags": ["setup"]},
            "source": ["import math\n", "print(math.pi)"],
            "outputs": [
                {"output_type": "stream", "name": "stdout", "text": ["3.14159", "\n"]},
            ],
        },
        {
            "cell_type": "code",
            "execution_count": 2,
            "metadata": {"tags": ["solution"]},
            "source": "df.head()",
            "outputs": [
                {
                    "output_type": "execute_result",
                    "execution_count": 2,
                    "metadata": {},
                    "data": {
                        "text/plain": ["   a  b\n", "0  1  2"],
                        "text/html": ["<table>", "<tr><td>1</td></tr>", "</table>"],
                    },
                },
                {
                    "output_type": "display_data",
                    "metadata": {},
                    "data": {"image/png": "iVBORw0KGgo=", "text/plain": "<Figure>"},
                },
            ],
        },
        {
            "cell_type": "code",
            "execution_count": 3,
            "metadata": {},
            "source": "1 / 0",
            "outputs": [
                {
                    "output_type": "error",
                    "ename": "ZeroDivisionError",
                    "evalue": "division by zero",
                    "traceback": ["\x1b[0;31mZeroDivisionError\x1b[0m", "division by zero"],
                },
            ],
        },
        {
            "cell_type": "code",
            "execution_count": None,
            "metadata": {},
            "source": [],
            "outputs": [],
        },
        {"cell_type": "raw", "metadata": {}, "source": "raw text"},
    ],
}


@pytest.fixture
def sample_notebook() -> dict:
    """Provide a fresh copy of a small notebook exercising every cell and output type."""
    return json.loads(json.dumps(SAMPLE_NOTEBOOK))


@pytest.fixture
def notebook_file(tmp_path: Path, sample_notebook: dict) -> Path:
    """Write the sample notebook to a temporary ``.ipynb`` file."""
    path = tmp_path / "sample.ipynb"
    path.write_text(json.dumps(sample_notebook), encoding="utf-8")
    return path


@pytest.fixture
def restore_logging():
    """Undo the handler and level changes made by ``configure_logging``."""
    from nbast.logging_utils import ENGINE_LOGGERS, PACKAGE_LOGGER

    root = logging.getLogger()
    handlers = list(root.handlers)
    names = (PACKAGE_LOGGER, *ENGINE_LOGGERS)
    levels = {name: logging.getLogger(name).level for name in names}
    root_level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(root_level)
    for name, level in levels.items():
        logging.getLogger(name).setLevel(level)
    logging.captureWarnings(False)
