"""Pytest configuration and fixtures."""

import itertools
from pathlib import Path

import click
import pytest

from module_best_practices import emitter

PROJECT_ROOT = Path(__file__).resolve().parent.parent


class FakePager:
    """Stands in for click.echo_via_pager and records what it was fed."""

    def __init__(self, limit=None, error=None):
        self.limit = limit
        self.error = error
        self.calls = []
        self.chunks = []

    def __call__(self, text_or_generator, color=None):
        self.calls.append({"color": color})
        self.chunks.extend(itertools.islice(text_or_generator, self.limit))
        if self.error is not None:
            raise self.error

    @property
    def text(self):
        return "".join(self.chunks)


@pytest.fixture
def project_root():
    """Repository root, used to run the package in a subprocess."""
    return PROJECT_ROOT


@pytest.fixture
def install_pager(monkeypatch):
    """Factory that swaps the terminal pager for a configurable recorder."""

    def install(limit=None, error=None):
        pager = FakePager(limit=limit, error=error)
        monkeypatch.setattr(click, "echo_via_pager", pager)
        return pager

    return install


@pytest.fixture
def fake_pager(install_pager):
    """Replace the terminal pager with a recorder that reads everything."""
    return install_pager()


@pytest.fixture
def guide_bytes():
    """On-disk contents of the bundled guide."""
    return emitter.DOCUMENT_PATH.read_bytes()


@pytest.fixture
def opened_handles(monkeypatch):
    """Track every handle returned by open_document."""
    handles = []
    real_open = emitter.open_document

    def tracking_open(path=None):
        handle = real_open(path)
        handles.append(handle)
        return handle

    monkeypatch.setattr(emitter, "open_document", tracking_open)
    return handles
