"""
Tests for the release source registry and logger setup.
"""

import logging

import pytest

import animesources.release_sources as release_sources
from animesources.core.logger import setup_logger
from animesources.release_sources import get_source, list_sources, register_source


class TestRegistry:
    """Tests for register_source / get_source / list_sources."""

    @pytest.fixture(autouse=True)
    def _isolated_registry(self, monkeypatch):
        monkeypatch.setattr(release_sources, "_SOURCES", {})

    def _make_source_class(self):
        class DummySource:
            name = "dummy"

            async def query(self, request=None, **options):
                return ""

            async def get_items(self, url):
                return []

            def normalize(self, items):
                return []

            async def single(self, request=None, **options):
                return []

            batch = single
            movie = single

            async def test(self):
                return True

        return DummySource

    def test_register_and_get(self):
        cls = register_source("dummy")(self._make_source_class())
        assert isinstance(get_source("dummy"), cls)
        assert list_sources() == ["dummy"]

    def test_duplicate_name_rejected(self):
        register_source("dummy")(self._make_source_class())
        with pytest.raises(ValueError):
            register_source("dummy")(self._make_source_class())

    def test_non_conforming_class_rejected(self):
        class NotASource:
            pass

        with pytest.raises(TypeError):
            register_source("broken")(NotASource)
        assert list_sources() == []

    def test_unknown_source(self):
        with pytest.raises(KeyError):
            get_source("missing")


class TestSetupLogger:
    """Tests for setup_logger."""

    def test_returns_named_logger(self):
        logger = setup_logger("animesources.tests")
        assert logger.name == "animesources.tests"

    def test_root_configured_once(self):
        setup_logger("animesources.a")
        setup_logger("animesources.b")
        root = logging.getLogger("animesources")
        assert len(root.handlers) == 1
