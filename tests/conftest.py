"""Shared fixtures for tileset dissector tests."""

import pytest

from fixtures.create_test_data import create_test_tileset


@pytest.fixture
def make_tileset(tmp_path):
    """Factory: make_tileset(name, grid_size, tile_size) -> Path in tmp_path."""
    def _make(name="source.png", grid_size=(2, 1), tile_size=48):
        return create_test_tileset(tmp_path / name, grid_size=grid_size, tile_size=tile_size)
    return _make
