import logging

import numpy as np
import pytest
from loguru import logger

from container_models import Pixel, Raster
from settings import get_settings


class PropagateHandler(logging.Handler):
    """Handler that propagates loguru records to standard logging."""

    def emit(self, record: logging.LogRecord) -> None:
        logging.getLogger(record.name).handle(record)


@pytest.fixture
def caplog(caplog):
    """Fixture to enable caplog to capture loguru logs."""
    handler_id = logger.add(PropagateHandler(), format="{message}")
    yield caplog
    logger.remove(handler_id)


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make every test read settings from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def single_pixel_raster() -> Raster:
    return Raster.from_pixels(1, 1, [Pixel(200, 100, 50, 255)])


@pytest.fixture
def gradient_raster() -> Raster:
    """A 16x16 raster covering every channel value in each channel."""
    values = np.arange(256, dtype=np.uint8).reshape(16, 16)
    data = np.stack(
        [values, values[::-1], values.T, np.full_like(values, 200)], axis=-1
    )
    return Raster(data=data)
