import pytest

from colors_api.domain.colors import Palette
from colors_api.services.palette import PaletteServiceImpl

PRIMARY = "#3b82f6"
SECONDARY = "#10b981"
FIXED_TIMESTAMP = "2024-06-01T12:00:00.000Z"


@pytest.fixture
def palette_service() -> PaletteServiceImpl:
    return PaletteServiceImpl(clock=lambda: FIXED_TIMESTAMP)


@pytest.fixture
def palette(palette_service: PaletteServiceImpl) -> Palette:
    return palette_service.generate_complete_color_system(PRIMARY, SECONDARY)
