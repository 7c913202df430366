import pytest

from config.page_config import PageConfig
from services.pagination.geometry import capacity_px, fits, height_mm, px_per_mm, px_to_mm


def test_density_follows_content_width(page_config):
    assert px_per_mm(186, page_config) == pytest.approx(1.0)
    assert px_per_mm(744, page_config) == pytest.approx(4.0)


def test_density_requires_pixels(page_config):
    with pytest.raises(ValueError):
        px_per_mm(0, page_config)


def test_height_scales_with_width(page_config):
    # Same aspect ratio prints at the same height regardless of oversampling
    assert height_mm(186, 100, page_config) == pytest.approx(100.0)
    assert height_mm(372, 200, page_config) == pytest.approx(100.0)
    assert px_to_mm(50, 2.0) == pytest.approx(25.0)


def test_capacity_rounds_down():
    assert capacity_px(10.0, 1.5) == 15
    assert capacity_px(10.0, 1.55) == 15
    assert capacity_px(249.0, 1240 / 186) == 1660


def test_capacity_absorbs_float_noise():
    # 0.29 * 100 is 28.999999999999996 in binary floating point
    assert capacity_px(0.29, 100.0) == 29


def test_capacity_of_no_space_is_zero():
    assert capacity_px(0.0, 5.0) == 0
    assert capacity_px(-3.0, 5.0) == 0


def test_fits_treats_equality_as_fitting():
    assert fits(104.0, 145.0, 249.0)
    assert fits(0.1 + 0.2, 248.7, 249.0)
    assert not fits(104.0, 145.01, 249.0)


def test_non_default_geometry():
    letter = PageConfig(page_width_mm=215.9, page_height_mm=279.4, margin_mm=10)
    assert px_per_mm(1959, letter) == pytest.approx(10.0)
