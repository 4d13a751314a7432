from __future__ import annotations

import pytest

from payroll_system.payroll.layout import A4, PageGeometry, band_for, page_bands, paginate


def test_three_equal_bands_fit_the_page():
    bands = page_bands()

    assert len(bands) == 3
    heights = {round(b.outer.height, 6) for b in bands}
    assert len(heights) == 1
    assert bands[0].outer.y == A4.margin
    assert bands[-1].outer.bottom == pytest.approx(A4.height - A4.margin)
    for upper, lower in zip(bands, bands[1:]):
        assert lower.outer.y - upper.outer.bottom == pytest.approx(A4.section_gap)


def test_bands_are_horizontally_symmetric():
    band = band_for(0)
    assert band.outer.x == A4.margin
    assert band.outer.right == pytest.approx(A4.width - A4.margin)


@pytest.mark.parametrize("slot", [0, 1, 2])
def test_regions_stay_inside_band_and_do_not_overlap(slot):
    band = band_for(slot)

    for region in band.regions:
        assert region.x >= band.outer.x
        assert region.right <= band.outer.right + 1e-9
        assert region.y >= band.outer.y
        assert region.bottom <= band.outer.bottom + 1e-9

    for upper, lower in zip(band.regions, band.regions[1:]):
        assert upper.bottom <= lower.y + 1e-9


def test_columns_split_the_band():
    band = band_for(1)
    assert band.left_column_x < band.right_column_x
    assert band.right_column_x + band.column_width <= band.outer.right


@pytest.mark.parametrize("slot", [-1, 3])
def test_bad_slot_rejected(slot):
    with pytest.raises(ValueError):
        band_for(slot)


def test_custom_geometry_section_height():
    geometry = PageGeometry(height=200, margin=10, section_gap=0, sections_per_page=2)
    assert geometry.section_height == 90
    assert len(page_bands(geometry)) == 2


def test_paginate():
    assert paginate([1, 2, 3, 4, 5, 6, 7]) == [[1, 2, 3], [4, 5, 6], [7]]
    assert paginate([]) == []
    assert paginate("abcd", per_page=2) == [["a", "b"], ["c", "d"]]
