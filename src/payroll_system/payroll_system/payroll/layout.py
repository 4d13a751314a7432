"""Geometry of the printed payslip sheet.

All measurements are millimetres with the origin at the top-left corner of
the page; the PDF renderer flips them into PDF coordinates. Each A4 page is
split into three equal bands, one payslip per band.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, TypeVar

from ..core.constants import PAYSLIPS_PER_PAGE

T = TypeVar("T")

HEADER_SHARE = 0.18
INFO_SHARE = 0.26
CONTENT_PADDING = 8.0
TABLE_GAP = 2.0
TABLE_HEADER_HEIGHT = 4.0
TABLE_ROW_HEIGHT = 4.0
TABLE_ROWS = 5
NET_PAY_GAP = 2.0
NET_PAY_HEIGHT = 8.0
TOTALS_GAP = 1.0
TOTALS_HEIGHT = 5.0
FOOTER_HEIGHT = 7.0


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2


@dataclass(frozen=True)
class PageGeometry:
    width: float = 210.0
    height: float = 297.0
    margin: float = 8.0
    section_gap: float = 2.0
    sections_per_page: int = PAYSLIPS_PER_PAGE

    @property
    def available_width(self) -> float:
        return self.width - 2 * self.margin

    @property
    def available_height(self) -> float:
        return self.height - 2 * self.margin

    @property
    def section_height(self) -> float:
        gaps = (self.sections_per_page - 1) * self.section_gap
        return (self.available_height - gaps) / self.sections_per_page


A4 = PageGeometry()


@dataclass(frozen=True)
class PayslipBand:
    slot: int
    outer: Rect
    header: Rect
    info: Rect
    table: Rect
    net_pay: Rect
    totals: Rect
    footer: Rect

    @property
    def regions(self) -> list[Rect]:
        return [self.header, self.info, self.table, self.net_pay, self.totals, self.footer]

    @property
    def left_column_x(self) -> float:
        return self.outer.x + CONTENT_PADDING

    @property
    def right_column_x(self) -> float:
        return self.outer.center_x + CONTENT_PADDING

    @property
    def column_width(self) -> float:
        return self.outer.width / 2 - 2 * CONTENT_PADDING


def band_for(slot: int, geometry: PageGeometry = A4) -> PayslipBand:
    """Regions of the ``slot``-th band (0-based) on a page."""
    if not 0 <= slot < geometry.sections_per_page:
        raise ValueError(f"slot must be in [0, {geometry.sections_per_page}), got {slot}")

    h = geometry.section_height
    top = geometry.margin + slot * (h + geometry.section_gap)
    outer = Rect(geometry.margin, top, geometry.available_width, h)

    inner_x = outer.x + CONTENT_PADDING
    inner_w = outer.width - 2 * CONTENT_PADDING

    header = Rect(outer.x, top, outer.width, h * HEADER_SHARE)
    info = Rect(inner_x, header.bottom, inner_w, h * INFO_SHARE)
    table = Rect(
        inner_x,
        info.bottom + TABLE_GAP,
        inner_w,
        TABLE_HEADER_HEIGHT + TABLE_ROWS * TABLE_ROW_HEIGHT,
    )
    net_pay = Rect(inner_x, table.bottom + NET_PAY_GAP, inner_w, NET_PAY_HEIGHT)
    totals = Rect(inner_x, net_pay.bottom + TOTALS_GAP, inner_w, TOTALS_HEIGHT)
    footer = Rect(inner_x, outer.bottom - FOOTER_HEIGHT, inner_w, FOOTER_HEIGHT)

    return PayslipBand(
        slot=slot,
        outer=outer,
        header=header,
        info=info,
        table=table,
        net_pay=net_pay,
        totals=totals,
        footer=footer,
    )


def page_bands(geometry: PageGeometry = A4) -> list[PayslipBand]:
    return [band_for(slot, geometry) for slot in range(geometry.sections_per_page)]


def paginate(items: Sequence[T], per_page: int = PAYSLIPS_PER_PAGE) -> list[list[T]]:
    return [list(items[i:i + per_page]) for i in range(0, len(items), per_page)]
