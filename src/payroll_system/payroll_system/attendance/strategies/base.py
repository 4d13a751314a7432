from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from ..model import StatsAccumulator


class AttendanceSource(ABC):
    """Strategy Pattern: where a record's attendance figures come from.

    Exactly one source is resolved per record (see ``AttendanceSourceFactory``).
    """

    name: str = "unknown"

    @abstractmethod
    def apply(self, stats: StatsAccumulator) -> None:
        raise NotImplementedError


@dataclass(frozen=True)
class DirectAllowances:
    """Food, uniform and deduction columns of a row without day/OT counts.

    These amounts are added whichever fallback source supplies the counts.
    """

    food: float = 0
    uniform: float = 0
    deduction: float = 0

    def apply(self, stats: StatsAccumulator) -> None:
        stats.food += self.food
        stats.uniform += self.uniform
        stats.deduction += self.deduction
