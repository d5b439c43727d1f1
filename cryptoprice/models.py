# cryptoprice/models.py
from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class PricePoint:
    timestamp: int  # milliseconds since epoch
    price: float


PriceSeries = List[PricePoint]


@dataclass
class Dataset:
    asset_id: str
    series: PriceSeries = field(default_factory=list)

    @property
    def timestamps(self) -> List[int]:
        return [p.timestamp for p in self.series]

    @property
    def prices(self) -> List[float]:
        return [p.price for p in self.series]
