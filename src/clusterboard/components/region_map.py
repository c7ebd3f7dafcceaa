from dataclasses import dataclass, field
from typing import Dict, List, Tuple

Position = Tuple[int, int]

@dataclass(slots=True)
class RegionMap:
    """Singleton component: largest region (size >= 3) per kind from the latest scan.

    Holds positions only. Any interaction invalidates every entry, so the map is
    emptied and ``scanned`` drops to False until the next scan.
    """
    regions: Dict[str, List[Position]] = field(default_factory=dict)
    scanned: bool = False

    def replace(self, regions: Dict[str, List[Position]]) -> None:
        self.regions = regions
        self.scanned = True

    def clear(self) -> None:
        self.regions = {}
        self.scanned = False

    def region_for(self, kind: str) -> List[Position] | None:
        return self.regions.get(kind)
