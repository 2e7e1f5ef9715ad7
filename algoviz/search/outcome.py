from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class SearchOutcome:
    index: Optional[int]
    probes: int

    @property
    def found(self):
        return self.index is not None

    def to_dict(self):
        return {"found": self.found, "index": self.index, "probes": self.probes}
