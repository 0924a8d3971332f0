from __future__ import annotations
from typing import Dict
from soko_engine.state import Fingerprint, State

class Transposition:
    """Store the best known g(s) by configuration fingerprint (player + sorted boxes).

    Two configurations reached along different paths share an entry, which
    the per-object visited flag cannot do.
    """
    def __init__(self) -> None:
        self.best_g: Dict[Fingerprint, int] = {}

    def seen_better(self, s: State, g: int) -> bool:
        """Records g for s and returns False if it improves on what was seen."""
        key = s.fingerprint()
        old = self.best_g.get(key)
        if old is None or g < old:
            self.best_g[key] = g
            return False
        return True

    def is_stale(self, s: State) -> bool:
        """A shorter route to the same configuration was recorded after s was queued."""
        best = self.best_g.get(s.fingerprint())
        return best is not None and best < len(s.path)

    def __contains__(self, s: State) -> bool:
        return s.fingerprint() in self.best_g

    def __len__(self) -> int:
        return len(self.best_g)
