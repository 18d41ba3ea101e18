from __future__ import annotations
import hashlib

class RngManager:
    """
    Single source of truth for randomness.
    Creates named, order-independent child seeds/streams by hashing:
      child_seed(name)       -> stable int seed

    Because seeds depend only on (root seed, name), candidates evaluated in
    parallel get the same seeds regardless of completion order.
    """
    def __init__(self, seed: int | None):
        self._root = 0 if seed is None else int(seed) & 0xFFFFFFFF

    def _mix(self, name: str) -> int:
        # Stable across runs and Python versions
        h = hashlib.sha256(f"{self._root}:{name}".encode("utf-8")).digest()
        # 31 bits: valid for every sklearn random_state and numpy seed
        return int.from_bytes(h[:4], "little", signed=False) & 0x7FFFFFFF

    def child_seed(self, name: str) -> int:
        return self._mix(name)
