"""Domain model for a self-consistent selection of chains."""

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Tuple


@dataclass(frozen=True)
class ClashFreeChains:
    """A set of chain ids with no clash between any two of them."""

    chains: FrozenSet[str] = field(default_factory=frozenset)

    @classmethod
    def of(cls, chains: Iterable[str]) -> "ClashFreeChains":
        """Build from an iterable of chain ids; a bare string is rejected."""
        if isinstance(chains, str):
            raise TypeError(
                f"Expected an iterable of chain ids, got the string '{chains}'"
            )
        return cls(frozenset(chains))

    @property
    def size(self) -> int:
        return len(self.chains)

    @property
    def name(self) -> str:
        """Sorted, hyphen-joined chain ids."""
        return "-".join(sorted(self.chains))

    @property
    def sort_key(self) -> Tuple[int, Tuple[str, ...]]:
        """Larger selections first, then lexicographic on sorted chain ids."""
        return -self.size, tuple(sorted(self.chains))

    def contains(self, chain: str) -> bool:
        return chain in self.chains

    def contains_all(self, other: "ClashFreeChains") -> bool:
        return self.chains >= other.chains

    def union(self, other: "ClashFreeChains") -> "ClashFreeChains":
        return ClashFreeChains(self.chains | other.chains)

    def __len__(self) -> int:
        return self.size

    def __iter__(self):
        return iter(sorted(self.chains))
