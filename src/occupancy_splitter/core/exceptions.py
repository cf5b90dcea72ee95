"""Errors raised while resolving clashes."""

from typing import FrozenSet, Iterable


class ClashResolutionError(ValueError):
    """Base class for conditions that prevent a complete resolution."""


class ComponentTooLargeError(ClashResolutionError):
    """A connected component is too large for exhaustive enumeration."""

    def __init__(self, component: Iterable[str], limit: int):
        self.component: FrozenSet[str] = frozenset(component)
        self.limit = limit
        super().__init__(
            f"Component of {len(self.component)} chains "
            f"({', '.join(sorted(self.component))}) exceeds the limit of "
            f"{limit} chains for exhaustive search; reduce the input or raise "
            f"the limit"
        )


class UnresolvableClashError(ClashResolutionError):
    """Chains that must always be kept clash with each other."""

    def __init__(self, chains: Iterable[str]):
        self.chains: FrozenSet[str] = frozenset(chains)
        super().__init__(
            "Always-retained chains clash with each other: "
            + ", ".join(sorted(self.chains))
        )
