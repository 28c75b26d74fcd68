"""Deterministic random number generation with isolated streams.

Every consumer of randomness in map generation (noise seeding, the drunk
walker, per-iteration parameter variety) draws from its own named stream
derived from one master seed. The provider is created once per logical run
and handed to whoever needs it, so:

1. A run is fully reproducible from its master seed
2. Consuming more values in one stream never shifts another stream
3. Back-to-back runs never share a clock-derived seed by accident

Usage:
    provider = RNGProvider(master_seed=1234)
    walker_rng = provider.get("map.drunk_walk")

    heading = walker_rng.choice(list(Heading))

Domain naming convention (hierarchical):
    - "map.noise", "map.drunk_walk"
    - "driver.variety"
"""

from __future__ import annotations

import zlib
from collections.abc import Sequence
from random import Random
from typing import TYPE_CHECKING, TypeAlias, TypeVar

if TYPE_CHECKING:
    from rulepcg.types import RandomSeed

T = TypeVar("T")


class RNGStream:
    """Proxy that delegates to the current RNG for a domain.

    Callers may hold on to a stream across ``RNGProvider.reset()``; each call
    looks up the underlying Random instance afresh.
    """

    def __init__(self, provider: RNGProvider, domain: str) -> None:
        self._provider = provider
        self._domain = domain

    @property
    def domain(self) -> str:
        return self._domain

    def _rng(self) -> Random:
        return self._provider._get_raw(self._domain)

    def random(self) -> float:
        """Return random float in [0.0, 1.0)."""
        return self._rng().random()

    def randint(self, a: int, b: int) -> int:
        """Return random integer N such that a <= N <= b."""
        return self._rng().randint(a, b)

    def choice(self, seq: Sequence[T]) -> T:
        """Return random element from non-empty sequence."""
        return self._rng().choice(seq)


# Functions that take randomness accept either a plain Random or a stream.
RNG: TypeAlias = Random | RNGStream


class RNGProvider:
    """Provides isolated RNG streams for the parts of a generation run.

    Each domain gets its own Random instance derived deterministically
    from the master seed.
    """

    def __init__(self, master_seed: RandomSeed = None) -> None:
        self._master_seed = master_seed
        self._streams: dict[str, Random] = {}
        self._proxies: dict[str, RNGStream] = {}

    @property
    def master_seed(self) -> RandomSeed:
        return self._master_seed

    def get(self, domain: str) -> RNGStream:
        """Get the RNG stream for the named domain.

        Args:
            domain: Hierarchical name like "map.noise" or "map.drunk_walk"

        Returns:
            An RNGStream proxy with the Random methods map generation uses
        """
        if domain not in self._proxies:
            self._proxies[domain] = RNGStream(self, domain)
        return self._proxies[domain]

    def _get_raw(self, domain: str) -> Random:
        if domain not in self._streams:
            if self._master_seed is None:
                self._streams[domain] = Random()
            else:
                # crc32 rather than hash(): hash() of str is salted per process
                derived_seed = zlib.crc32(f"{self._master_seed}:{domain}".encode())
                self._streams[domain] = Random(derived_seed)
        return self._streams[domain]

    def reset(self, master_seed: RandomSeed = None) -> None:
        """Reset all streams with a new master seed.

        Existing RNGStream proxies remain valid and will use the new streams.
        """
        self._master_seed = master_seed
        self._streams.clear()
