"""Lane options: random/mirror lane mappings for 7-key play."""

from __future__ import annotations

import enum
import random
import time
from dataclasses import dataclass

_KEY_LANES = range(1, 8)
_U64_MASK = (1 << 64) - 1


class RandomOption(enum.Enum):
    """Lane assignment option applied to a chart before play."""

    OFF = "off"
    MIRROR = "mirror"
    RANDOM = "random"
    R_RANDOM = "r_random"
    S_RANDOM = "s_random"
    H_RANDOM = "h_random"

    def display_name(self) -> str:
        """Name shown to the player."""
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES = {
    RandomOption.OFF: "OFF",
    RandomOption.MIRROR: "MIRROR",
    RandomOption.RANDOM: "RANDOM",
    RandomOption.R_RANDOM: "R-RANDOM",
    RandomOption.S_RANDOM: "S-RANDOM",
    RandomOption.H_RANDOM: "H-RANDOM",
}


@dataclass(frozen=True)
class LaneMapping:
    """Mapping of key lanes 1-7 to new lanes; lane 0 (scratch) is unused."""

    map: tuple[int, ...] = (0, 1, 2, 3, 4, 5, 6, 7)

    @classmethod
    def identity(cls) -> LaneMapping:
        """Mapping that leaves every lane in place."""
        return cls()

    @classmethod
    def mirror(cls) -> LaneMapping:
        """Key1 <-> Key7, Key2 <-> Key6, Key3 <-> Key5, Key4 stays."""
        return cls((0, 7, 6, 5, 4, 3, 2, 1))

    @classmethod
    def random(cls, seed: int) -> LaneMapping:
        """Seeded Fisher-Yates shuffle of the seven key lanes."""
        rng = random.Random(seed)
        lanes = list(_KEY_LANES)
        for i in reversed(range(1, len(lanes))):
            j = rng.randint(0, i)
            lanes[i], lanes[j] = lanes[j], lanes[i]
        return cls((0, *lanes))

    @classmethod
    def rotate_random(cls, seed: int) -> LaneMapping:
        """Seeded rotation of the seven key lanes by a random offset."""
        rng = random.Random(seed)
        offset = rng.randrange(7)
        return cls((0, *(((lane - 1 + offset) % 7) + 1 for lane in _KEY_LANES)))

    @classmethod
    def for_option(cls, option: RandomOption, seed: int) -> LaneMapping:
        """Mapping for an option; S-RANDOM and H-RANDOM are per-note, so identity."""
        if option is RandomOption.MIRROR:
            return cls.mirror()
        if option is RandomOption.RANDOM:
            return cls.random(seed)
        if option is RandomOption.R_RANDOM:
            return cls.rotate_random(seed)
        return cls.identity()

    def transform(self, lane: int) -> int:
        """New lane for a key lane; scratch and out-of-range lanes are unchanged."""
        if lane in _KEY_LANES:
            return self.map[lane]
        return lane


def generate_seed() -> int:
    """Seed from the current time in nanoseconds, as an unsigned 64-bit value."""
    return time.time_ns() & _U64_MASK