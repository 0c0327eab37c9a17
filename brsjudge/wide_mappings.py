"""Lane mappings for PMS 9-key and DP 14-key play."""

from __future__ import annotations

import random
from dataclasses import dataclass

from brsjudge.options import RandomOption

_PMS_LANE_COUNT = 9


def _shuffled(lanes: list[int], rng: random.Random) -> list[int]:
    """Fisher-Yates shuffle driven by the given generator."""
    for i in reversed(range(1, len(lanes))):
        j = rng.randint(0, i)
        lanes[i], lanes[j] = lanes[j], lanes[i]
    return lanes


@dataclass(frozen=True)
class LaneMapping9Key:
    """Mapping of PMS lanes 0-8 to new lanes."""

    map: tuple[int, ...] = tuple(range(_PMS_LANE_COUNT))

    @classmethod
    def identity(cls) -> LaneMapping9Key:
        """Mapping that leaves every lane in place."""
        return cls()

    @classmethod
    def mirror(cls) -> LaneMapping9Key:
        """Key1 <-> Key9, Key2 <-> Key8, Key3 <-> Key7, Key4 <-> Key6, Key5 stays."""
        return cls((8, 7, 6, 5, 4, 3, 2, 1, 0))

    @classmethod
    def random(cls, seed: int) -> LaneMapping9Key:
        """Seeded Fisher-Yates shuffle of the nine lanes."""
        rng = random.Random(seed)
        return cls(tuple(_shuffled(list(range(_PMS_LANE_COUNT)), rng)))

    @classmethod
    def rotate_random(cls, seed: int) -> LaneMapping9Key:
        """Seeded rotation of the nine lanes by a random offset."""
        rng = random.Random(seed)
        offset = rng.randrange(_PMS_LANE_COUNT)
        return cls(
            tuple((lane + offset) % _PMS_LANE_COUNT for lane in range(_PMS_LANE_COUNT))
        )

    @classmethod
    def for_option(cls, option: RandomOption, seed: int) -> LaneMapping9Key:
        """Mapping for an option; S-RANDOM and H-RANDOM are per-note, so identity."""
        if option is RandomOption.MIRROR:
            return cls.mirror()
        if option is RandomOption.RANDOM:
            return cls.random(seed)
        if option is RandomOption.R_RANDOM:
            return cls.rotate_random(seed)
        return cls.identity()

    def transform(self, lane: int) -> int:
        """New lane for a PMS lane; out-of-range lanes are unchanged."""
        if 0 <= lane < _PMS_LANE_COUNT:
            return self.map[lane]
        return lane


@dataclass(frozen=True)
class LaneMappingDp:
    """Per-side lane mappings for DP play.

    ``p1_map`` index 0 is the P1 scratch and 1-7 are Key1-Key7;
    ``p2_map`` indices 0-6 are Key8-Key14 and 7 is the P2 scratch.
    """

    p1_map: tuple[int, ...] = (0, 1, 2, 3, 4, 5, 6, 7)
    p2_map: tuple[int, ...] = (0, 1, 2, 3, 4, 5, 6, 7)

    @classmethod
    def identity(cls) -> LaneMappingDp:
        """Mapping that leaves both sides unchanged."""
        return cls()

    @classmethod
    def mirror(cls) -> LaneMappingDp:
        """Both sides mirrored independently; scratches stay in place."""
        return cls(
            p1_map=(0, 7, 6, 5, 4, 3, 2, 1),
            p2_map=(6, 5, 4, 3, 2, 1, 0, 7),
        )

    @classmethod
    def random(cls, seed: int) -> LaneMappingDp:
        """Seeded shuffle of each side's keys; scratches stay in place."""
        rng = random.Random(seed)
        p1_keys = _shuffled(list(range(1, 8)), rng)
        p2_keys = _shuffled(list(range(0, 7)), rng)
        return cls(p1_map=(0, *p1_keys), p2_map=(*p2_keys, 7))