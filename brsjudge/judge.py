"""Timing judgment: windows, ranks, results and FAST/SLOW statistics."""

from __future__ import annotations

import copy
import enum
from dataclasses import dataclass, replace

_EXPAND_MULTIPLIER = 1.5


class TimingDirection(enum.Enum):
    """Whether a hit came early, late or on time."""

    FAST = "fast"
    EXACT = "exact"
    SLOW = "slow"

    @classmethod
    def from_timing_diff(cls, timing_diff_ms: float) -> TimingDirection:
        """Classify a timing difference; positive means the press was early."""
        threshold = 1.0
        if timing_diff_ms > threshold:
            return cls.FAST
        if timing_diff_ms < -threshold:
            return cls.SLOW
        return cls.EXACT


class JudgeSystemType(enum.Enum):
    """Judge flavour, affecting timing windows and empty POOR behaviour."""

    BEATORAJA = "beatoraja"
    LR2 = "lr2"


class JudgeRank(enum.Enum):
    """Judge difficulty rank, affecting the size of the timing windows."""

    VERY_EASY = "very_easy"
    EASY = "easy"
    NORMAL = "normal"
    HARD = "hard"
    VERY_HARD = "very_hard"

    @classmethod
    def from_bms_rank(cls, rank: int) -> JudgeRank:
        """Convert a BMS #RANK value; unknown values fall back to EASY."""
        return {
            0: cls.VERY_HARD,
            1: cls.HARD,
            2: cls.NORMAL,
            3: cls.EASY,
        }.get(rank, cls.EASY)


class JudgeResult(enum.Enum):
    """Outcome of judging a single note."""

    PGREAT = "pgreat"
    GREAT = "great"
    GOOD = "good"
    BAD = "bad"
    POOR = "poor"

    def ex_score(self) -> int:
        """EX score contribution of this result."""
        if self is JudgeResult.PGREAT:
            return 2
        if self is JudgeResult.GREAT:
            return 1
        return 0

    def is_combo_break(self) -> bool:
        """True when this result breaks the combo."""
        return self in (JudgeResult.BAD, JudgeResult.POOR)


@dataclass
class TimingStats:
    """Cumulative FAST/SLOW counts during play."""

    fast_count: int = 0
    slow_count: int = 0

    def record(self, judge: JudgeResult, timing_diff_ms: float) -> None:
        """Count a judgment as FAST or SLOW; PGREAT is never counted."""
        if judge is JudgeResult.PGREAT:
            return
        direction = TimingDirection.from_timing_diff(timing_diff_ms)
        if direction is TimingDirection.FAST:
            self.fast_count += 1
        elif direction is TimingDirection.SLOW:
            self.slow_count += 1


_BEATORAJA_SCALE = {
    JudgeRank.VERY_EASY: 1.25,
    JudgeRank.EASY: 1.0,
    JudgeRank.NORMAL: 0.75,
    JudgeRank.HARD: 0.50,
    JudgeRank.VERY_HARD: 0.25,
}

# (pgreat, great, good) per rank; LR2 BAD is a symmetric 200 ms.
_LR2_WINDOWS = {
    JudgeRank.VERY_EASY: (21.0, 60.0, 120.0),
    JudgeRank.EASY: (21.0, 60.0, 120.0),
    JudgeRank.NORMAL: (18.0, 40.0, 100.0),
    JudgeRank.HARD: (15.0, 30.0, 60.0),
    JudgeRank.VERY_HARD: (8.0, 24.0, 40.0),
}


@dataclass(frozen=True)
class _Windows:
    pgreat_window: float
    great_window: float
    good_window: float
    bad_early_window: float
    bad_late_window: float

    def bad_window(self, early: bool) -> float:
        """BAD window for the given timing direction."""
        return self.bad_early_window if early else self.bad_late_window

    def expand(self):
        """Copy with every window widened by 1.5x (EXPAND JUDGE)."""
        return replace(
            self,
            pgreat_window=self.pgreat_window * _EXPAND_MULTIPLIER,
            great_window=self.great_window * _EXPAND_MULTIPLIER,
            good_window=self.good_window * _EXPAND_MULTIPLIER,
            bad_early_window=self.bad_early_window * _EXPAND_MULTIPLIER,
            bad_late_window=self.bad_late_window * _EXPAND_MULTIPLIER,
        )

    def classify(self, time_diff_ms: float) -> JudgeResult | None:
        abs_diff = abs(time_diff_ms)
        if abs_diff <= self.pgreat_window:
            return JudgeResult.PGREAT
        if abs_diff <= self.great_window:
            return JudgeResult.GREAT
        if abs_diff <= self.good_window:
            return JudgeResult.GOOD
        if abs_diff <= self.bad_window(time_diff_ms > 0.0):
            return JudgeResult.BAD
        return None


@dataclass(frozen=True)
class JudgeConfig(_Windows):
    """Timing windows in milliseconds for note presses."""

    pgreat_window: float = 20.0
    great_window: float = 60.0
    good_window: float = 150.0
    bad_early_window: float = 220.0
    bad_late_window: float = 280.0

    @classmethod
    def beatoraja(cls, rank: JudgeRank) -> JudgeConfig:
        """Scale-based windows with an asymmetric BAD (+220 early / -280 late)."""
        scale = _BEATORAJA_SCALE[rank]
        return cls(
            pgreat_window=20.0 * scale,
            great_window=60.0 * scale,
            good_window=150.0 * scale,
            bad_early_window=220.0 * scale,
            bad_late_window=280.0 * scale,
        )

    @classmethod
    def lr2(cls, rank: JudgeRank) -> JudgeConfig:
        """Fixed per-rank windows with a symmetric BAD."""
        pgreat, great, good = _LR2_WINDOWS[rank]
        return cls(
            pgreat_window=pgreat,
            great_window=great,
            good_window=good,
            bad_early_window=200.0,
            bad_late_window=200.0,
        )

    @classmethod
    def for_system(cls, system: JudgeSystemType, rank: JudgeRank) -> JudgeConfig:
        """Windows for the given judge system and rank."""
        if system is JudgeSystemType.LR2:
            return cls.lr2(rank)
        return cls.beatoraja(rank)

    @classmethod
    def normal(cls) -> JudgeConfig:
        return cls.beatoraja(JudgeRank.EASY)

    @classmethod
    def easy(cls) -> JudgeConfig:
        return cls.beatoraja(JudgeRank.VERY_EASY)

    @classmethod
    def hard(cls) -> JudgeConfig:
        return cls.beatoraja(JudgeRank.HARD)

    def bad_window(self, early: bool) -> float:
        """BAD window for the given timing direction."""
        return super().bad_window(early)

    def max_bad_window(self) -> float:
        """The wider of the two BAD windows."""
        return max(self.bad_early_window, self.bad_late_window)

    def expand(self) -> JudgeConfig:
        """Copy with every window widened by 1.5x (EXPAND JUDGE)."""
        return super().expand()


@dataclass(frozen=True)
class ReleaseConfig(_Windows):
    """Release timing windows in milliseconds for charge notes."""

    pgreat_window: float = 120.0
    great_window: float = 160.0
    good_window: float = 200.0
    bad_early_window: float = 220.0
    bad_late_window: float = 280.0

    @classmethod
    def beatoraja(cls) -> ReleaseConfig:
        return cls()

    @classmethod
    def lr2(cls, rank: JudgeRank) -> ReleaseConfig:
        """Every release window equals the note GOOD window for the rank."""
        good = JudgeConfig.lr2(rank).good_window
        return cls(
            pgreat_window=good,
            great_window=good,
            good_window=good,
            bad_early_window=good,
            bad_late_window=good,
        )

    @classmethod
    def for_system(cls, system: JudgeSystemType, rank: JudgeRank) -> ReleaseConfig:
        """Release windows for the given judge system and rank."""
        if system is JudgeSystemType.LR2:
            return cls.lr2(rank)
        return cls.beatoraja()

    def bad_window(self, early: bool) -> float:
        """BAD window for the given timing direction."""
        return super().bad_window(early)

    def expand(self) -> ReleaseConfig:
        """Copy with every window widened by 1.5x (EXPAND JUDGE)."""
        return super().expand()


class JudgeSystem:
    """Judges press and release timings against configured windows.

    Time differences are ``note_time - current_time``: positive means the
    player was early, negative means late.
    """

    def __init__(self, config: JudgeConfig | None = None) -> None:
        self._system_type = JudgeSystemType.BEATORAJA
        self.rank = JudgeRank.EASY
        self.config = config if config is not None else JudgeConfig.normal()
        self.release_config = ReleaseConfig.beatoraja()

    @classmethod
    def for_system(cls, system_type: JudgeSystemType, rank: JudgeRank) -> JudgeSystem:
        system = cls(JudgeConfig.for_system(system_type, rank))
        system._system_type = system_type
        system.rank = rank
        system.release_config = ReleaseConfig.for_system(system_type, rank)
        return system

    def with_release_config(self, release_config: ReleaseConfig) -> JudgeSystem:
        """Copy of this system using the given release windows."""
        other = copy.copy(self)
        other.release_config = release_config
        return other

    def with_expand(self) -> JudgeSystem:
        """Copy of this system with all windows widened by 1.5x."""
        other = copy.copy(self)
        other.config = self.config.expand()
        other.release_config = self.release_config.expand()
        return other

    @property
    def system_type(self) -> JudgeSystemType:
        return self._system_type

    def judge(self, time_diff_ms: float) -> JudgeResult | None:
        """Judge a press; None when outside every window."""
        return self.config.classify(time_diff_ms)

    def judge_release(self, time_diff_ms: float) -> JudgeResult | None:
        """Judge a charge-note release; None when outside every window."""
        return self.release_config.classify(time_diff_ms)

    def is_early_release(self, time_diff_ms: float) -> bool:
        """True when a release comes before the early release BAD window."""
        return time_diff_ms > self.release_config.bad_early_window

    def is_empty_poor(self, time_diff_ms: float) -> bool:
        """True when a press lands outside the windows and counts as empty POOR."""
        abs_diff = abs(time_diff_ms)
        if self._system_type is JudgeSystemType.LR2:
            return time_diff_ms < 0.0 and abs_diff > self.config.bad_late_window
        return abs_diff > self.config.bad_window(time_diff_ms > 0.0)

    def is_in_window(self, time_diff_ms: float) -> bool:
        """True when the difference lies within the BAD window."""
        return abs(time_diff_ms) <= self.config.bad_window(time_diff_ms > 0.0)

    def is_missed(self, time_diff_ms: float) -> bool:
        """True once a note is past the late BAD window."""
        return time_diff_ms < -self.config.bad_late_window

    def release_bad_window(self) -> float:
        """The wider of the two release BAD windows."""
        return max(
            self.release_config.bad_early_window,
            self.release_config.bad_late_window,
        )