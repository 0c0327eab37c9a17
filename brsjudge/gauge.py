"""Groove gauge: HP tracking, damage tables and gauge auto shift."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from brsjudge.judge import JudgeResult

# HP below which beatoraja starts reducing damage on non-survival gauges.
_BEATORAJA_DAMAGE_REDUCTION_THRESHOLD = 50.0
# Floor of the beatoraja damage multiplier at very low HP.
_BEATORAJA_MIN_DAMAGE_MULTIPLIER = 0.1
# LR2 HARD low-life damage reduction.
_LR2_LOW_HP_REDUCTION_THRESHOLD = 30.0
_LR2_LOW_HP_REDUCTION_MULTIPLIER = 0.6

_LR2_FIX1_TOTAL = (240.0, 230.0, 210.0, 200.0, 180.0, 160.0, 150.0, 130.0, 120.0, 0.0)
_LR2_FIX1_TABLE = (1.0, 1.11, 1.25, 1.5, 1.666, 2.0, 2.5, 3.333, 5.0, 10.0)


class GaugeType(enum.Enum):
    """Gauge type, determining difficulty and pass conditions."""

    ASSIST_EASY = "assist_easy"
    EASY = "easy"
    NORMAL = "normal"
    HARD = "hard"
    EX_HARD = "ex_hard"
    HAZARD = "hazard"

    @classmethod
    def all(cls) -> tuple[GaugeType, ...]:
        """All gauge types from easiest to hardest."""
        return tuple(cls)

    def is_survival(self) -> bool:
        """True for gauges that fail when HP reaches zero."""
        return self in (GaugeType.HARD, GaugeType.EX_HARD, GaugeType.HAZARD)


class GaugeSystem(enum.Enum):
    """Gauge flavour, affecting the damage calculation."""

    BEATORAJA = "beatoraja"
    LR2 = "lr2"


@dataclass
class GaugeState:
    """HP (0-100) and failure flag of one gauge."""

    hp: float
    failed: bool = False


@dataclass(frozen=True)
class _GaugeDamage:
    pgreat: float
    great: float
    good: float
    bad: float
    poor: float
    empty_poor: float

    def for_judgment(self, judgment: JudgeResult) -> float:
        return {
            JudgeResult.PGREAT: self.pgreat,
            JudgeResult.GREAT: self.great,
            JudgeResult.GOOD: self.good,
            JudgeResult.BAD: self.bad,
            JudgeResult.POOR: self.poor,
        }[judgment]


@dataclass(frozen=True)
class _GaugeProperty:
    initial: float
    border: float
    min: float
    max: float
    damage: _GaugeDamage


def _groove(border: float, damage: _GaugeDamage) -> _GaugeProperty:
    return _GaugeProperty(initial=20.0, border=border, min=2.0, max=100.0, damage=damage)


def _survival(damage: _GaugeDamage) -> _GaugeProperty:
    return _GaugeProperty(initial=100.0, border=0.0, min=0.0, max=100.0, damage=damage)


_HAZARD_DAMAGE = _GaugeDamage(0.0, 0.0, 0.0, -100.0, -100.0, 0.0)
_LR2_HARD_DAMAGE = _GaugeDamage(0.1, 0.1, 0.05, -6.0, -10.0, -2.0)
_LR2_EASY = _groove(80.0, _GaugeDamage(1.2, 1.2, 0.6, -3.2, -4.8, -1.6))

_PROPERTIES = {
    GaugeSystem.BEATORAJA: {
        GaugeType.ASSIST_EASY: _groove(60.0, _GaugeDamage(1.0, 1.0, 0.5, -1.5, -3.0, -0.5)),
        GaugeType.EASY: _groove(80.0, _GaugeDamage(1.0, 1.0, 0.5, -1.5, -4.5, -1.0)),
        GaugeType.NORMAL: _groove(80.0, _GaugeDamage(1.0, 1.0, 0.5, -3.0, -6.0, -2.0)),
        GaugeType.HARD: _survival(_GaugeDamage(0.15, 0.12, 0.03, -5.0, -10.0, -5.0)),
        GaugeType.EX_HARD: _survival(_GaugeDamage(0.15, 0.06, 0.0, -8.0, -16.0, -8.0)),
        GaugeType.HAZARD: _survival(_HAZARD_DAMAGE),
    },
    GaugeSystem.LR2: {
        GaugeType.ASSIST_EASY: _LR2_EASY,
        GaugeType.EASY: _LR2_EASY,
        GaugeType.NORMAL: _groove(80.0, _GaugeDamage(1.0, 1.0, 0.5, -4.0, -6.0, -2.0)),
        GaugeType.HARD: _survival(_LR2_HARD_DAMAGE),
        # LR2 has no EX-HARD; it behaves like HARD.
        GaugeType.EX_HARD: _survival(_LR2_HARD_DAMAGE),
        GaugeType.HAZARD: _survival(_HAZARD_DAMAGE),
    },
}


def _property(gauge_type: GaugeType, system: GaugeSystem) -> _GaugeProperty:
    return _PROPERTIES[system][gauge_type]


class GaugeManager:
    """Tracks gauge HP during play, optionally for every gauge at once (GAS)."""

    def __init__(
        self,
        gauge_type: GaugeType,
        system: GaugeSystem = GaugeSystem.BEATORAJA,
        total_notes: int = 0,
        total_value: float = 160.0,
        auto_shift: bool = False,
    ) -> None:
        self.system = system
        self.total_notes = total_notes
        self.total_value = total_value
        self.auto_shift = auto_shift
        self._active_gauge = gauge_type
        tracked = GaugeType.all() if auto_shift else (gauge_type,)
        self.states = [GaugeState(hp=_property(gt, system).initial) for gt in tracked]

    def _tracked(self):
        if self.auto_shift:
            return list(zip(self.states, GaugeType.all()))
        return [(self.states[0], self._active_gauge)]

    def _apply(self, judgment: JudgeResult, is_empty_poor: bool) -> None:
        for state, gauge_type in self._tracked():
            self._apply_to_gauge(state, gauge_type, judgment, is_empty_poor)
        if self.auto_shift:
            self._update_active_gauge()

    def apply_judgment(self, judgment: JudgeResult) -> None:
        """Apply a judgment to every tracked gauge."""
        self._apply(judgment, False)

    def apply_empty_poor(self) -> None:
        """Apply an empty POOR (a press with no note to hit)."""
        self._apply(JudgeResult.POOR, True)

    def _apply_to_gauge(
        self,
        state: GaugeState,
        gauge_type: GaugeType,
        judgment: JudgeResult,
        is_empty_poor: bool,
    ) -> None:
        if state.failed:
            return
        prop = _property(gauge_type, self.system)
        damage = prop.damage.empty_poor if is_empty_poor else prop.damage.for_judgment(judgment)
        if self.system is GaugeSystem.LR2:
            damage = self.apply_lr2_modifiers(gauge_type, state.hp, damage)
        else:
            damage = self._apply_beatoraja_modifiers(gauge_type, state.hp, damage)
        state.hp = min(max(state.hp + damage, prop.min), prop.max)
        if gauge_type.is_survival() and state.hp <= 0.0:
            state.failed = True

    @staticmethod
    def _apply_beatoraja_modifiers(
        gauge_type: GaugeType, current_hp: float, damage: float
    ) -> float:
        if (
            damage < 0.0
            and current_hp < _BEATORAJA_DAMAGE_REDUCTION_THRESHOLD
            and not gauge_type.is_survival()
        ):
            reduction = current_hp / _BEATORAJA_DAMAGE_REDUCTION_THRESHOLD
            return damage * max(reduction, _BEATORAJA_MIN_DAMAGE_MULTIPLIER)
        return damage

    def apply_lr2_modifiers(
        self, gauge_type: GaugeType, current_hp: float, damage: float
    ) -> float:
        """Scale recovery by TOTAL/notes and amplify HARD damage as LR2 does."""
        modified = damage
        if not gauge_type.is_survival() and modified > 0.0 and self.total_notes > 0:
            modified *= self.total_value / self.total_notes
        if gauge_type in (GaugeType.HARD, GaugeType.EX_HARD) and modified < 0.0:
            modified *= self.lr2_damage_multiplier()
            if current_hp <= _LR2_LOW_HP_REDUCTION_THRESHOLD:
                modified *= _LR2_LOW_HP_REDUCTION_MULTIPLIER
        return modified

    def lr2_damage_multiplier(self) -> float:
        """LR2 HARD damage multiplier; grows for low TOTAL or few notes."""
        total = self.total_value
        index = 0
        while index < len(_LR2_FIX1_TOTAL) - 1 and total < _LR2_FIX1_TOTAL[index]:
            index += 1

        total_notes = self.total_notes
        fix2 = 1.0
        note = 1000
        step = 0.002
        while note > total_notes or note > 1:
            clamp = max(total_notes, note // 2)
            fix2 += step * (note - clamp)
            note //= 2
            step *= 2.0

        return max(_LR2_FIX1_TABLE[index], fix2)

    def _update_active_gauge(self) -> None:
        for state, gauge_type in reversed(self._tracked()):
            if not state.failed:
                self._active_gauge = gauge_type
                return

    def _active_state(self) -> GaugeState:
        if self.auto_shift:
            return self.states[GaugeType.all().index(self._active_gauge)]
        return self.states[0]

    def _is_state_cleared(self, state: GaugeState, gauge_type: GaugeType) -> bool:
        if gauge_type.is_survival():
            return not state.failed
        return state.hp >= _property(gauge_type, self.system).border

    def hp(self) -> float:
        """Current HP of the active gauge."""
        return self._active_state().hp

    def active_gauge(self) -> GaugeType:
        """The gauge type currently displayed."""
        return self._active_gauge

    def is_cleared(self) -> bool:
        """True when the active gauge meets its clear condition."""
        return self._is_state_cleared(self._active_state(), self._active_gauge)

    def best_clear(self) -> GaugeType | None:
        """Hardest gauge that is cleared, or None."""
        for state, gauge_type in reversed(self._tracked()):
            if self._is_state_cleared(state, gauge_type):
                return gauge_type
        return None

    def is_failed(self) -> bool:
        """True when every tracked gauge has failed."""
        return all(state.failed for state in self.states)