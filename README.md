# brsjudge

This package holds the scoring rules of BMS-style rhythm games. It has no graphics, audio or input handling. It is pure Python and needs no third-party libraries.

## Modules

- `brsjudge.judge` covers timing judgment.
  - `JudgeConfig` and `ReleaseConfig` hold the beatoraja and LR2 timing windows, per `JudgeRank`.
  - `JudgeSystem` judges presses and charge-note releases. It also handles EXPAND JUDGE (`with_expand`, which widens every window by 1.5x), empty-POOR detection and miss detection.
  - `JudgeResult` gives the EX score and combo-break rules.
  - `TimingStats` and `TimingDirection` count FAST and SLOW hits.
- `brsjudge.gauge` covers the groove gauges.
  - `GaugeManager` runs the ASSIST EASY to HAZARD gauges (`GaugeType`) under the beatoraja or LR2 damage rules (`GaugeSystem`).
  - It supports gauge auto shift (GAS) and best-clear lookup.
- `brsjudge.options` holds the 7-key lane mappings.
  - `RandomOption` gives the option names shown to the player.
  - `LaneMapping` provides the OFF, MIRROR, RANDOM and R-RANDOM mappings.
  - `generate_seed()` makes a seed from the current time.
- `brsjudge.wide_mappings` holds the 9-key mappings (`LaneMapping9Key`) and the double-play mappings (`LaneMappingDp`).

In every method, a time difference is `note_time - current_time`. A positive value means the key was pressed before the note arrived.

## Install

```
pip install .
```

## Examples

To judge a key press:

```python
from brsjudge.judge import JudgeRank, JudgeSystem, JudgeSystemType

judge = JudgeSystem.for_system(JudgeSystemType.BEATORAJA, JudgeRank.from_bms_rank(3))
judge.judge(10.0)        # JudgeResult.PGREAT
judge.judge(210.0)       # JudgeResult.BAD (early BAD window is 220 ms)
judge.judge(230.0)       # None: outside every window
judge.is_missed(-300.0)  # True (late BAD window is 280 ms)
```

To run a gauge with auto shift:

```python
from brsjudge.gauge import GaugeManager, GaugeSystem, GaugeType
from brsjudge.judge import JudgeResult

gauge = GaugeManager(GaugeType.EX_HARD, GaugeSystem.BEATORAJA, 1000, 160.0, True)
for _ in range(7):
    gauge.apply_judgment(JudgeResult.POOR)
gauge.active_gauge()  # GaugeType.HARD: EX-HARD failed and GAS moved down
gauge.best_clear()    # GaugeType.HARD
```

`GaugeManager` takes these default arguments:

| Argument | Default |
| --- | --- |
| `system` | `GaugeSystem.BEATORAJA` |
| `total_notes` | `0` |
| `total_value` | `160.0` |
| `auto_shift` | `False` |

To map lanes:

```python
from brsjudge.options import LaneMapping, RandomOption

LaneMapping.mirror().transform(1)   # 7
LaneMapping.mirror().transform(0)   # 0: the scratch lane is never moved
LaneMapping.for_option(RandomOption.RANDOM, 12345)  # the same seed gives the same mapping
```

## What it does not do

- It does not read chart files.
- It does not apply options to the notes of a chart. For S-RANDOM and H-RANDOM, `for_option` returns the identity mapping, because those options place each note separately.
- It has no play loop, key or controller input, sound or display.

It is a set of rules for a game to build on.

## Tests

```
pip install .[test]
pytest
```