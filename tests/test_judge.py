import pytest

from brsjudge.judge import (
    JudgeConfig,
    JudgeRank,
    JudgeResult,
    JudgeSystem,
    JudgeSystemType,
    ReleaseConfig,
    TimingDirection,
    TimingStats,
)


def test_beatoraja_timing_windows():
    config = JudgeConfig.beatoraja(JudgeRank.EASY)
    assert config.pgreat_window == pytest.approx(20.0)
    assert config.great_window == pytest.approx(60.0)
    assert config.good_window == pytest.approx(150.0)
    assert config.bad_early_window == pytest.approx(220.0)
    assert config.bad_late_window == pytest.approx(280.0)


def test_beatoraja_rank_scaling():
    easy = JudgeConfig.beatoraja(JudgeRank.EASY)
    hard = JudgeConfig.beatoraja(JudgeRank.HARD)
    assert hard.pgreat_window == pytest.approx(easy.pgreat_window * 0.5)
    assert hard.bad_early_window == pytest.approx(easy.bad_early_window * 0.5)
    assert hard.bad_late_window == pytest.approx(easy.bad_late_window * 0.5)


def test_lr2_timing_windows():
    config = JudgeConfig.lr2(JudgeRank.EASY)
    assert config.pgreat_window == pytest.approx(21.0)
    assert config.great_window == pytest.approx(60.0)
    assert config.good_window == pytest.approx(120.0)
    assert config.bad_early_window == pytest.approx(200.0)
    assert config.bad_late_window == pytest.approx(200.0)


@pytest.mark.parametrize(
    "rank, pgreat, great, good",
    [
        (JudgeRank.NORMAL, 18.0, 40.0, 100.0),
        (JudgeRank.HARD, 15.0, 30.0, 60.0),
        (JudgeRank.VERY_HARD, 8.0, 24.0, 40.0),
    ],
)
def test_lr2_timing_windows_all_ranks(rank, pgreat, great, good):
    config = JudgeConfig.lr2(rank)
    assert config.pgreat_window == pytest.approx(pgreat)
    assert config.great_window == pytest.approx(great)
    assert config.good_window == pytest.approx(good)


def test_judge_rank_from_bms():
    assert JudgeRank.from_bms_rank(0) is JudgeRank.VERY_HARD
    assert JudgeRank.from_bms_rank(1) is JudgeRank.HARD
    assert JudgeRank.from_bms_rank(2) is JudgeRank.NORMAL
    assert JudgeRank.from_bms_rank(3) is JudgeRank.EASY
    assert JudgeRank.from_bms_rank(99) is JudgeRank.EASY


def test_empty_poor_beatoraja():
    judge = JudgeSystem.for_system(JudgeSystemType.BEATORAJA, JudgeRank.EASY)
    assert judge.is_empty_poor(300.0)
    assert judge.is_empty_poor(-300.0)
    assert not judge.is_empty_poor(100.0)


def test_empty_poor_lr2():
    judge = JudgeSystem.for_system(JudgeSystemType.LR2, JudgeRank.EASY)
    assert judge.is_empty_poor(-300.0)
    assert not judge.is_empty_poor(300.0)


def test_beatoraja_asymmetric_bad_judgment():
    judge = JudgeSystem.for_system(JudgeSystemType.BEATORAJA, JudgeRank.EASY)
    assert judge.judge(210.0) is JudgeResult.BAD
    assert judge.judge(230.0) is None
    assert judge.judge(-270.0) is JudgeResult.BAD
    assert judge.judge(-290.0) is None


def test_release_config_beatoraja():
    config = ReleaseConfig.beatoraja()
    assert config.pgreat_window == pytest.approx(120.0)
    assert config.great_window == pytest.approx(160.0)
    assert config.good_window == pytest.approx(200.0)
    assert config.bad_early_window == pytest.approx(220.0)
    assert config.bad_late_window == pytest.approx(280.0)


def test_release_config_lr2():
    config = ReleaseConfig.lr2(JudgeRank.EASY)
    assert config.pgreat_window == pytest.approx(120.0)
    assert config.great_window == pytest.approx(120.0)
    assert config.good_window == pytest.approx(120.0)
    assert config.bad_early_window == pytest.approx(120.0)
    assert config.bad_late_window == pytest.approx(120.0)


@pytest.mark.parametrize(
    "diff, expected",
    [
        (0.0, JudgeResult.PGREAT),
        (20.0, JudgeResult.PGREAT),
        (-40.0, JudgeResult.GREAT),
        (100.0, JudgeResult.GOOD),
        (-150.0, JudgeResult.GOOD),
    ],
)
def test_judge_results_by_window(diff, expected):
    judge = JudgeSystem.for_system(JudgeSystemType.BEATORAJA, JudgeRank.EASY)
    assert judge.judge(diff) is expected


def test_timing_direction():
    assert TimingDirection.from_timing_diff(5.0) is TimingDirection.FAST
    assert TimingDirection.from_timing_diff(-5.0) is TimingDirection.SLOW
    assert TimingDirection.from_timing_diff(0.5) is TimingDirection.EXACT
    assert TimingDirection.from_timing_diff(-1.0) is TimingDirection.EXACT


def test_timing_stats_record():
    stats = TimingStats()
    stats.record(JudgeResult.GREAT, 30.0)
    stats.record(JudgeResult.GOOD, -80.0)
    stats.record(JudgeResult.BAD, -200.0)
    stats.record(JudgeResult.PGREAT, 15.0)
    stats.record(JudgeResult.GREAT, 0.5)
    assert (stats.fast_count, stats.slow_count) == (1, 2)


@pytest.mark.parametrize(
    "result, score, breaks",
    [
        (JudgeResult.PGREAT, 2, False),
        (JudgeResult.GREAT, 1, False),
        (JudgeResult.GOOD, 0, False),
        (JudgeResult.BAD, 0, True),
        (JudgeResult.POOR, 0, True),
    ],
)
def test_ex_score_and_combo_break(result, score, breaks):
    assert result.ex_score() == score
    assert result.is_combo_break() == breaks


def test_expand_multiplies_windows():
    expanded = JudgeConfig.beatoraja(JudgeRank.EASY).expand()
    assert expanded.pgreat_window == pytest.approx(30.0)
    assert expanded.good_window == pytest.approx(225.0)
    assert expanded.bad_late_window == pytest.approx(420.0)


def test_with_expand_widens_judgment():
    judge = JudgeSystem.for_system(JudgeSystemType.BEATORAJA, JudgeRank.EASY)
    expanded = judge.with_expand()
    assert judge.judge(25.0) is JudgeResult.GREAT
    assert expanded.judge(25.0) is JudgeResult.PGREAT
    assert expanded.release_bad_window() == pytest.approx(420.0)
    assert judge.release_bad_window() == pytest.approx(280.0)


def test_max_bad_window_and_bad_window():
    config = JudgeConfig.normal()
    assert config.max_bad_window() == pytest.approx(280.0)
    assert config.bad_window(True) == pytest.approx(220.0)
    assert config.bad_window(False) == pytest.approx(280.0)


def test_named_configs():
    assert JudgeConfig.easy().pgreat_window == pytest.approx(25.0)
    assert JudgeConfig.hard().good_window == pytest.approx(75.0)
    assert JudgeConfig.for_system(JudgeSystemType.LR2, JudgeRank.NORMAL).great_window == pytest.approx(40.0)


def test_judge_release_and_early_release():
    judge = JudgeSystem.for_system(JudgeSystemType.BEATORAJA, JudgeRank.EASY)
    assert judge.judge_release(100.0) is JudgeResult.PGREAT
    assert judge.judge_release(-150.0) is JudgeResult.GREAT
    assert judge.judge_release(-190.0) is JudgeResult.GOOD
    assert judge.judge_release(-250.0) is JudgeResult.BAD
    assert judge.judge_release(-300.0) is None
    assert judge.is_early_release(230.0)
    assert not judge.is_early_release(210.0)


def test_is_missed_and_in_window():
    judge = JudgeSystem()
    assert judge.is_missed(-281.0)
    assert not judge.is_missed(-280.0)
    assert judge.is_in_window(220.0)
    assert not judge.is_in_window(221.0)
    assert judge.is_in_window(-280.0)


def test_with_release_config_replaces_release_windows():
    judge = JudgeSystem.for_system(JudgeSystemType.BEATORAJA, JudgeRank.EASY)
    custom = judge.with_release_config(ReleaseConfig.lr2(JudgeRank.EASY))
    assert custom.judge_release(125.0) is None
    assert judge.judge_release(125.0) is JudgeResult.GREAT


def test_default_system_type():
    assert JudgeSystem().system_type is JudgeSystemType.BEATORAJA
    lr2 = JudgeSystem.for_system(JudgeSystemType.LR2, JudgeRank.HARD)
    assert lr2.system_type is JudgeSystemType.LR2
    assert lr2.judge(50.0) is JudgeResult.GOOD