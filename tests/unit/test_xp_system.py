"""Unit tests for XP System (skill_garden/gamification/xp_system.py)"""
import math
import pytest

from skill_garden.exceptions import InvalidAmountError
from skill_garden.gamification.achievement_system import BIG_WIN_BADGE
from skill_garden.gamification.xp_system import (
    award_xp,
    calculate_level_from_xp,
    normalize_amount,
)
from skill_garden.models.progress import UserProgress


# ============================================================================
# Level Calculation Tests
# ============================================================================

@pytest.mark.parametrize("total_xp,expected_level", [
    (0, 1),
    (999, 1),
    (1000, 2),
    (1050, 2),
    (2999, 3),
    (10000, 11),
])
def test_calculate_level_from_xp(total_xp, expected_level):
    """Level is floor(xp / 1000) + 1"""
    assert calculate_level_from_xp(total_xp)["current_level"] == expected_level


def test_calculate_level_progress_fields():
    """Test XP-in-level and XP-to-next fields"""
    result = calculate_level_from_xp(1250)

    assert result["xp_in_current_level"] == 250
    assert result["xp_to_next_level"] == 750
    assert result["total_xp_for_next_level"] == 2000


def test_calculate_level_negative_xp_treated_as_zero():
    assert calculate_level_from_xp(-50)["current_level"] == 1


# ============================================================================
# Award Tests
# ============================================================================

def test_award_xp_adds_amount():
    """Test XP is added to the total"""
    progress = UserProgress(xp=300, level=1)

    new_progress, outcome = award_xp(progress, 150)

    assert new_progress.xp == 450
    assert new_progress.level == 1
    assert outcome.xp == 450
    assert outcome.granted is True
    assert outcome.level_up is False


def test_award_xp_does_not_mutate_input():
    progress = UserProgress(xp=100)

    award_xp(progress, 500)

    assert progress.xp == 100
    assert progress.badges == set()


def test_award_xp_level_up():
    """950 XP at level 1 plus 100 lands on level 2"""
    progress = UserProgress(xp=950, level=1)

    new_progress, outcome = award_xp(progress, 100)

    assert new_progress.xp == 1050
    assert new_progress.level == 2
    assert outcome.level_up is True
    assert outcome.level == 2


def test_award_xp_exact_level_boundary():
    progress = UserProgress(xp=900, level=1)

    new_progress, outcome = award_xp(progress, 100)

    assert new_progress.level == 2
    assert outcome.level_up is True


def test_award_xp_multiple_levels_in_one_award():
    progress = UserProgress(xp=0, level=1)

    new_progress, outcome = award_xp(progress, 2500)

    assert new_progress.level == 3
    assert outcome.level_up is True


def test_award_xp_recomputes_stale_level():
    """A stored level that disagrees with xp is replaced, not clamped"""
    progress = UserProgress(xp=100, level=5)

    new_progress, outcome = award_xp(progress, 50)

    assert new_progress.level == 1
    assert outcome.level_up is False


@pytest.mark.parametrize("start_xp,amount", [
    (0, 1),
    (999, 1),
    (1234, 4321),
    (5000, 200),
])
def test_award_xp_level_invariant(start_xp, amount):
    """Level always equals floor(xp / 1000) + 1 after an award"""
    progress = UserProgress(xp=start_xp, level=start_xp // 1000 + 1)

    new_progress, _ = award_xp(progress, amount)

    assert new_progress.xp == start_xp + amount
    assert new_progress.level == (start_xp + amount) // 1000 + 1


# ============================================================================
# Badge Tests
# ============================================================================

def test_big_win_awarded_at_threshold():
    new_progress, outcome = award_xp(UserProgress(), 200)

    assert outcome.awarded_badge == BIG_WIN_BADGE
    assert BIG_WIN_BADGE in new_progress.badges


def test_big_win_not_awarded_below_threshold():
    new_progress, outcome = award_xp(UserProgress(), 199)

    assert outcome.awarded_badge is None
    assert new_progress.badges == set()


def test_big_win_awarded_only_once():
    """Awarding 250 twice leaves exactly one badge and reports it once"""
    first, first_outcome = award_xp(UserProgress(), 250)
    second, second_outcome = award_xp(first, 250)

    assert first_outcome.awarded_badge == BIG_WIN_BADGE
    assert second_outcome.awarded_badge is None
    assert second.badges == {BIG_WIN_BADGE}
    assert second.xp == 500


# ============================================================================
# Invalid Amount Tests
# ============================================================================

@pytest.mark.parametrize("amount", [0, -5, float("nan"), float("inf"), "100", None, True, 2.5])
def test_award_xp_invalid_amount_is_noop(amount):
    """Invalid amounts leave xp, level and badges unchanged"""
    progress = UserProgress(xp=420, level=1, badges={"Early Bird"})

    new_progress, outcome = award_xp(progress, amount)

    assert new_progress is progress
    assert new_progress.xp == 420
    assert new_progress.level == 1
    assert new_progress.badges == {"Early Bird"}
    assert outcome.granted is False
    assert outcome.level_up is False
    assert outcome.awarded_badge is None


def test_award_xp_zero_repeatedly_is_identity():
    progress = UserProgress(xp=1500, level=2, streak=3)

    current = progress
    for _ in range(5):
        current, _ = award_xp(current, 0)

    assert current == progress


def test_award_xp_strict_raises():
    with pytest.raises(InvalidAmountError) as exc_info:
        award_xp(UserProgress(), -10, strict=True)

    assert exc_info.value.field == "amount"
    assert exc_info.value.status_code == 400


def test_award_xp_fractional_amount_not_rounded():
    """xp is a whole number, so 2.5 is rejected rather than rounded"""
    progress = UserProgress(xp=10)

    new_progress, outcome = award_xp(progress, 2.5)

    assert outcome.granted is False
    assert new_progress.xp == 10
    with pytest.raises(InvalidAmountError):
        award_xp(progress, 2.5, strict=True)


def test_normalize_amount_accepts_integral_float():
    assert normalize_amount(300.0) == 300
    assert isinstance(normalize_amount(300.0), int)


def test_normalize_amount_rejects_nan():
    with pytest.raises(InvalidAmountError):
        normalize_amount(math.nan)
