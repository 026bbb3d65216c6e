"""Unit tests for submission acceptance judges"""
from skill_garden.gamification.judge import KeywordOrCoinFlipJudge, create_judge


def test_keyword_accepts_regardless_of_case():
    judge = KeywordOrCoinFlipJudge(rng=lambda: 0.99)

    assert judge.judge("I SOLVEd it with a heap", challenge=None) is True


def test_coin_flip_accepts_below_pass_rate():
    judge = KeywordOrCoinFlipJudge(pass_rate=0.5, rng=lambda: 0.1)

    assert judge.judge("print('hello')", challenge=None) is True


def test_coin_flip_rejects_at_or_above_pass_rate():
    judge = KeywordOrCoinFlipJudge(pass_rate=0.5, rng=lambda: 0.5)

    assert judge.judge("print('hello')", challenge=None) is False


def test_non_string_submission_falls_back_to_coin_flip():
    judge = KeywordOrCoinFlipJudge(rng=lambda: 0.9)

    assert judge.judge({"code": "solve"}, challenge=None) is False


def test_create_judge_uses_settings(test_settings):
    settings = test_settings.model_copy(update={"acceptance_keyword": "Done", "acceptance_pass_rate": 0.0})

    judge = create_judge(settings)

    assert judge.keyword == "done"
    assert judge.pass_rate == 0.0
    assert judge.judge("all done", challenge=None) is True
    assert judge.judge("nope", challenge=None) is False
