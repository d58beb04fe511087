"""Tests for the calculator API."""

import pytest

from brave_chain import (
    CardKind,
    ChainCalculator,
    FormulaConfig,
    InvalidCardCode,
    InvalidLength,
    evaluate,
    evaluate_hand,
)
from brave_chain.engine.scoring import StatsEngine

A, B, Q = CardKind.ARTS, CardKind.BUSTER, CardKind.QUICK


@pytest.fixture
def calc():
    return ChainCalculator()


def test_buster_chain_query(calc):
    report = calc.evaluate_codes("bbb")
    assert report.chain is B
    assert [e.hand for e in report.by_damage] == [(B, B, B)]
    assert [e.hand for e in report.by_np] == [(B, B, B)]
    assert report.best_damage.stats.damage == pytest.approx(25161.5)


def test_quick_chain_query():
    report = evaluate_hand("qqq")
    assert report.chain is Q
    assert report.by_damage[0].stats.stars == pytest.approx(22.2)


def test_aab_has_three_orders_and_no_chain():
    report = evaluate_hand("aab")
    assert report.chain is None
    assert {e.hand for e in report.by_damage} == {(A, A, B), (A, B, A), (B, A, A)}
    assert report.best_damage.code == "BAA"
    assert report.best_np.code == "ABA"


def test_all_distinct_gives_six_orders():
    report = evaluate_hand("abq")
    assert len(report.by_damage) == 6
    assert len(report.by_np) == 6


def test_uppercase_query_matches_lowercase():
    assert evaluate_hand("ABQ").to_dict() == evaluate_hand("abq").to_dict()


def test_invalid_code_is_raised_before_evaluation():
    with pytest.raises(InvalidCardCode) as exc:
        evaluate_hand("xyz")
    assert exc.value.code == "x"


def test_invalid_length_query():
    with pytest.raises(InvalidLength) as exc:
        evaluate_hand("ab")
    assert exc.value.length == 2


def test_evaluate_takes_card_kinds():
    report = evaluate([B, A, A])
    assert report.cards == (B, A, A)
    assert len(report.by_damage) == 3


def test_evaluate_rejects_wrong_hand_size():
    with pytest.raises(InvalidLength):
        evaluate([B, A])


def test_config_flows_through():
    base = evaluate_hand("bbb")
    boosted = evaluate_hand("bbb", FormulaConfig(servant_attack=14000.0))
    assert boosted.best_damage.stats.damage == pytest.approx(base.best_damage.stats.damage * 2)


def test_report_text():
    text = str(evaluate_hand("aab"))
    lines = text.splitlines()
    assert lines[0] == "By Damage:"
    assert lines[4] == "By NP:"
    assert len(lines) == 8
    assert lines[1] == "BAA|dmg: 13846, np: 0.230, stars 3.0"


def test_report_to_dict():
    data = evaluate_hand("qqq").to_dict()
    assert data["cards"] == "QQQ"
    assert data["chain"] == "Quick"
    assert data["by_damage"][0]["hand"] == "QQQ"
    assert data["by_np"][0]["np"] == pytest.approx(0.11)


def test_verbose_prints_breakdown(calc, capsys):
    calc.evaluate_codes("bbq", verbose=True)
    out = capsys.readouterr().out
    assert "BBQ: 3 distinct orders" in out
    assert "extra hit" in out


def test_evaluate_rejects_code_string():
    with pytest.raises(InvalidCardCode) as exc:
        evaluate("abq")
    assert exc.value.code == "a"


def test_evaluate_rejects_short_code_string():
    with pytest.raises(InvalidLength) as exc:
        evaluate("ab")
    assert exc.value.length == 2
    assert str(exc.value) == 'Expected 3 cards. Found 2 in "ab".'


def test_evaluate_names_first_non_card():
    with pytest.raises(InvalidCardCode) as exc:
        evaluate([B, A, "q"])
    assert exc.value.code == "q"


def test_verbose_scores_each_order_once(calc, monkeypatch, capsys):
    calls = []
    score_hand = StatsEngine.score_hand

    def counting_score_hand(self, hand):
        calls.append(hand)
        return score_hand(self, hand)

    monkeypatch.setattr(StatsEngine, "score_hand", counting_score_hand)

    report = calc.evaluate_codes("abq", verbose=True)

    assert len(calls) == 6
    assert len(set(calls)) == 6
    assert "ABQ: 6 distinct orders" in capsys.readouterr().out
    assert set(report.breakdowns) == {e.hand for e in report.by_damage}


def test_report_breakdowns_match_rankings():
    report = evaluate_hand("aab")
    for entry in report.by_np:
        assert report.breakdowns[entry.hand].stats == entry.stats
