import pytest
from crib_core.cards import parse_card
from crib_core.scoring.flush import score_flush
from crib_core.scoring.nobs import score_nobs


def H(s: str):
    return [parse_card(t) for t in s.split()]


@pytest.mark.parametrize(
    "hand, is_crib, points, kind",
    [
        ("A♠ 2♠ 3♠ 4♠ 5♥", False, 4, "hand"),
        ("A♠ 2♠ 3♠ 4♠ 5♥", True, 0, "none"),
        ("A♠ 2♠ 3♠ 4♠ 9♠", False, 5, "hand_and_cut"),
        ("A♠ 2♠ 3♠ 4♠ 9♠", True, 5, "crib"),
        ("A♠ 2♠ 3♠ 4♥ 9♠", False, 0, "none"),
        ("A♠ 2♠ 3♠ 4♥ 9♠", True, 0, "none"),
        ("A♥ 2♠ 3♠ 4♠ 9♠", False, 0, "none"),
    ],
)
def test_flush_modes(hand, is_crib, points, kind):
    res = score_flush(H(hand), is_crib=is_crib)
    assert res.points == points
    assert res.kind == kind


def test_flush_reports_suit():
    res = score_flush(H("2♦ 7♦ 9♦ K♦ 3♣"))
    assert res.suit == "♦"
    assert score_flush(H("2♦ 7♣ 9♦ K♦ 3♣")).suit is None


def test_flush_absent_card_scores_zero():
    cards = H("A♠ 2♠ 3♠ 4♠ 9♠")
    cards[4] = None
    assert score_flush(cards).points == 0
    assert score_flush(cards, is_crib=True).points == 0


def test_nobs_jack_matches_cut_suit():
    res = score_nobs(H("J♣ 5♠ 5♥ 5♦ 5♣"))
    assert res.points == 1
    assert str(res.card) == "J♣"


@pytest.mark.parametrize(
    "hand",
    [
        "J♠ 5♠ 5♥ 5♦ 5♣",  # jack of another suit
        "2♣ 5♠ 5♥ 5♦ J♣",  # jack is the cut card
        "Q♣ K♣ 5♥ 5♦ 5♣",
    ],
)
def test_no_nobs(hand):
    res = score_nobs(H(hand))
    assert res.points == 0
    assert res.card is None


def test_nobs_at_most_one_point():
    res = score_nobs(H("J♠ J♥ J♦ J♣ 5♥"))
    assert res.points == 1
    assert str(res.card) == "J♥"


def test_nobs_absent_card_scores_zero():
    cards = H("J♣ 5♠ 5♥ 5♦ 5♣")
    cards[4] = None
    assert score_nobs(cards).points == 0
