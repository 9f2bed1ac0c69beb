from itertools import combinations

import pytest
from crib_core.cards import format_cards, parse_card
from crib_core.scoring.fifteens import score_fifteens


def H(s: str):
    return [parse_card(t) for t in s.split()]


def test_combinations_follow_mask_order():
    res = score_fifteens(H("10♠ 5♥ 2♦ 3♣ 7♠"))
    assert res.points == 6
    assert [format_cards(c) for c in res.combinations] == [
        ["10♠", "5♥"],
        ["10♠", "2♦", "3♣"],
        ["5♥", "3♣", "7♠"],
    ]


def test_four_fives_and_jack():
    res = score_fifteens(H("5♠ 5♥ 5♦ J♣ 5♣"))
    # J+5 four ways, 5+5+5 four ways
    assert len(res.combinations) == 8
    assert res.points == 16


def test_whole_hand_can_be_a_fifteen():
    res = score_fifteens(H("A♠ 2♠ 3♠ 4♠ 5♥"))
    assert res.points == 2
    assert len(res.combinations[0]) == 5


def test_no_fifteens_with_all_even_values():
    res = score_fifteens(H("2♠ 4♥ 6♦ 8♣ K♠"))
    assert res.points == 0
    assert res.combinations == ()


@pytest.mark.parametrize(
    "hand",
    [
        "J♠ Q♥ K♦ 5♣ 5♠",
        "7♠ 8♥ 7♦ 8♣ A♠",
        "6♠ 9♥ 6♦ 9♣ 3♠",
        "4♠ 4♥ 7♦ 7♣ 8♠",
    ],
)
def test_points_match_subset_count(hand):
    cards = H(hand)
    expected = sum(
        1
        for r in range(1, 6)
        for combo in combinations(cards, r)
        if sum(c.fifteen_value for c in combo) == 15
    )
    res = score_fifteens(cards)
    assert res.points == 2 * expected
    assert res.points % 2 == 0


def test_absent_slot_scores_zero():
    cards = H("5♠ 5♥ 5♦ J♣ 5♣")
    cards[2] = None
    assert score_fifteens(cards).points == 0
    assert score_fifteens([]).points == 0
