import random

from .cards import Card, format_cards, make_deck
from .scoring.utils import HAND_CARDS

SHUFFLE_ALGO = "mt19937"


def deal_hand(seed: int | None = None) -> dict:
    """Deal 4 hand cards plus a cut card from a fresh shuffled deck.

    Returns the five cards in scoring order (index 4 = cut) and a step log
    (DECK_INIT, DEAL_HAND, CUT).
    """
    rnd = random.Random(seed)
    deck = make_deck()
    rnd.shuffle(deck)

    steps = [
        {
            "idx": 0,
            "evt": "DECK_INIT",
            "payload": {"algo": SHUFFLE_ALGO, "seed": seed, "cards": len(deck)},
        }
    ]
    hand: list[Card] = [deck.pop() for _ in range(HAND_CARDS)]
    steps.append({"idx": len(steps), "evt": "DEAL_HAND", "payload": {"cards": format_cards(hand)}})
    cut = deck.pop()
    steps.append({"idx": len(steps), "evt": "CUT", "payload": {"card": str(cut)}})

    return {
        "seed": seed,
        "cards": hand + [cut],
        "steps": steps,
    }
