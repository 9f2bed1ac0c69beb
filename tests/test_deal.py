from crib_core.deal import deal_hand


def test_deal_is_seeded():
    a = deal_hand(seed=42)
    b = deal_hand(seed=42)
    assert a["cards"] == b["cards"]
    assert a["seed"] == 42


def test_deal_five_distinct_cards():
    d = deal_hand(seed=3)
    assert len(d["cards"]) == 5
    assert len(set(d["cards"])) == 5


def test_deal_steps():
    d = deal_hand(seed=1)
    evts = [s["evt"] for s in d["steps"]]
    assert evts == ["DECK_INIT", "DEAL_HAND", "CUT"]
    assert d["steps"][0]["payload"]["cards"] == 52
    assert len(d["steps"][1]["payload"]["cards"]) == 4
    assert d["steps"][2]["payload"]["card"] == str(d["cards"][4])


def test_deck_init_records_shuffle():
    payload = deal_hand(seed=7)["steps"][0]["payload"]
    assert payload == {"algo": "mt19937", "seed": 7, "cards": 52}


def test_seed_matches_plain_random_shuffle():
    import random

    from crib_core.cards import make_deck

    deck = make_deck()
    random.Random(11).shuffle(deck)
    assert deal_hand(seed=11)["cards"] == [deck[-1], deck[-2], deck[-3], deck[-4], deck[-5]]
