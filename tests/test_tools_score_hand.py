import json

import pytest
from tools import score_hand as cli


def _run(capsys, argv):
    rc = cli.main(argv)
    return rc, capsys.readouterr().out


def test_json_output(capsys):
    rc, out = _run(capsys, ["5♠", "5♥", "5♦", "J♣", "5♣"])
    assert rc == 0
    data = json.loads(out)
    assert data["scorable"] is True
    assert data["report"]["total"] == 29
    assert data["notes"] == ["N201"]


def test_text_output_crib(capsys):
    rc, out = _run(capsys, ["A♠", "2♠", "3♠", "4♠", "5♥", "--crib", "--format", "text"])
    assert rc == 0
    lines = out.strip().splitlines()
    assert lines[0] == "Hand: A♠ 2♠ 3♠ 4♠ | Cut: 5♥"
    assert "Total: 7 points (crib)" in lines
    assert lines[-1] == "A 4-card flush in spades does not count in the crib."


def test_incomplete_hand_exit_code(capsys):
    rc, out = _run(capsys, ["5♠", "5♥", "5♦", "J♣"])
    assert rc == cli.EXIT_NOT_SCORABLE
    data = json.loads(out)
    assert data == {"scorable": False, "notes": ["W_INCOMPLETE"]}


def test_bad_token_text(capsys):
    rc, out = _run(capsys, ["5♠", "5♥", "5♦", "J♣", "5?", "--format", "text"])
    assert rc == cli.EXIT_NOT_SCORABLE
    assert out.strip() == "Select all 5 cards to see score"


def test_random_deal_is_seeded(capsys):
    rc1, out1 = _run(capsys, ["--random", "--seed", "11"])
    rc2, out2 = _run(capsys, ["--random", "--seed", "11"])
    assert rc1 == rc2 == 0
    assert out1 == out2


def test_pokerkit_reader(capsys):
    pytest.importorskip("pokerkit")
    rc, out = _run(capsys, ["5s", "5h", "5d", "Jc", "5c", "--reader", "pokerkit"])
    assert rc == 0
    assert json.loads(out)["report"]["hand"] == ["5♠", "5♥", "5♦", "J♣"]
