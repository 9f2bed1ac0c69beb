"""Score one cribbage hand from the command line (local, no server)."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from crib_core.analysis import annotate_report
from crib_core.cards import format_cards
from crib_core.deal import deal_hand
from crib_core.explanations import explain_report, render_explanations
from crib_core.providers.selector import READERS, get_reader, read_hand
from crib_core.scoring.service import score_hand

EXIT_OK = 0
EXIT_NOT_SCORABLE = 2


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Cribbage hand scorer (4 hand cards + cut)")
    ap.add_argument(
        "cards",
        nargs="*",
        help="5 tokens, hand first then cut, e.g. 5♠ 5♥ 5♦ J♣ 5♣ (or 5s 5h 5d Jc 5c with --reader pokerkit)",
    )
    ap.add_argument("--crib", action="store_true", help="Score as the crib (5-card flush only)")
    ap.add_argument(
        "--reader",
        choices=list(READERS),
        default=None,
        help="Card token reader (default: env CRIB_CARD_READER or native)",
    )
    ap.add_argument(
        "--format", choices=["json", "text"], default="json", help="Output format (default: json)"
    )
    ap.add_argument("--random", action="store_true", help="Deal a random hand instead")
    ap.add_argument("--seed", type=int, default=None, help="Shuffle seed for --random")
    ap.add_argument("--locale", default=None, help="Explanation locale (default: env CRIB_LOCALE or en)")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log scoring records to stderr")
    return ap.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    if args.random:
        cards = deal_hand(seed=args.seed)["cards"]
    else:
        cards = read_hand(args.cards, reader=get_reader(args.reader))

    report = score_hand(cards, is_crib=args.crib)
    notes = annotate_report(report)["notes"]

    if args.format == "text":
        lines = explain_report(report, locale=args.locale)
        if report is not None:
            lines.insert(0, "Hand: " + " ".join(format_cards(report.hand)) + f" | Cut: {report.cut}")
            lines.extend(render_explanations(notes, locale=args.locale))
        print("\n".join(lines))
    else:
        out = {"scorable": report is not None, "notes": [n["code"] for n in notes]}
        if report is not None:
            out["report"] = report.to_dict()
        print(json.dumps(out, ensure_ascii=False, indent=2))

    return EXIT_OK if report is not None else EXIT_NOT_SCORABLE


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
