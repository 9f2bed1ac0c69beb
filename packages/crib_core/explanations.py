"""Render rationale items into human-readable breakdown lines.

Public API:
- load_explanations(locale='en') -> dict[str, str]
- render_explanations(rationale, meta, extras) -> list[str]
- explain_report(report) -> list[str]
"""

from __future__ import annotations

from string import Formatter
from typing import Any

from .analysis import report_rationale
from .config_loader import load_config
from .context import DEFAULT_LOCALE, ScoringContext
from .scoring.types import ScoreReport


def load_explanations(locale: str = DEFAULT_LOCALE) -> dict[str, str]:
    """Templates from explanations_<locale>.json, falling back to en."""
    want = (locale or DEFAULT_LOCALE).lower()
    data = load_config(f"explanations_{want}.json")
    if not data and want != DEFAULT_LOCALE:
        data = load_config(f"explanations_{DEFAULT_LOCALE}.json")
    return {str(k): v for k, v in data.items() if isinstance(v, str)}


def _format_template(tpl: str, ctx: dict[str, Any]) -> str:
    """Per-field formatting; unknown placeholders stay in the output as-is."""
    try:
        parsed = list(Formatter().parse(str(tpl)))
    except ValueError:
        return str(tpl)
    parts: list[str] = []
    for literal, field_name, fmt_spec, conv in parsed:
        parts.append(literal or "")
        if not field_name:
            continue
        if field_name not in ctx:
            if fmt_spec:
                parts.append("{" + field_name + ":" + fmt_spec + "}")
            else:
                parts.append("{" + field_name + "}")
            continue
        val = ctx[field_name]
        if conv == "r":
            val = repr(val)
        elif conv == "s":
            val = str(val)
        try:
            parts.append(format(val, fmt_spec or ""))
        except (TypeError, ValueError):
            parts.append(str(val))
    return "".join(parts)


def render_explanations(
    rationale: list[dict] | None,
    meta: dict | None = None,
    extras: dict | None = None,
    locale: str | None = None,
) -> list[str]:
    """Render rationale items to strings using templates + context data.

    Precedence for template variables: rationale.data -> meta -> extras.
    Without a template for a code, fall back to rationale.msg, then the code.
    """
    items = list(rationale or [])
    mapping = load_explanations(locale or ScoringContext.build().locale)
    out: list[str] = []
    for r in items:
        code = str((r or {}).get("code") or "")
        tpl = mapping.get(code) or r.get("msg") or code or ""
        ctx: dict[str, Any] = {}
        data = r.get("data")
        if isinstance(data, dict):
            ctx.update(data)
        if isinstance(meta, dict):
            ctx.update(meta)
        if isinstance(extras, dict):
            ctx.update(extras)
        out.append(_format_template(str(tpl), ctx).strip())
    return [s for s in out if s]


def explain_report(report: ScoreReport | None, locale: str | None = None) -> list[str]:
    """Breakdown lines for a report; an incomplete hand gets the selection hint."""
    return render_explanations(report_rationale(report), locale=locale)


__all__ = ["load_explanations", "render_explanations", "explain_report"]
