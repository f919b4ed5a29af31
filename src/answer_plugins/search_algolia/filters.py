"""Filter construction — Translate host search conditions into Algolia filters.

Algolia filters are a small boolean grammar::

    status<10 AND type:question AND (tags:1 OR tags:2) AND views>=10

Each builder starts from a fixed base clause and appends independent clauses
joined with ``AND``.  Numeric thresholds do not share one policy:

  - votes, answers: ``0`` filters for exactly zero, ``n > 0`` for at least
    ``n``, negative values add nothing.
  - views: any value above ``-1`` (including ``0``) filters for at least
    that value.
"""

from __future__ import annotations

from answer_plugins.models.search import AcceptedCond, SearchBasicCond

# Hides deleted and otherwise unavailable content.
STATUS_FILTER = "status<10"
QUESTION_FILTER = f"{STATUS_FILTER} AND type:question"
ANSWER_FILTER = f"{STATUS_FILTER} AND type:answer"


def build_query(words: list[str]) -> str:
    """Join query words into the free-text query; empty means match-all."""
    return " ".join(words).strip()


def build_tag_filter(tag_ids: list[list[str]]) -> str | None:
    """AND together one ``(tags:a OR tags:b)`` clause per non-empty tag group."""
    groups = [
        "(" + " OR ".join(f"tags:{tag_id}" for tag_id in group) + ")"
        for group in tag_ids
        if group
    ]
    if not groups:
        return None
    return " AND ".join(groups)


def _zero_or_at_least(field: str, amount: int) -> str | None:
    if amount == 0:
        return f"{field}=0"
    if amount > 0:
        return f"{field}>={amount}"
    return None


def _join(base: str, *clauses: str | None) -> str:
    return " AND ".join([base, *(c for c in clauses if c)])


def build_content_filters(cond: SearchBasicCond) -> str:
    """Filters for searching questions and answers together."""
    return _join(
        STATUS_FILTER,
        build_tag_filter(cond.tag_ids),
        f"userID:{cond.user_id}" if cond.user_id else None,
        _zero_or_at_least("votes", cond.vote_amount),
    )


def build_question_filters(cond: SearchBasicCond) -> str:
    """Filters for searching questions."""
    return _join(
        QUESTION_FILTER,
        build_tag_filter(cond.tag_ids),
        "hasAccepted:false" if cond.question_accepted == AcceptedCond.FALSE else None,
        f"views>={cond.view_amount}" if cond.view_amount > -1 else None,
        _zero_or_at_least("answers", cond.answer_amount),
    )


def build_answer_filters(cond: SearchBasicCond, scope_separator: str = " AND ") -> str:
    """Filters for searching answers.

    The ``questionID`` scope is appended with ``scope_separator``.  Pass
    ``""`` to get the historical concatenation without a separator.
    """
    filters = _join(
        ANSWER_FILTER,
        build_tag_filter(cond.tag_ids),
        "hasAccepted:true" if cond.answer_accepted == AcceptedCond.TRUE else None,
    )
    if cond.question_id:
        filters += f"{scope_separator}questionID={cond.question_id}"
    return filters
