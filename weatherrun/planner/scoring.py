"""Runnability score and top-pick selection."""

from dataclasses import replace

from weatherrun.models.recommendation import RunDaySummary

IDEAL_FEELSLIKE_F = 55.0
PRECIP_WEIGHT = 0.5


def run_score(
    feelslike: float,
    precipprob: float,
    ideal_feelslike: float = IDEAL_FEELSLIKE_F,
    precip_weight: float = PRECIP_WEIGHT,
) -> float:
    """Distance from the ideal feels-like temperature plus a precipitation penalty.

    Lower is better. A 55F feels-like with no chance of rain scores 0.
    """
    return abs(feelslike - ideal_feelslike) + precipprob * precip_weight


def top_pick_index(scores: list[float]) -> int | None:
    """Index of the lowest score; ties keep the earliest day."""
    if not scores:
        return None
    best_index = 0
    best_score = scores[0]
    for i in range(1, len(scores)):
        if scores[i] < best_score:
            best_score = scores[i]
            best_index = i
    return best_index


def mark_top_pick(summaries: list[RunDaySummary]) -> list[RunDaySummary]:
    """Return a new list with exactly one summary flagged as the top pick."""
    index = top_pick_index([s.score for s in summaries])
    if index is None:
        return []
    marked = list(summaries)
    marked[index] = replace(marked[index], is_top_pick=True)
    return marked
