from collections.abc import Iterable

from .media_range import parse_and_normalize_media_range, parse_ranges
from .models import MediaRange, ScoredCandidate


def score_against_ranges(mime_type: str, parsed_ranges: Iterable[MediaRange]) -> tuple[float, int]:
    """Quality and fitness of the most specific range matching `mime_type`.

    Returns (0.0, -1) if no range matches. An exact type match scores 100, an
    exact subtype match 10 and each shared parameter (other than "q") 1.
    Wildcards score nothing. On equal fitness the earlier range wins.
    """
    target = parse_and_normalize_media_range(mime_type)
    best_fitness = -1
    best_quality = 0.0

    for media_range in parsed_ranges:
        type_matches = media_range.type in (target.type, "*") or target.type == "*"
        subtype_matches = media_range.subtype in (target.subtype, "*") or target.subtype == "*"
        if not (type_matches and subtype_matches):
            continue

        param_matches = sum(
            1
            for key, value in target.params.items()
            if key != "q" and media_range.params.get(key) == value
        )
        fitness = 100 if media_range.type == target.type and target.type != "*" else 0
        fitness += 10 if media_range.subtype == target.subtype and target.subtype != "*" else 0
        fitness += param_matches

        if fitness > best_fitness:
            best_fitness = fitness
            best_quality = media_range.quality

    return best_quality, best_fitness


def quality_parsed(mime_type: str, parsed_ranges: Iterable[MediaRange]) -> float:
    quality, _ = score_against_ranges(mime_type, parsed_ranges)
    return quality


def quality(mime_type: str, ranges: str) -> float:
    """Quality of `mime_type` against an Accept-style header.

    >>> quality("text/html", "text/*;q=0.3, text/html;q=0.7, */*;q=0.5")
    0.7
    """
    return quality_parsed(mime_type, parse_ranges(ranges))


def best_match(supported: Iterable[str], header: str) -> str | None:
    """Pick the entry of `supported` the client prefers most.

    Candidates are ranked by quality, then fitness, then position in
    `supported` (earlier wins). Candidates with quality 0 are unacceptable.
    Returns None if nothing is acceptable.
    """
    parsed_header = parse_ranges(header)

    candidates: list[ScoredCandidate] = []
    for index, mime_type in enumerate(supported):
        q, fitness = score_against_ranges(mime_type, parsed_header)
        if q:
            candidates.append(ScoredCandidate(q, fitness, -index, mime_type))

    if not candidates:
        return None
    return max(candidates).mime_type
