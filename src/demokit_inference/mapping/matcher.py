"""Fuzzy matching of path-derived resource names against known model names.

Each heuristic is a separate function returning the matching model or None.
``find_matching_model`` tries them in order of decreasing confidence and
returns on the first hit, so an exact match always wins over a looser one.
"""

import re
from collections.abc import Callable, Sequence

from demokit_inference.config import DEFAULT_SETTINGS, InferenceSettings
from demokit_inference.mapping.models import ModelMatch

_ES_SUFFIXES = ("ses", "xes", "zes", "ches", "shes")
_VOWELS = "aeiou"


def singularize(word: str) -> str:
    """Strip a plural suffix: categories -> category, boxes -> box, users -> user."""
    if len(word) > 3 and word.endswith("ies"):
        return word[:-3] + "y"
    if word.endswith(_ES_SUFFIXES):
        return word[:-2]
    if word.endswith("s") and not word.endswith("ss"):
        return word[:-1]
    return word


def pluralize(word: str) -> str:
    """Add a plural suffix. Words already ending in 's' are returned unchanged."""
    if not word or word.endswith("s"):
        return word
    if word.endswith("y") and len(word) > 1 and word[-2] not in _VOWELS:
        return word[:-1] + "ies"
    if word.endswith(("x", "z", "ch", "sh")):
        return word + "es"
    return word + "s"


def normalize_name(name: str) -> str:
    """Lower-case and drop underscores and hyphens: Order_Items -> orderitems."""
    return re.sub(r"[_-]", "", name.lower())


def match_exact(candidate: str, models: Sequence[str]) -> str | None:
    target = candidate.lower()
    return next((m for m in models if m.lower() == target), None)


def match_plural(candidate: str, models: Sequence[str]) -> str | None:
    target = candidate.lower()
    forms = {singularize(target), pluralize(target)} - {target}
    return next((m for m in models if m.lower() in forms), None)


def match_normalized(candidate: str, models: Sequence[str]) -> str | None:
    target = normalize_name(candidate)
    if not target:
        return None
    return next((m for m in models if normalize_name(m) == target), None)


def _strategies(settings: InferenceSettings) -> list[tuple[str, int, Callable[[str, Sequence[str]], str | None]]]:
    return [
        ("exact", settings.confidence_exact, match_exact),
        ("plural", settings.confidence_plural, match_plural),
        ("normalized", settings.confidence_normalized, match_normalized),
    ]


def find_matching_model(
    candidate: str,
    available_models: Sequence[str],
    settings: InferenceSettings = DEFAULT_SETTINGS,
) -> ModelMatch | None:
    """Resolve ``candidate`` to one of ``available_models``, or None."""
    if not candidate:
        return None

    for strategy, confidence, matcher in _strategies(settings):
        model = matcher(candidate, available_models)
        if model is not None:
            return ModelMatch(model=model, confidence=confidence, strategy=strategy)
    return None
