"""
Bundle Rule Matching.

Resolves an artifact name to the size budget that governs it.

Resolution order:
1. Exact name match (first declared rule wins)
2. Regex match over every rule name (unanchored search)
   - one distinct rule name matches: that rule
   - several distinct names match: ambiguous
3. Nothing matches: missing
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Pattern, Sequence, Tuple

from loguru import logger

from sizeguard.schemas import BundleRule


class MatchKind(str, Enum):
    MATCHED = "matched"
    AMBIGUOUS = "ambiguous"
    MISSING = "missing"


@dataclass(frozen=True)
class MatchResult:
    """Outcome of resolving one artifact name."""

    kind: MatchKind
    rule: Optional[BundleRule] = None
    candidates: Tuple[str, ...] = ()  # Matching rule names when ambiguous

    @classmethod
    def matched(cls, rule: BundleRule) -> "MatchResult":
        return cls(kind=MatchKind.MATCHED, rule=rule)

    @classmethod
    def ambiguous(cls, names: Sequence[str]) -> "MatchResult":
        return cls(kind=MatchKind.AMBIGUOUS, candidates=tuple(names))

    @classmethod
    def missing(cls) -> "MatchResult":
        return cls(kind=MatchKind.MISSING)

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "rule": self.rule.model_dump() if self.rule else None,
            "candidates": list(self.candidates),
        }


def _compile(name: str) -> Optional[Pattern]:
    try:
        return re.compile(name)
    except re.error as e:
        # Still usable as an exact name
        logger.debug(f"Rule '{name}' is not a valid pattern ({e}); exact matches only")
        return None


class BundleMatcher:
    """
    Matches artifact names against an ordered rule set.

    Patterns are compiled once, so build one matcher per build and reuse it
    for every artifact. The matcher has no side effects.
    """

    def __init__(self, rules: Sequence[BundleRule]):
        self.rules: Tuple[BundleRule, ...] = tuple(rules)
        self._patterns: List[Tuple[BundleRule, Pattern]] = []
        for rule in self.rules:
            pattern = _compile(rule.name)
            if pattern is not None:
                self._patterns.append((rule, pattern))

    def resolve(self, file_name: str) -> MatchResult:
        for rule in self.rules:
            if rule.name == file_name:
                return MatchResult.matched(rule)

        # Dedupe on declared name text so repeated entries never look ambiguous
        hits: dict = {}
        for rule, pattern in self._patterns:
            if rule.name not in hits and pattern.search(file_name):
                hits[rule.name] = rule

        if len(hits) == 1:
            return MatchResult.matched(next(iter(hits.values())))
        if hits:
            return MatchResult.ambiguous(list(hits))
        return MatchResult.missing()
