"""
Tests for bundle rule resolution.
"""

from sizeguard.budget.matcher import BundleMatcher, MatchKind, MatchResult
from sizeguard.schemas import BundleRule


def _rule(name: str) -> BundleRule:
    return BundleRule(name=name, max_size_in_bytes=1000, max_size="1000B", unit="B")


class TestExactMatch:

    def test_exact_name_wins_over_patterns(self):
        """Exact matches beat pattern matches regardless of declaration order."""
        matcher = BundleMatcher([_rule(".*\\.js$"), _rule("^app"), _rule("app.js")])
        result = matcher.resolve("app.js")
        assert result.kind is MatchKind.MATCHED
        assert result.rule.name == "app.js"

    def test_first_declared_duplicate_wins(self):
        first = BundleRule(name="app.js", max_size_in_bytes=1, max_size="1B", unit="B")
        second = BundleRule(name="app.js", max_size_in_bytes=2, max_size="2B", unit="B")
        result = BundleMatcher([first, second]).resolve("app.js")
        assert result.rule is first

    def test_invalid_pattern_still_matches_exactly(self):
        matcher = BundleMatcher([_rule("main[.js")])
        assert matcher.resolve("main[.js").kind is MatchKind.MATCHED
        assert matcher.resolve("main.js").kind is MatchKind.MISSING


class TestPatternMatch:

    def test_single_pattern_match(self):
        matcher = BundleMatcher([_rule("^vendor\\..*\\.js$"), _rule("\\.css$")])
        result = matcher.resolve("vendor.abc123.js")
        assert result.kind is MatchKind.MATCHED
        assert result.rule.name == "^vendor\\..*\\.js$"

    def test_patterns_are_unanchored(self):
        """Patterns search anywhere in the name, like RegExp.test."""
        result = BundleMatcher([_rule("chunk")]).resolve("static/js/chunk.42.js")
        assert result.kind is MatchKind.MATCHED

    def test_exact_name_also_used_as_pattern(self):
        """A plain name like 'app.js' is also a regex ('.' matches any char)."""
        result = BundleMatcher([_rule("app.js")]).resolve("webapp-js.map")
        assert result.kind is MatchKind.MATCHED
        assert result.rule.name == "app.js"

    def test_ambiguous_lists_names_in_declaration_order(self):
        matcher = BundleMatcher([_rule("^app.*"), _rule("\\.css$"), _rule("^a.*")])
        result = matcher.resolve("app.js")
        assert result.kind is MatchKind.AMBIGUOUS
        assert result.candidates == ("^app.*", "^a.*")
        assert result.rule is None

    def test_ambiguity_dedupes_on_name(self):
        """Two entries with identical pattern text count as one candidate."""
        matcher = BundleMatcher([_rule("^app"), _rule("^app")])
        result = matcher.resolve("app.js")
        assert result.kind is MatchKind.MATCHED
        assert result.rule.name == "^app"

    def test_ambiguity_dedupe_keeps_distinct_names(self):
        matcher = BundleMatcher([_rule("^app"), _rule("js$"), _rule("^app")])
        result = matcher.resolve("app.js")
        assert result.candidates == ("^app", "js$")


class TestMissing:

    def test_no_rules(self):
        assert BundleMatcher([]).resolve("main.js").kind is MatchKind.MISSING

    def test_no_match(self):
        result = BundleMatcher([_rule("^vendor")]).resolve("main.js")
        assert result == MatchResult.missing()
        assert result.candidates == ()


class TestMatchResult:

    def test_to_dict_matched(self):
        d = MatchResult.matched(_rule("main.js")).to_dict()
        assert d["kind"] == "matched"
        assert d["rule"]["name"] == "main.js"
        assert d["candidates"] == []

    def test_to_dict_ambiguous(self):
        d = MatchResult.ambiguous(["a", "b"]).to_dict()
        assert d == {"kind": "ambiguous", "rule": None, "candidates": ["a", "b"]}

    def test_resolve_is_repeatable(self):
        matcher = BundleMatcher([_rule("^app.*"), _rule("^a.*")])
        assert matcher.resolve("app.js") == matcher.resolve("app.js")
