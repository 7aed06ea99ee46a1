"""Tests for HostPathMatcher, narrow() and path_matches()."""

import pytest

from page_interests.core.matcher import HostPathMatcher, narrow, path_matches
from page_interests.core.rule_store import RuleStore


@pytest.fixture
def matcher(store):
    return HostPathMatcher(store)


class TestPathMatches:
    @pytest.mark.parametrize("path", ["/path", "/path/", "/path/sub", "/path?kw=x", "/path#hash"])
    def test_boundaries(self, path):
        assert path_matches("/path", path)

    @pytest.mark.parametrize("path", ["/pathological", "/pat", "/other/path", "path"])
    def test_non_matches(self, path):
        assert not path_matches("/path", path)


class TestNarrow:
    def test_absent(self):
        assert narrow(None, "/") is None
        assert narrow({}, "/") is None

    def test_any_returns_whole_rule_set(self):
        rules = {"__ANY": ["a"], "__HOME": ["b"], "kw": ["c"]}
        assert narrow(rules, "/anything") is rules
        assert narrow(rules, None) is rules

    def test_empty_any_still_short_circuits(self):
        rules = {"__ANY": [], "kw": ["c"]}
        assert narrow(rules, None) is rules

    def test_no_path_without_any(self):
        assert narrow({"__PATH": {"/a": {"__ANY": ["a"]}}}, None) is None
        assert narrow({"__PATH": {"/a": {"__ANY": ["a"]}}}, "") is None

    def test_first_matching_prefix_wins(self):
        rules = {"__PATH": {"/a": {"__ANY": ["first"]}, "/a/b": {"__ANY": ["second"]}}}
        assert narrow(rules, "/a/b") == {"__ANY": ["first"]}

    def test_no_prefix_match(self):
        assert narrow({"__PATH": {"/a": {"__ANY": ["a"]}}}, "/b") is None

    def test_keyword_only_host_needs_path_rules(self):
        assert narrow({"kw": ["c"]}, "/") is None


class TestResolve:
    def test_exact_host(self, matcher):
        assert matcher.resolve("example.com", "/") == {"__ANY": ["shopping"]}

    def test_exact_beats_wildcard(self):
        store = RuleStore()
        store.replace({
            "*.example.com": {"__ANY": ["wild"]},
            "www.example.com": {"__ANY": ["exact"]},
        })
        assert HostPathMatcher(store).resolve("www.example.com", "/") == {"__ANY": ["exact"]}
        assert HostPathMatcher(store).resolve("shop.example.com", "/") == {"__ANY": ["wild"]}

    def test_wildcard_with_path(self, matcher):
        assert matcher.resolve("a.travel.com", "/flights/cheap") == {"__ANY": ["travel"]}
        assert matcher.resolve("a.travel.com", "/hotels") is None

    def test_path_scoped_exact_host(self, matcher):
        assert matcher.resolve("news.org", "/sports") == {"__ANY": ["sports"]}
        assert matcher.resolve("news.org", "/sportscar") is None

    def test_exact_host_narrowing_empty_falls_back_to_wildcard(self):
        store = RuleStore()
        store.replace({
            "www.site.com": {"__PATH": {"/a": {"__ANY": ["exact"]}}},
            "*.site.com": {"__ANY": ["wild"]},
        })
        matcher = HostPathMatcher(store)
        assert matcher.resolve("www.site.com", "/a") == {"__ANY": ["exact"]}
        assert matcher.resolve("www.site.com", "/b") == {"__ANY": ["wild"]}

    def test_wildcard_scan_stops_at_first_host_match(self):
        store = RuleStore()
        store.replace({
            "*.site.com": {"__PATH": {"/a": {"__ANY": ["first"]}}},
            "*.com": {"__ANY": ["second"]},
        })
        assert HostPathMatcher(store).resolve("www.site.com", "/b") is None

    def test_unknown_host(self, matcher):
        assert matcher.resolve("unknown.net", "/") is None

    def test_wildcard_matches_whole_host_only(self, matcher):
        assert matcher.resolve("a.example.com", "/") == {"__ANY": ["wildcard-shopping"]}
        assert matcher.resolve("a.example.com\n", "/") is None

    def test_no_table_installed(self):
        assert HostPathMatcher(RuleStore()).resolve("example.com", "/") is None

    def test_tld_resolution_without_path(self, matcher):
        assert matcher.resolve("example.com", None) == {"__ANY": ["shopping"]}
        assert matcher.resolve("forum.com", None) is None
