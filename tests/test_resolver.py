"""Tests for alias and filter resolution."""

from hypothesis import assume, given
from hypothesis import strategies as st

from shared.models import Cluster, RawCluster
from shared.resolver import resolve


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def _make_raw(identifier, brokers=("b1:9092", "b2:9092"), version="3.5.1"):
    return RawCluster(
        identifier=identifier,
        brokers=tuple(brokers),
        version=version,
        arn=f"arn:aws:kafka:us-east-1:123456789012:cluster/{identifier}/abc",
    )


_IDENTIFIERS = st.text(
    alphabet="abcdefghijklmnopqrstuvwxyz0123456789-", min_size=1, max_size=12
)
_RAW_LISTS = st.lists(_IDENTIFIERS, max_size=8, unique=True).map(
    lambda ids: [_make_raw(i) for i in ids]
)
_ALIASES = st.dictionaries(_IDENTIFIERS, st.text(max_size=12), max_size=8)


# ---------------------------------------------------------------------------
# Properties
# ---------------------------------------------------------------------------
@given(raw=_RAW_LISTS, aliases=_ALIASES)
def test_display_name_is_alias_or_identifier(raw, aliases):
    for cluster in resolve(raw, aliases, None):
        if cluster.identifier in aliases:
            assert cluster.display_name == aliases[cluster.identifier]
            assert cluster.alias == aliases[cluster.identifier]
        else:
            assert cluster.display_name == cluster.identifier
            assert cluster.alias is None


@given(raw=_RAW_LISTS, wanted=st.sets(_IDENTIFIERS, min_size=1, max_size=5))
def test_filter_keeps_only_wanted_identifiers(raw, wanted):
    for cluster in resolve(raw, {}, wanted):
        assert cluster.identifier in wanted


@given(raw=_RAW_LISTS)
def test_empty_filter_keeps_every_cluster_in_order(raw):
    resolved = resolve(raw, {}, set())
    assert [c.identifier for c in resolved] == [r.identifier for r in raw]


@given(raw=_RAW_LISTS, aliases=_ALIASES, wanted=st.sets(_IDENTIFIERS, max_size=5))
def test_resolve_is_idempotent(raw, aliases, wanted):
    assert resolve(raw, aliases, wanted) == resolve(raw, aliases, wanted)


@given(raw=_RAW_LISTS, aliases=_ALIASES)
def test_filter_matches_identifier_not_alias(raw, aliases):
    wanted = set(aliases.values())
    assume(wanted)
    for cluster in resolve(raw, aliases, wanted):
        assert cluster.identifier in wanted


# ---------------------------------------------------------------------------
# Scenarios
# ---------------------------------------------------------------------------
class TestResolveScenarios:
    def test_no_alias_no_filter(self):
        resolved = resolve([_make_raw("prod-1")], {}, set())
        assert resolved == [
            Cluster(
                identifier="prod-1",
                display_name="prod-1",
                brokers=("b1:9092", "b2:9092"),
                version="3.5.1",
                alias=None,
                arn="arn:aws:kafka:us-east-1:123456789012:cluster/prod-1/abc",
            )
        ]

    def test_alias_overrides_display_name(self):
        resolved = resolve([_make_raw("prod-1")], {"prod-1": "production"}, None)
        assert resolved[0].display_name == "production"
        assert resolved[0].identifier == "prod-1"

    def test_filter_selects_staging(self):
        raw = [_make_raw("prod-1"), _make_raw("staging")]
        resolved = resolve(raw, {}, {"staging"})
        assert [c.identifier for c in resolved] == ["staging"]

    def test_filter_ignores_alias(self):
        raw = [_make_raw("prod-1")]
        assert resolve(raw, {"prod-1": "production"}, {"production"}) == []

    def test_unmatched_alias_is_ignored(self):
        resolved = resolve([_make_raw("prod-1")], {"nope": "x"}, None)
        assert resolved[0].display_name == "prod-1"

    def test_empty_input(self):
        assert resolve([], {"a": "b"}, {"a"}) == []

    def test_repeated_identifier_keeps_first(self):
        raw = [_make_raw("a", brokers=["first:9092"]), _make_raw("a", brokers=["second:9092"])]
        resolved = resolve(raw, {}, None)
        assert len(resolved) == 1
        assert resolved[0].brokers == ("first:9092",)

    def test_alias_is_not_normalized(self):
        resolved = resolve([_make_raw("prod-1")], {"prod-1": "  Prod One "}, None)
        assert resolved[0].display_name == "  Prod One "

    def test_inputs_are_not_mutated(self):
        raw = [_make_raw("prod-1")]
        aliases = {"prod-1": "production"}
        wanted = {"prod-1"}
        resolve(raw, aliases, wanted)
        assert raw == [_make_raw("prod-1")]
        assert aliases == {"prod-1": "production"}
        assert wanted == {"prod-1"}
