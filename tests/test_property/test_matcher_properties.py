"""
Property-based tests for namespace matching, levels and context merging
using Hypothesis.
"""

from hypothesis import given
from hypothesis import strategies as st

from nslog.core.context import merge_context
from nslog.core.levels import Level, LevelGate
from nslog.core.namespaces import compile_pattern

# === Strategy Definitions ===

segments = st.text(
    min_size=1,
    max_size=12,
    alphabet=st.characters(
        whitelist_categories=["Ll", "Lu", "Nd"],
        whitelist_characters=["_", "."],
    ),
)

namespaces = st.lists(segments, min_size=1, max_size=5).map(":".join)

levels = st.sampled_from(list(Level))

contexts = st.dictionaries(
    st.text(min_size=1, max_size=8),
    st.one_of(st.integers(), st.text(max_size=8), st.booleans(), st.none()),
    max_size=6,
)


# === Namespace matching ===


@given(namespace=namespaces)
def test_star_matches_everything(namespace):
    assert compile_pattern("*").test(namespace)


@given(namespace=namespaces)
def test_empty_pattern_matches_nothing(namespace):
    assert not compile_pattern("").test(namespace)


@given(prefix=namespaces, rest=st.lists(segments, min_size=1, max_size=4))
def test_trailing_wildcard_matches_nested(prefix, rest):
    pattern = compile_pattern(f"{prefix}:*")
    assert pattern.test(":".join([prefix, *rest]))
    assert not pattern.test(prefix)


@given(namespace=namespaces)
def test_exact_rule_matches_itself(namespace):
    assert compile_pattern(namespace).test(namespace)


@given(namespace=namespaces, other=namespaces)
def test_disable_always_wins(namespace, other):
    pattern = compile_pattern(f"*, {namespace}, -{namespace}")
    assert not pattern.test(namespace)
    assert pattern.test(other) == (other != namespace)


@given(first=namespaces, second=namespaces, candidate=namespaces)
def test_rule_order_is_irrelevant(first, second, candidate):
    forward = compile_pattern(f"{first}:*, -{second}")
    backward = compile_pattern(f"-{second} {first}:*")
    assert forward.test(candidate) == backward.test(candidate)


@given(namespace=namespaces)
def test_matching_is_case_sensitive(namespace):
    swapped = namespace.swapcase()
    pattern = compile_pattern(namespace)
    assert pattern.test(swapped) == (swapped == namespace)


# === Levels ===


@given(a=levels, b=levels)
def test_gate_follows_rank(a, b):
    gate = LevelGate(b)
    assert gate.is_enabled(a) == (a.rank >= b.rank)


@given(a=levels, b=levels)
def test_lower_rank_disabled(a, b):
    if a.rank < b.rank:
        gate = LevelGate(b)
        assert not gate.is_enabled(a)
        assert gate.is_enabled(b)


# === Context ===


@given(global_ctx=contexts, local_ctx=contexts, inline=contexts)
def test_merge_is_key_wise_override(global_ctx, local_ctx, inline):
    merged = merge_context(global_ctx, local_ctx, inline)
    assert set(merged) == set(global_ctx) | set(local_ctx) | set(inline)
    for key, value in merged.items():
        if key in inline:
            assert value == inline[key]
        elif key in local_ctx:
            assert value == local_ctx[key]
        else:
            assert value == global_ctx[key]
