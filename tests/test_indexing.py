"""Tests for index building and aggregation."""

import pytest

from sdoc.config import IndexingConfig
from sdoc.indexing.aggregator import aggregate_indexes, merge_index
from sdoc.indexing.builder import (
    build_index,
    index_snippet,
    indexed_text,
    is_compound_key,
    tokenize,
)
from sdoc.models import Document, SectionSnippet, SourceSnippet


# ── Tokenizing ───────────────────────────────────────────────────────────────


class TestTokenize:
    def test_splits_on_non_word_runs(self) -> None:
        assert tokenize("foo(bar, baz);") == ["foo", "bar", "baz"]

    def test_keeps_hyphens_and_underscores(self) -> None:
        assert tokenize("well-known snake_case") == ["well-known", "snake_case"]

    def test_drops_empty_tokens(self) -> None:
        assert tokenize("  ...  ") == []
        assert tokenize("\n  Does things.") == ["Does", "things"]

    def test_digits_are_tokens(self) -> None:
        assert tokenize("x = 42") == ["x", "42"]


# ── Building ─────────────────────────────────────────────────────────────────


class TestBuildIndex:
    def test_pair_relevance_is_inverse_gap(self) -> None:
        index = build_index("foo bar bif baz")
        assert index["foo:bif"] == 0.5
        assert index["foo:bar"] == 1
        assert index["foo:baz"] == pytest.approx(1 / 3)

    def test_singletons_count_occurrences(self) -> None:
        index = build_index("a b a")
        assert index["a"] == 2
        assert index["b"] == 1

    def test_relevance_is_additive(self) -> None:
        index = build_index("a b a b")
        # a:b at gaps 1 (twice) and 3
        assert index["a:b"] == pytest.approx(1 + 1 + 1 / 3)
        assert index["b:a"] == 1
        assert index["a:a"] == 0.5

    def test_pairs_are_ordered(self) -> None:
        index = build_index("foo bar")
        assert "foo:bar" in index
        assert "bar:foo" not in index

    def test_window_limits_pairs(self) -> None:
        tokens = [f"t{i}" for i in range(12)]
        index = build_index(" ".join(tokens))
        assert index["t0:t9"] == pytest.approx(1 / 9)
        assert "t0:t10" not in index

    def test_custom_window(self) -> None:
        config = IndexingConfig(window=4)
        index = build_index("foo bar bif baz qux", config)
        assert index["foo:baz"] == pytest.approx(1 / 3)
        assert "foo:qux" not in index

    def test_custom_separator(self) -> None:
        index = build_index("foo bar", IndexingConfig(pair_separator="/"))
        assert index["foo/bar"] == 1

    def test_empty_text(self) -> None:
        assert build_index("") == {}

    def test_case_sensitive(self) -> None:
        index = build_index("Foo foo")
        assert index["Foo"] == 1
        assert index["foo"] == 1


class TestIndexSnippet:
    def test_section_title_included(self) -> None:
        section = SectionSnippet(text="  Does things.", section="Foo class", level=1)
        indexed = index_snippet(section)
        assert indexed.index["Foo"] == 1
        assert indexed.index["class:Does"] == 1
        assert section.index == {}

    def test_section_title_excluded(self) -> None:
        section = SectionSnippet(text="Does things.", section="Foo class", level=1)
        indexed = index_snippet(section, IndexingConfig(include_section_title=False))
        assert "Foo" not in indexed.index
        assert indexed_text(section, False) == "Does things."

    def test_title_and_body_do_not_fuse(self) -> None:
        section = SectionSnippet(text="Body", section="Title", level=1)
        assert "TitleBody" not in index_snippet(section).index

    def test_index_is_rebuilt(self) -> None:
        snippet = SourceSnippet(text="x", index={"stale": 3})
        assert index_snippet(snippet).index == {"x": 1}


class TestCompoundKeys:
    def test_compound(self) -> None:
        assert is_compound_key("foo:bar")
        assert not is_compound_key("foo")
        assert is_compound_key("foo/bar", "/")


# ── Aggregation ──────────────────────────────────────────────────────────────


def _tree() -> Document:
    inner = SectionSnippet(
        text="",
        section="Inner",
        level=2,
        index={"inner": 1},
        subsnippets=[SourceSnippet(text="", index={"code": 2, "shared": 1})],
    )
    outer = SectionSnippet(
        text="",
        section="Outer",
        level=1,
        index={"outer": 1, "shared": 1},
        subsnippets=[inner, SourceSnippet(text="", index={"shared": 0.5})],
    )
    return Document(section="file", subsnippets=[outer])


class TestAggregateIndexes:
    def test_parent_sums_children(self) -> None:
        document = aggregate_indexes(_tree())
        outer = document.subsnippets[0]
        assert isinstance(outer, SectionSnippet)
        assert outer.index == {"outer": 1, "shared": 2.5, "inner": 1, "code": 2}

    def test_nested_sections_aggregate_first(self) -> None:
        document = aggregate_indexes(_tree())
        inner = document.subsnippets[0].subsnippets[0]  # type: ignore[union-attr]
        assert inner.index == {"inner": 1, "code": 2, "shared": 1}

    def test_root_holds_everything(self) -> None:
        document = aggregate_indexes(_tree())
        assert document.index == {"outer": 1, "shared": 2.5, "inner": 1, "code": 2}

    def test_leaves_unchanged(self) -> None:
        leaf = SourceSnippet(text="", index={"a": 1})
        assert aggregate_indexes(leaf) is leaf

    def test_childless_section_unchanged(self) -> None:
        section = SectionSnippet(text="", section="S", level=1, index={"s": 1})
        assert aggregate_indexes(section) is section

    def test_input_not_modified(self) -> None:
        tree = _tree()
        aggregate_indexes(tree)
        assert tree.index == {}
        assert tree.subsnippets[0].index == {"outer": 1, "shared": 1}

    def test_repeated_runs_on_fresh_tree_agree(self) -> None:
        assert aggregate_indexes(_tree()) == aggregate_indexes(_tree())
        tree = _tree()
        assert aggregate_indexes(tree) == aggregate_indexes(tree)

    def test_merge_index(self) -> None:
        target = {"a": 1.0}
        merge_index(target, {"a": 2, "b": 1})
        assert target == {"a": 3.0, "b": 1}
