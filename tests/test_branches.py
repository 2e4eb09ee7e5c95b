"""Tests for branch lane registration."""

import pytest

from post_graph.config import LayoutConfig
from post_graph.errors import ReservedBranchError
from post_graph.layout.branches import build_branch_registry, collect_primary_tags, slugify_tag
from post_graph.records import coerce_records


class TestSlugifyTag:
    def test_lowercases_and_hyphenates(self) -> None:
        assert slugify_tag("Machine Learning") == "machine-learning"

    def test_drops_punctuation(self) -> None:
        assert slugify_tag("C++ Tips!") == "c-tips"

    def test_keeps_unicode_letters(self) -> None:
        assert slugify_tag("Café") == "café"


class TestBuildBranchRegistry:
    def test_main_only_without_tags(self, make_post) -> None:
        """Untagged posts produce no lanes besides main."""
        records = coerce_records([make_post("a", "2024-01-02"), make_post("b", "2024-01-01")])
        registry = build_branch_registry(records, LayoutConfig())

        assert [branch.id for branch in registry] == ["main"]
        assert registry.main.x == 150
        assert registry.main.color == "#6b7280"

    def test_tags_sorted_case_insensitively(self, make_post) -> None:
        records = coerce_records(
            [
                make_post("a", "2024-03-01", "zebra"),
                make_post("b", "2024-02-01", "Apple"),
                make_post("c", "2024-01-01", "mango"),
            ]
        )
        registry = build_branch_registry(records, LayoutConfig())

        assert [branch.name for branch in registry] == ["main", "Apple", "mango", "zebra"]
        assert [branch.id for branch in registry] == ["main", "apple", "mango", "zebra"]

    def test_lanes_fan_out_left_of_main(self, make_post) -> None:
        """The alphabetically last tag sits next to main."""
        records = coerce_records(
            [
                make_post("a", "2024-03-01", "zebra"),
                make_post("b", "2024-02-01", "Apple"),
                make_post("c", "2024-01-01", "mango"),
            ]
        )
        registry = build_branch_registry(records, LayoutConfig())

        assert registry.get("apple").x == -90
        assert registry.get("mango").x == -10
        assert registry.get("zebra").x == 70

    def test_palette_wraps_by_rank(self, make_post) -> None:
        tags = [f"tag{index:02d}" for index in range(10)]
        records = coerce_records(
            [make_post(f"p{index}", "2024-01-01", tag) for index, tag in enumerate(tags)]
        )
        config = LayoutConfig()
        registry = build_branch_registry(records, config)

        colors = [branch.color for branch in registry.branches[1:]]
        assert colors[:8] == list(config.palette)
        assert colors[8] == config.palette[0]
        assert colors[9] == config.palette[1]

    def test_only_primary_tag_counts(self, make_post) -> None:
        records = coerce_records([make_post("a", "2024-01-01", "life", "fitness")])
        registry = build_branch_registry(records, LayoutConfig())

        assert [branch.id for branch in registry] == ["main", "life"]

    def test_drafts_do_not_create_lanes(self, make_post) -> None:
        records = coerce_records(
            [
                make_post("a", "2024-01-02", "secret", draft=True),
                make_post("b", "2024-01-01", "life"),
            ]
        )
        registry = build_branch_registry(records, LayoutConfig())

        assert registry.get("secret") is None
        assert [branch.id for branch in registry] == ["main", "life"]

    def test_for_tag_resolves_by_slug(self, make_post) -> None:
        records = coerce_records([make_post("a", "2024-01-01", "Deep Work")])
        registry = build_branch_registry(records, LayoutConfig())

        assert registry.for_tag("Deep Work").id == "deep-work"
        assert registry.for_tag(None) is None
        assert registry.for_tag("") is None

    def test_spacing_follows_config(self, make_post) -> None:
        records = coerce_records([make_post("a", "2024-01-01", "life")])
        registry = build_branch_registry(records, LayoutConfig(main_x=300, branch_spacing=50))

        assert registry.get("life").x == 250


class TestBranchIdCollisions:
    def test_tag_named_main_is_rejected(self, make_post) -> None:
        records = coerce_records([make_post("a", "2024-01-01", "Main")])
        with pytest.raises(ReservedBranchError) as error:
            build_branch_registry(records, LayoutConfig())
        assert error.value.tag == "Main"

    def test_tags_sharing_a_slug_share_one_lane(self, make_post) -> None:
        """Spellings differing only in case land on the lane named by the first in sort order."""
        records = coerce_records(
            [make_post("a", "2024-01-02", "life"), make_post("b", "2024-01-01", "Life")]
        )
        registry = build_branch_registry(records, LayoutConfig())

        assert [(branch.id, branch.name) for branch in registry] == [("main", "main"), ("life", "Life")]
        assert registry.get("life").x == 70
        assert registry.get("life").color == LayoutConfig().palette[0]
        assert registry.for_tag("life") is registry.for_tag("Life")

    def test_shared_slug_lanes_keep_rank_spacing(self, make_post) -> None:
        records = coerce_records(
            [
                make_post("a", "2024-01-03", "Life"),
                make_post("b", "2024-01-02", "life"),
                make_post("c", "2024-01-01", "zebra"),
            ]
        )
        registry = build_branch_registry(records, LayoutConfig())

        assert [branch.id for branch in registry] == ["main", "life", "zebra"]
        assert registry.get("life").x == -10
        assert registry.get("zebra").x == 70

    def test_tag_without_slug_characters_stays_on_main(self, make_post) -> None:
        records = coerce_records(
            [make_post("a", "2024-01-02", "🚀"), make_post("b", "2024-01-01", "!!!")]
        )
        registry = build_branch_registry(records, LayoutConfig())

        assert [branch.id for branch in registry] == ["main"]
        assert registry.for_tag("🚀") is None


def test_collect_primary_tags_is_total_order(make_post) -> None:
    """Tags differing only in case still sort deterministically."""
    records = coerce_records(
        [make_post("a", "2024-01-02", "beta"), make_post("b", "2024-01-01", "Beta")]
    )
    assert collect_primary_tags(records) == ["Beta", "beta"]
