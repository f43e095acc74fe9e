#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for MIME type classification and selection."""
import pytest
from hypothesis import given
from hypothesis import strategies as st

from nbast.mime_types import (
    MIME_TYPE_PRIORITY,
    MimeCategory,
    get_mime_type_category,
    get_mime_type_priority,
    is_binary_mime_type,
    is_html_mime_type,
    is_image_mime_type,
    is_json_mime_type,
    is_markdown_mime_type,
    is_standard_mime_type,
    is_text_mime_type,
    is_visualization_mime_type,
    is_widget_mime_type,
    normalize_mime_data,
    select_best_mime_type,
)


@pytest.mark.unit
class TestMimeCategory:
    """Test category precedence."""

    @pytest.mark.parametrize(
        "mime_type,expected",
        [
            ("text/plain", MimeCategory.TEXT),
            ("text/html", MimeCategory.TEXT),
            ("text/latex", MimeCategory.TEXT),
            ("image/svg+xml", MimeCategory.IMAGE),
            ("image/png", MimeCategory.IMAGE),
            ("image/tiff", MimeCategory.IMAGE),
            ("application/pdf", MimeCategory.BINARY),
            ("application/json", MimeCategory.JSON),
            ("application/ld+json", MimeCategory.JSON),
            ("application/vnd.jupyter.widget-view+json", MimeCategory.WIDGET),
            ("application/vnd.jupyter.widget-state+json", MimeCategory.WIDGET),
            ("application/vnd.plotly.v1+json", MimeCategory.VISUALIZATION),
            ("application/vnd.vegalite.v5+json", MimeCategory.VISUALIZATION),
            ("application/vnd.bokehjs_exec.v0+json", MimeCategory.VISUALIZATION),
            ("application/javascript", MimeCategory.TEXT),
            ("application/x-unknown", MimeCategory.UNKNOWN),
            ("", MimeCategory.UNKNOWN),
        ],
    )
    def test_categories(self, mime_type, expected) -> None:
        assert get_mime_type_category(mime_type) == expected

    def test_category_values(self) -> None:
        assert MimeCategory.VISUALIZATION.value == "visualization"
        assert MimeCategory("unknown") is MimeCategory.UNKNOWN

    @given(st.text(max_size=40))
    def test_never_raises(self, mime_type) -> None:
        assert isinstance(get_mime_type_category(mime_type), MimeCategory)
        assert get_mime_type_priority(mime_type) >= 0


@pytest.mark.unit
class TestPredicates:
    """Test individual membership tests."""

    def test_text_is_a_fixed_list(self) -> None:
        assert is_text_mime_type("text/markdown")
        assert is_text_mime_type("image/svg+xml")
        assert not is_text_mime_type("text/x-python")

    def test_json_suffix(self) -> None:
        assert is_json_mime_type("application/geo+json")
        assert is_json_mime_type("application/vnd.custom+json")
        assert not is_json_mime_type("application/jsonp")

    def test_image_prefix(self) -> None:
        assert is_image_mime_type("image/avif")
        assert not is_image_mime_type("application/pdf")

    def test_misc(self) -> None:
        assert is_binary_mime_type("image/png")
        assert is_html_mime_type("text/html")
        assert is_markdown_mime_type("text/markdown")
        assert is_widget_mime_type("application/vnd.jupyter.widget-view+json")
        assert is_visualization_mime_type("application/vnd.holoviews_load.v0+json")
        assert not is_visualization_mime_type("application/json")

    def test_standard(self) -> None:
        assert is_standard_mime_type("text/plain")
        assert is_standard_mime_type("text/xml")
        assert is_standard_mime_type("application/vnd.jupyter.error")
        assert not is_standard_mime_type("application/x-foo")


@pytest.mark.unit
class TestPriority:
    """Test the priority table."""

    def test_table_values(self) -> None:
        assert get_mime_type_priority("text/html") == 100
        assert get_mime_type_priority("application/vnd.jupyter.widget-view+json") == 95
        assert get_mime_type_priority("application/vnd.plotly.v1+json") == 90
        assert get_mime_type_priority("application/vnd.vegalite.v5+json") == 88
        assert get_mime_type_priority("image/svg+xml") == 75
        assert get_mime_type_priority("image/png") == 70
        assert get_mime_type_priority("text/markdown") == 55
        assert get_mime_type_priority("text/plain") == 10

    def test_unlisted_scores_zero(self) -> None:
        assert get_mime_type_priority("application/x-unknown") == 0
        assert get_mime_type_priority("application/vnd.bokehjs_exec.v0+json") == 0

    def test_html_ranks_highest(self) -> None:
        assert max(MIME_TYPE_PRIORITY, key=MIME_TYPE_PRIORITY.get) == "text/html"


@pytest.mark.unit
class TestSelectBest:
    """Test best MIME type selection."""

    def test_html_wins(self) -> None:
        assert select_best_mime_type(["text/plain", "text/html", "image/png"]) == "text/html"

    def test_visualization_over_image(self) -> None:
        assert select_best_mime_type(["image/png", "application/vnd.vegalite.v5+json", "text/plain"]) == (
            "application/vnd.vegalite.v5+json"
        )

    def test_empty(self) -> None:
        assert select_best_mime_type([]) is None

    def test_all_unknown_keeps_first(self) -> None:
        assert select_best_mime_type(["application/x-foo", "application/x-bar"]) == "application/x-foo"

    def test_accepts_iterables(self) -> None:
        assert select_best_mime_type(iter({"text/plain": 1, "image/png": 2})) == "image/png"

    @given(st.lists(st.sampled_from(sorted(MIME_TYPE_PRIORITY) + ["application/x-foo"]), min_size=1))
    def test_best_has_maximal_priority(self, mime_types) -> None:
        best = select_best_mime_type(mime_types)
        top = max(get_mime_type_priority(m) for m in mime_types)

        assert get_mime_type_priority(best) == top
        first_with_top = next(m for m in mime_types if get_mime_type_priority(m) == top)
        assert best == first_with_top


@pytest.mark.unit
class TestNormalizeMimeData:
    """Test payload normalization."""

    def test_text_list_is_joined(self) -> None:
        assert normalize_mime_data("text/plain", ["a", "b", "c"]) == "abc"

    def test_svg_list_is_joined(self) -> None:
        assert normalize_mime_data("image/svg+xml", ["<svg>", "</svg>"]) == "<svg></svg>"

    def test_binary_list_unchanged(self) -> None:
        assert normalize_mime_data("image/png", ["a", "b"]) == ["a", "b"]

    def test_string_unchanged(self) -> None:
        assert normalize_mime_data("text/html", "<p>x</p>") == "<p>x</p>"

    def test_json_object_unchanged(self) -> None:
        payload = {"data": [1, 2]}
        assert normalize_mime_data("application/json", payload) is payload

    def test_none_unchanged(self) -> None:
        assert normalize_mime_data("text/plain", None) is None

    def test_empty_list_joins_to_empty_string(self) -> None:
        assert normalize_mime_data("text/markdown", []) == ""
