"""Tests for fragroute.routing.params — parameter extraction."""

import pytest

from fragroute.config import RouterConfig
from fragroute.errors import PatternMismatch
from fragroute.routing.params import extract_parameters
from fragroute.routing.pattern import compile_pattern

ENCODED_SPLAT = RouterConfig(encoded_splat_parts=True)


def _extract(template: str, fragment: str, named: bool | None = None, **config: object) -> list:
    pattern = compile_pattern(template, named, config=RouterConfig(**config))  # type: ignore[arg-type]
    return extract_parameters(pattern, fragment)


class TestPositional:
    def test_single_named_segment(self) -> None:
        assert _extract("/user/:id", "/user/42") == ["42"]

    def test_multiple_segments(self) -> None:
        assert _extract("a/:x/b/:y", "a/1/b/2") == ["1", "2"]

    def test_no_params(self) -> None:
        assert _extract("about", "about") == []

    def test_values_are_decoded(self) -> None:
        assert _extract("user/:name", "user/John%20Doe") == ["John Doe"]
        assert _extract("user/:name", "user/a+b") == ["a b"]

    def test_malformed_escape_kept_raw(self) -> None:
        assert _extract("user/:name", "user/100%") == ["100%"]

    def test_splat_with_query(self) -> None:
        assert _extract("search/*query", "search/a/b/c?sort=asc") == ["a/b/c", {"sort": "asc"}]

    def test_query_takes_last_slot(self) -> None:
        assert _extract("user/:id", "user/42?tab=posts&page=2") == [
            "42",
            {"tab": "posts", "page": "2"},
        ]

    def test_query_only(self) -> None:
        assert _extract("list", "list?tags=x|y") == [{"tags": ["x", "y"]}]

    def test_bare_question_mark_gives_empty_block(self) -> None:
        assert _extract("user/:id", "user/42?") == ["42", {}]

    def test_absent_optional_group_is_none(self) -> None:
        assert _extract("docs(/:section)", "docs") == [None]
        assert _extract("docs(/:section)", "docs/intro") == ["intro"]

    def test_pattern_delimiter_used_for_query(self) -> None:
        assert _extract("list", "list?tags=x,y", array_delimiter=",") == [{"tags": ["x", "y"]}]


class TestNamed:
    def test_single_mapping(self) -> None:
        assert _extract("/user/:id", "/user/42", named=True) == [{"id": "42"}]

    def test_global_named_mode(self) -> None:
        assert _extract("/user/:id", "/user/42", named_parameters=True) == [{"id": "42"}]

    def test_query_keys_merged(self) -> None:
        result = _extract("user/:id", "user/42?tab=posts", named=True)
        assert result == [{"tab": "posts", "id": "42"}]

    def test_path_name_wins_over_query_key(self) -> None:
        assert _extract("user/:id", "user/42?id=9", named=True) == [{"id": "42"}]

    def test_absent_optional_group_left_out(self) -> None:
        assert _extract("docs(/:section)", "docs", named=True) == [{}]
        assert _extract("docs(/:section)", "docs/intro", named=True) == [{"section": "intro"}]

    def test_nested_query_block(self) -> None:
        result = _extract("search/*terms", "search/a%2Fb?filter.kind=doc", named=True)
        assert result == [{"filter": {"kind": "doc"}, "terms": "a/b"}]

    def test_entry_per_name(self) -> None:
        pattern = compile_pattern("a/:x/b/:y/c/:z", True)
        (result,) = extract_parameters(pattern, "a/1/b/2/c/3")
        assert len(result) == len(pattern.param_names) == 3


class TestEncodedSplat:
    def test_splat_after_named_left_raw(self) -> None:
        pattern = compile_pattern(":section/*rest", config=ENCODED_SPLAT)
        assert extract_parameters(pattern, "my%20docs/a%20b") == ["my docs", "a%20b"]

    def test_splat_first_skips_all_decoding(self) -> None:
        pattern = compile_pattern("*path/:id", config=ENCODED_SPLAT)
        assert extract_parameters(pattern, "a%20b/c/x%20y") == ["a%20b/c", "x%20y"]

    def test_splat_first_still_honors_named_mode(self) -> None:
        pattern = compile_pattern("*path/:id", True, config=ENCODED_SPLAT)
        assert extract_parameters(pattern, "a%20b/c/x%20y") == [{"path": "a%20b/c", "id": "x%20y"}]

    def test_splat_only(self) -> None:
        pattern = compile_pattern("files/*path", config=ENCODED_SPLAT)
        assert extract_parameters(pattern, "files/a%2Fb") == ["a%2Fb"]

    def test_query_still_decoded(self) -> None:
        pattern = compile_pattern("files/*path", config=ENCODED_SPLAT)
        assert extract_parameters(pattern, "files/a%20b?q=a%20b") == ["a%20b", {"q": "a b"}]

    def test_off_by_default(self) -> None:
        assert _extract("files/*path", "files/a%2Fb") == ["a/b"]


class TestMismatch:
    def test_raises_pattern_mismatch(self) -> None:
        pattern = compile_pattern("user/:id")
        with pytest.raises(PatternMismatch) as exc_info:
            extract_parameters(pattern, "post/42")
        assert exc_info.value.template == "user/:id"
        assert exc_info.value.fragment == "post/42"

    def test_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            extract_parameters(compile_pattern("a**"), "a")
