"""Tests for cache key derivation."""

from __future__ import annotations

from recman.cache import hash_arguments, make_cache_key
from recman.models import LocationField


class TestMakeCacheKey:
    def test_format(self) -> None:
        key = make_cache_key("recman", "get_branch_list", ())
        prefix, digest = key.rsplit("_", 1)
        assert prefix == "recman_get_branch_list"
        assert len(digest) == 64

    def test_deterministic(self) -> None:
        assert make_cache_key("recman", "get_candidate_list", (1, None)) == make_cache_key(
            "recman", "get_candidate_list", (1, None)
        )

    def test_varies_with_arguments(self) -> None:
        assert make_cache_key("recman", "get_candidate_list", (1, None)) != make_cache_key(
            "recman", "get_candidate_list", (2, None)
        )

    def test_varies_with_operation(self) -> None:
        assert make_cache_key("recman", "get_branch_list") != make_cache_key(
            "recman", "get_sector_list"
        )

    def test_varies_with_prefix(self) -> None:
        assert make_cache_key("a", "get_branch_list") != make_cache_key("b", "get_branch_list")

    def test_default_args_match_empty_tuple(self) -> None:
        assert make_cache_key("recman", "get_branch_list") == make_cache_key(
            "recman", "get_branch_list", ()
        )


class TestHashArguments:
    def test_order_sensitive(self) -> None:
        assert hash_arguments(([1], [2], [])) != hash_arguments(([2], [1], []))

    def test_tuple_and_list_equivalent(self) -> None:
        assert hash_arguments((("a", "b"),)) == hash_arguments((["a", "b"],))

    def test_enum_hashes_like_its_value(self) -> None:
        assert hash_arguments((LocationField.CITY,)) == hash_arguments(("city",))

    def test_int_and_string_differ(self) -> None:
        assert hash_arguments((1,)) != hash_arguments(("1",))

    def test_none_and_empty_differ(self) -> None:
        assert hash_arguments((None,)) != hash_arguments(((),))

    def test_dict_key_order_irrelevant(self) -> None:
        assert hash_arguments(({"a": 1, "b": 2},)) == hash_arguments(({"b": 2, "a": 1},))

    def test_sets_are_stable(self) -> None:
        assert hash_arguments(({3, 1, 2},)) == hash_arguments(({2, 3, 1},))
