"""Tests for the page collection and its cursor."""

import discord
import pytest

from pagedembed import errors
from pagedembed.pagination.store import PageStore


def _store(count):
    return PageStore(discord.Embed(title=str(i)) for i in range(count))


class TestWraparound:
    @pytest.mark.parametrize("count", [1, 2, 3, 7])
    def test_next_page_length_times_is_cyclic(self, count):
        store = _store(count)
        store.cursor = count // 2
        for _ in range(count):
            store.next_page()
        assert store.cursor == count // 2

    @pytest.mark.parametrize("count", [1, 2, 5])
    def test_prev_page_from_first_goes_to_last(self, count):
        store = _store(count)
        assert store.prev_page() == count - 1

    def test_next_three_times_on_three_pages(self):
        store = _store(3)
        assert [store.next_page() for _ in range(3)] == [1, 2, 0]

    def test_empty_collection_leaves_cursor_alone(self):
        store = PageStore()
        assert store.next_page() == 0
        assert store.prev_page() == 0
        assert store.current is None


class TestPageTo:
    def test_is_one_indexed(self):
        store = _store(3)
        store.page_to(1)
        assert store.cursor == 0
        store.page_to(3)
        assert store.cursor == 2

    @pytest.mark.parametrize("page", [0, 4, -1, "0", "4"])
    def test_out_of_range_leaves_cursor(self, page):
        store = _store(3)
        store.cursor = 1
        with pytest.raises(errors.OutOfRangeError):
            store.page_to(page)
        assert store.cursor == 1

    def test_numeric_string(self):
        store = _store(3)
        store.page_to(" 2 ")
        assert store.cursor == 1

    @pytest.mark.parametrize("page", ["abc", "", "two", "nan", "inf", "-inf", "Infinity", "1e0", "1_0", "0x2", "."])
    def test_non_numeric_string(self, page):
        store = _store(3)
        with pytest.raises(errors.InvalidInputError):
            store.page_to(page)
        assert store.cursor == 0

    def test_whole_decimal_is_a_page(self):
        store = _store(3)
        store.page_to("2.0")
        assert store.cursor == 1

    def test_fractional_page_does_not_exist(self):
        store = _store(3)
        with pytest.raises(errors.OutOfRangeError):
            store.page_to("1.5")

    def test_bool_is_not_a_page(self):
        with pytest.raises(errors.InvalidInputError):
            _store(3).page_to(True)


class TestMutators:
    def test_chaining(self):
        store = PageStore()
        page = discord.Embed()
        assert store.add_page(page).add_pages([page]).set_pages([page]).clear_pages() is store

    def test_set_pages_keeps_cursor(self):
        store = _store(5)
        store.cursor = 4
        store.set_pages(_store(2).pages)
        assert store.cursor == 4
        assert store.current is None

    def test_footer(self):
        store = _store(4)
        store.next_page()
        assert store.footer() == "2/4"

    def test_clear(self):
        store = _store(2).clear_pages()
        assert len(store) == 0
        assert store.current is None
