import math
import unittest

from user_browser.services.paginator import paginate, slice_records, total_pages
from .fakes import make_users


class TestTotalPages(unittest.TestCase):
    def test_zero_items_means_zero_pages(self):
        for page_size in (1, 3, 10):
            self.assertEqual(total_pages(0, page_size), 0)

    def test_matches_ceiling_division(self):
        for page_size in (1, 2, 3, 7):
            for count in range(1, 25):
                self.assertEqual(
                    total_pages(count, page_size),
                    math.ceil(count / page_size),
                    f"count={count} page_size={page_size}",
                )

    def test_non_positive_page_size_is_rejected(self):
        with self.assertRaises(ValueError):
            total_pages(5, 0)
        with self.assertRaises(ValueError):
            slice_records([1, 2], 0, -1)


class TestSliceRecords(unittest.TestCase):
    def setUp(self):
        self.users = make_users(7)

    def test_seven_users_three_per_page(self):
        """Pages split as [0..3), [3..6), [6..7)."""
        first, pages = slice_records(self.users, 0, 3)
        second, _ = slice_records(self.users, 1, 3)
        last, _ = slice_records(self.users, 2, 3)

        self.assertEqual(pages, 3)
        self.assertEqual(list(first), self.users[0:3])
        self.assertEqual(list(second), self.users[3:6])
        self.assertEqual(list(last), self.users[6:7])

    def test_full_pages_except_possibly_the_last(self):
        for count in range(1, 12):
            users = make_users(count)
            _, pages = slice_records(users, 0, 4)
            for index in range(pages):
                visible, _ = slice_records(users, index, 4)
                if index < pages - 1:
                    self.assertEqual(len(visible), 4)
                else:
                    self.assertEqual(len(visible), count - index * 4)

    def test_out_of_range_index_gives_empty_slice(self):
        visible, pages = slice_records(self.users, 5, 3)
        self.assertEqual(list(visible), [])
        self.assertEqual(pages, 3)

        visible, _ = slice_records(self.users, -1, 3)
        self.assertEqual(list(visible), [])

    def test_empty_records(self):
        visible, pages = slice_records([], 0, 3)
        self.assertEqual(list(visible), [])
        self.assertEqual(pages, 0)

    def test_order_is_preserved(self):
        shuffled = [self.users[4], self.users[0], self.users[6], self.users[2]]
        visible, _ = slice_records(shuffled, 0, 3)
        self.assertEqual([u.id for u in visible], [5, 1, 7])

    def test_same_input_same_output(self):
        self.assertEqual(
            slice_records(tuple(self.users), 1, 3),
            slice_records(tuple(self.users), 1, 3),
        )


class TestPaginate(unittest.TestCase):
    def test_page_metadata(self):
        page = paginate(make_users(7), 1, 3)
        self.assertEqual(page.total, 7)
        self.assertEqual(page.pages, 3)
        self.assertEqual(page.page, 1)
        self.assertEqual(page.number, 2)
        self.assertEqual(page.per_page, 3)
        self.assertTrue(page.has_prev())
        self.assertTrue(page.has_next())

    def test_boundaries(self):
        users = make_users(7)
        self.assertFalse(paginate(users, 0, 3).has_prev())
        self.assertFalse(paginate(users, 2, 3).has_next())

    def test_empty_page_has_no_navigation(self):
        page = paginate([], 0, 3)
        self.assertEqual(page.pages, 0)
        self.assertFalse(page.has_prev())
        self.assertFalse(page.has_next())


if __name__ == "__main__":
    unittest.main()
