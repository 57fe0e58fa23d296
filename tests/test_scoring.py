import unittest

from bitris_field import Field
from bitris_scoring import Progress, clear_lines, score_for


def fill_row(f, y, skip=()):
    for x in range(f.width):
        if x not in skip:
            f.set(x, y, True)


def only(f, x):
    return tuple(i == x for i in range(f.width))


class ProgressTests(unittest.TestCase):
    def test_level_is_derived(self):
        for n in range(100):
            self.assertEqual(Progress(lines=n).level, n // 10)

    def test_score_for(self):
        for level in range(5):
            self.assertEqual(score_for(0, level), 0)
            self.assertEqual(score_for(1, level), 40 * (level + 1))
            self.assertEqual(score_for(2, level), 100 * (level + 1))
            self.assertEqual(score_for(3, level), 300 * (level + 1))
            self.assertEqual(score_for(4, level), 1200 * (level + 1))


class ClearLinesTests(unittest.TestCase):
    def setUp(self):
        self.f = Field(10, 20)
        self.p = Progress()

    def test_compaction_shifts_rows_down_by_one(self):
        for y in range(19):
            self.f.set(y % 10, y, True)
        fill_row(self.f, 19)

        self.assertEqual(clear_lines(self.f, self.p, 16), 40)
        self.assertEqual(self.f.row(0), (False,) * 10)
        for y in range(1, 20):
            self.assertEqual(self.f.row(y), only(self.f, (y - 1) % 10), y)
        self.assertEqual((self.p.lines, self.p.score), (1, 40))

    def test_four_lines(self):
        for y in range(16, 20):
            fill_row(self.f, y)
        self.f.set(0, 15, True)
        self.assertEqual(clear_lines(self.f, self.p, 16), 1200)
        self.assertEqual(self.f.row(19), only(self.f, 0))
        self.assertEqual(sum(sum(r) for r in self.f.rows()), 1)
        self.assertEqual(self.p.lines, 4)

    def test_split_clears(self):
        fill_row(self.f, 17)
        self.f.set(3, 18, True)
        fill_row(self.f, 19)
        self.assertEqual(clear_lines(self.f, self.p, 16), 100)
        self.assertEqual(self.f.row(19), only(self.f, 3))
        self.assertEqual(sum(sum(r) for r in self.f.rows()), 1)

    def test_no_full_rows(self):
        fill_row(self.f, 19, skip=(5,))
        before = self.f.copy()
        self.assertEqual(clear_lines(self.f, self.p, 16), 0)
        self.assertEqual(self.f, before)
        self.assertEqual((self.p.lines, self.p.score), (0, 0))

    def test_scan_window_is_bounded(self):
        fill_row(self.f, 15)
        self.assertEqual(clear_lines(self.f, self.p, 16), 0)
        self.assertTrue(self.f.is_row_full(15))
        self.assertEqual(clear_lines(self.f, self.p, 12), 40)
        self.assertFalse(self.f.is_row_full(15))

    def test_scan_window_clipped_at_top(self):
        fill_row(self.f, 0)
        self.assertEqual(clear_lines(self.f, self.p, -2), 40)
        self.assertFalse(any(self.f.bits))

    def test_scan_window_clipped_at_floor(self):
        fill_row(self.f, 19)
        self.assertEqual(clear_lines(self.f, self.p, 18), 40)

    def test_score_uses_level_after_clear(self):
        p = Progress(lines=9, score=500)
        fill_row(self.f, 19)
        self.assertEqual(clear_lines(self.f, p, 17), 80)
        self.assertEqual((p.lines, p.level, p.score), (10, 1, 580))


if __name__ == "__main__":
    unittest.main()
