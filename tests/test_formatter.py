import unittest

from profilecard.formatter import ELLIPSIS, truncate, wrap


class TestTruncate(unittest.TestCase):
    def test_short_text_is_unchanged(self):
        self.assertEqual(truncate("Dune", 20), "Dune")
        self.assertEqual(truncate("x" * 20, 20), "x" * 20)

    def test_long_text_is_cut_mid_word_with_ellipsis(self):
        text = "The Left Hand of Darkness by Ursula K. Le Guin"
        result = truncate(text, 20)
        self.assertEqual(len(result), 21)
        self.assertTrue(result.endswith(ELLIPSIS))
        self.assertEqual(result[:20], text[:20])

    def test_empty_text(self):
        self.assertEqual(truncate("", 5), "")


class TestWrap(unittest.TestCase):
    def test_short_text_is_a_single_line(self):
        self.assertEqual(wrap("short text", 20), ["short text"])

    def test_short_text_is_trimmed(self):
        self.assertEqual(wrap("  short text \n", 20), ["short text"])

    def test_exact_width_gets_no_ellipsis(self):
        self.assertEqual(wrap("y" * 20, 20), ["y" * 20])

    def test_empty_input_gives_no_lines(self):
        self.assertEqual(wrap("", 20), [])
        self.assertEqual(wrap("   \n  ", 20), [])

    def test_unbroken_text_hard_breaks_and_marks_continuation(self):
        lines = wrap("a" * 100, 20)
        self.assertEqual(lines, ["a" * 20, "a" * 20, ELLIPSIS])

    def test_breaks_at_last_space_before_limit(self):
        lines = wrap("alpha beta gamma delta", 12)
        self.assertEqual(lines, ["alpha beta", "gamma delta"])

    def test_space_exactly_at_limit_is_a_break_point(self):
        lines = wrap("abcde fghij", 5)
        self.assertEqual(lines, ["abcde", "fghij"])

    def test_two_full_lines_without_leftover_have_no_ellipsis(self):
        lines = wrap("abcde fghij", 5, max_lines=2)
        self.assertNotIn(ELLIPSIS, lines)

    def test_newlines_are_removed_before_wrapping(self):
        self.assertEqual(wrap("hello\nworld", 20), ["helloworld"])

    def test_leftover_after_max_lines_adds_ellipsis(self):
        lines = wrap("one two three four five six", 9)
        self.assertEqual(lines, ["one two", "three", ELLIPSIS])

    def test_line_count_and_widths_are_bounded(self):
        samples = [
            "word " * 50,
            "x" * 300,
            "a bb ccc dddd eeeee ffffff ggggggg hhhhhhhh",
            "Just posted a long thought about async Python and terminal cards " * 3,
        ]
        for sample in samples:
            lines = wrap(sample, 20, max_lines=2)
            self.assertLessEqual(len(lines), 3)
            for line in lines:
                self.assertLessEqual(len(line), 20)

    def test_single_line_max(self):
        self.assertEqual(wrap("alpha beta gamma", 10, max_lines=1), ["alpha beta", ELLIPSIS])


if __name__ == "__main__":
    unittest.main()
