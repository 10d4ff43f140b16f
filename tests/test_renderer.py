import unittest

from profilecard.colors import Colors, c, hex_color
from profilecard.renderer import (
    BORDER_VERTICAL,
    CardLayoutError,
    bottom_border,
    clip_to_width,
    divider,
    empty_line,
    render_line,
    strip_ansi,
    thin_divider,
    top_border,
    visible_length,
)


WIDTH = 72
PRIMARY = hex_color("#654FF0")


class TestVisibleLength(unittest.TestCase):
    def test_styling_sequences_are_not_counted(self):
        styled = c("dale", PRIMARY, Colors.BOLD) + " " + c("lane", Colors.BRIGHT_GREEN, Colors.UNDERLINE)
        self.assertEqual(strip_ansi(styled), "dale lane")
        self.assertEqual(visible_length(styled), 9)

    def test_wide_icons_take_two_cells(self):
        self.assertEqual(visible_length("📖"), 2)
        self.assertEqual(visible_length(" 📖 Reading"), 11)

    def test_plain_text_counts_characters(self):
        self.assertEqual(visible_length("Books!…"), 7)


class TestRenderLine(unittest.TestCase):
    def test_styled_content_is_padded_to_width(self):
        content = c("0123456789", hex_color("#F04F89"))
        self.assertEqual(visible_length(content), 10)

        line = render_line(content, WIDTH, PRIMARY)
        body = strip_ansi(line)
        self.assertTrue(body.startswith(BORDER_VERTICAL + "0123456789"))
        self.assertTrue(body.endswith(" " * 62 + BORDER_VERTICAL))
        self.assertFalse(body.endswith(" " * 63 + BORDER_VERTICAL))

    def test_rendered_width_includes_both_borders(self):
        for content in ("", "x", " 🎮 " + c("Playing", PRIMARY), "y" * WIDTH):
            self.assertEqual(visible_length(render_line(content, WIDTH, PRIMARY)), WIDTH + 2)

    def test_styling_is_kept_verbatim(self):
        content = c("styled", Colors.WHITE)
        self.assertIn(content, render_line(content, WIDTH, PRIMARY))

    def test_overflowing_content_is_rejected(self):
        with self.assertRaises(CardLayoutError):
            render_line("z" * (WIDTH + 1), WIDTH, PRIMARY)

    def test_unstyled_border(self):
        self.assertEqual(render_line("ab", 4), "│ab  │")


class TestClipToWidth(unittest.TestCase):
    def test_fitting_text_is_unchanged(self):
        self.assertEqual(clip_to_width("   Piranesi", 20), "   Piranesi")
        self.assertEqual(clip_to_width("三体", 4), "三体")

    def test_wide_text_is_cut_by_cells(self):
        self.assertEqual(clip_to_width("三体三体", 6), "三体…")
        self.assertEqual(visible_length(clip_to_width("🎉" * 10, 7)), 7)
        self.assertEqual(clip_to_width("🎉" * 10, 7), "🎉🎉🎉…")


class TestBordersAndDividers(unittest.TestCase):
    def test_borders_span_width(self):
        self.assertEqual(strip_ansi(top_border(WIDTH, PRIMARY)), "╭" + "─" * WIDTH + "╮")
        self.assertEqual(strip_ansi(bottom_border(WIDTH, PRIMARY)), "╰" + "─" * WIDTH + "╯")

    def test_spacers_and_dividers_span_width(self):
        for line in (empty_line(WIDTH, PRIMARY), divider(WIDTH, PRIMARY), thin_divider(WIDTH, PRIMARY)):
            self.assertEqual(visible_length(line), WIDTH + 2)

    def test_divider_glyphs(self):
        self.assertEqual(strip_ansi(divider(10)), "│ " + "━" * 8 + " │")
        self.assertEqual(strip_ansi(thin_divider(10)), "│ " + "-" * 8 + " │")


if __name__ == "__main__":
    unittest.main()
