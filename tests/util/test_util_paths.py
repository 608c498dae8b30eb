import unittest

from gdocbackup.util.paths import build_relative_path, sanitize_part


class TestUtilPaths(unittest.TestCase):
    def test_sanitize_replaces_separators_and_nul(self) -> None:
        self.assertEqual(sanitize_part("a/b\\c:d"), "a_b_c_d")
        self.assertEqual(sanitize_part("nul\x00byte"), "nul_byte")

    def test_sanitize_dot_segments(self) -> None:
        self.assertEqual(sanitize_part("."), "_")
        self.assertEqual(sanitize_part(".."), "__")
        # Only whole-segment dots are special.
        self.assertEqual(sanitize_part("..."), "...")
        self.assertEqual(sanitize_part(".hidden"), ".hidden")

    def test_sanitize_keeps_ordinary_names(self) -> None:
        self.assertEqual(sanitize_part("Budget 2025 (final)"), "Budget 2025 (final)")

    def test_build_relative_path(self) -> None:
        path = build_relative_path(["Drive", "a/b", ".."], "Report: Q1", ".docx")
        self.assertEqual(path, "Drive/a_b/__/Report_ Q1.docx")

    def test_build_relative_path_sanitizes_name_without_extension(self) -> None:
        self.assertEqual(build_relative_path(["Drive"], ".", ".docx"), "Drive/_.docx")
        self.assertEqual(build_relative_path(["Drive"], "..", ".xlsx"), "Drive/__.xlsx")


if __name__ == "__main__":
    unittest.main()
