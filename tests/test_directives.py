"""Directive scanning and span splicing."""
from __future__ import annotations

import unittest

from mdimports import DirectiveKind, has_imports, scan
from mdimports.processing.text_ops import splice


class HasImportsTests(unittest.TestCase):
    def test_file_import_prefixes(self) -> None:
        for text in ("@./file.md", "@../up.md", "@~/file.md", "@/absolute/path.md"):
            with self.subTest(text=text):
                self.assertTrue(has_imports(text))

    def test_command_inline(self) -> None:
        self.assertTrue(has_imports("!`ls -la`"))
        self.assertFalse(has_imports("`code block`"))

    def test_url_imports(self) -> None:
        self.assertTrue(has_imports("@https://example.com/docs"))
        self.assertTrue(has_imports("@http://localhost:3000/data.json"))

    def test_emails_are_not_imports(self) -> None:
        for text in (
            "contact@example.com",
            "foo@bar.org",
            "user.name@company.io",
            "Send email to admin@test.com please",
        ):
            with self.subTest(text=text):
                self.assertFalse(has_imports(text))

    def test_plain_text(self) -> None:
        self.assertFalse(has_imports("no imports here"))
        self.assertFalse(has_imports("@mention and @.hidden"))


class ScanTests(unittest.TestCase):
    def test_offsets_and_payloads(self) -> None:
        text = "See @./a.md then @https://x.io/b.md and !`echo hi`"
        found = scan(text)
        self.assertEqual([d.kind for d in found], [DirectiveKind.FILE, DirectiveKind.URL, DirectiveKind.COMMAND])
        self.assertEqual([d.payload for d in found], ["./a.md", "https://x.io/b.md", "echo hi"])
        for d in found:
            literal = text[d.start:d.end]
            self.assertEqual(d.length, len(literal))
            self.assertIn(d.payload, literal)

    def test_payload_stops_at_whitespace(self) -> None:
        (d,) = scan("@./a.md\nnext line", [DirectiveKind.FILE])
        self.assertEqual(d.payload, "./a.md")

    def test_glob_payload_is_a_file_import(self) -> None:
        (d,) = scan("Code: @./src/**/*.ts")
        self.assertEqual(d.kind, DirectiveKind.FILE)
        self.assertEqual(d.payload, "./src/**/*.ts")

    def test_email_next_to_url(self) -> None:
        found = scan("Email: foo@bar.com and docs: @https://docs.com")
        self.assertEqual([(d.kind, d.payload) for d in found], [(DirectiveKind.URL, "https://docs.com")])

    def test_command_may_contain_spaces(self) -> None:
        (d,) = scan("!`echo one two three`", [DirectiveKind.COMMAND])
        self.assertEqual(d.payload, "echo one two three")

    def test_scan_is_repeatable(self) -> None:
        text = "@./a.md @./b.md"
        self.assertEqual(scan(text), scan(text))
        self.assertEqual(len(scan(text, [DirectiveKind.FILE])), 2)
        self.assertEqual(scan(text, [DirectiveKind.URL]), [])


class SpliceTests(unittest.TestCase):
    def test_replacements_in_any_order(self) -> None:
        text = "abcdef"
        self.assertEqual(splice(text, [(1, 3, "X"), (4, 5, "YY")]), "aXdYYf")
        self.assertEqual(splice(text, [(4, 5, "YY"), (1, 3, "X")]), "aXdYYf")

    def test_edges_and_empty(self) -> None:
        self.assertEqual(splice("abc", []), "abc")
        self.assertEqual(splice("abc", [(0, 1, ""), (2, 3, "Z")]), "bZ")

    def test_overlap_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            splice("abcdef", [(0, 3, "x"), (2, 4, "y")])


if __name__ == "__main__":
    unittest.main()
