from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from mdimports import ImportNotFoundError
from mdimports.rendering.path_resolver import ImportPathResolver
from mdimports.utils.paths import split_glob

from tests.helpers import write


class ResolveTests(unittest.TestCase):
    def setUp(self) -> None:
        self._td = tempfile.TemporaryDirectory()
        self.root = Path(self._td.name).resolve()
        self.resolver = ImportPathResolver()

    def tearDown(self) -> None:
        self._td.cleanup()

    def test_relative_to_importing_directory(self) -> None:
        sub = self.root / "docs"
        self.assertEqual(self.resolver.resolve(sub, "./a.md"), sub / "a.md")
        self.assertEqual(self.resolver.resolve(sub, "../a.md"), self.root / "a.md")

    def test_absolute_is_kept(self) -> None:
        target = self.root / "abs.md"
        self.assertEqual(self.resolver.resolve(Path("/elsewhere"), str(target)), target)

    def test_home_shorthand(self) -> None:
        with patch.dict("os.environ", {"HOME": str(self.root)}):
            self.assertEqual(self.resolver.resolve(Path("/elsewhere"), "~/notes.md"), self.root / "notes.md")

    def test_missing_file_names_payload_and_resolved_path(self) -> None:
        with self.assertRaises(ImportNotFoundError) as ctx:
            self.resolver.expand(self.root, "./nope.md")
        msg = str(ctx.exception)
        self.assertIn("Import not found", msg)
        self.assertIn("./nope.md", msg)
        self.assertIn(str(self.root / "nope.md"), msg)
        self.assertEqual(ctx.exception.resolved, self.root / "nope.md")


class GlobTests(unittest.TestCase):
    def setUp(self) -> None:
        self._td = tempfile.TemporaryDirectory()
        self.root = Path(self._td.name).resolve()
        self.resolver = ImportPathResolver()

    def tearDown(self) -> None:
        self._td.cleanup()

    def test_sorted_matches(self) -> None:
        write(self.root, "src/b.ts", "b")
        write(self.root, "src/a.ts", "a")
        write(self.root, "src/nested/c.ts", "c")
        write(self.root, "src/readme.md", "r")
        self.assertTrue(self.resolver.is_glob("./src/*.ts"))
        self.assertEqual(
            self.resolver.expand(self.root, "./src/*.ts"),
            [self.root / "src/a.ts", self.root / "src/b.ts"],
        )
        self.assertEqual(
            self.resolver.expand(self.root, "./src/**/*.ts"),
            [self.root / "src/a.ts", self.root / "src/b.ts", self.root / "src/nested/c.ts"],
        )

    def test_ignored_entries_are_skipped(self) -> None:
        write(self.root, "lib/keep.js", "k")
        write(self.root, "lib/.cache/skip.js", "s")
        write(self.root, "lib/node_modules/dep/skip.js", "s")
        (self.root / "lib/logo.png").write_bytes(b"\x89PNG")
        self.assertEqual(self.resolver.expand(self.root, "./lib/**/*"), [self.root / "lib/keep.js"])

    def test_gitignored_directory_is_skipped(self) -> None:
        write(self.root, ".gitignore", "build/\n")
        write(self.root, "src/a.md", "A")
        write(self.root, "src/build/gen.md", "GENERATED")
        self.assertEqual(self.resolver.expand(self.root, "./src/**/*.md"), [self.root / "src/a.md"])

    def test_gitignore_negation_and_anchoring(self) -> None:
        write(self.root, ".gitignore", "# drafts\n*.draft.md\n!keep.draft.md\n/top.md\n")
        write(self.root, "docs/a.md", "a")
        write(self.root, "docs/b.draft.md", "b")
        write(self.root, "docs/keep.draft.md", "k")
        write(self.root, "docs/top.md", "t")
        write(self.root, "top.md", "t")
        self.assertEqual(
            self.resolver.expand(self.root, "./docs/*.md"),
            [self.root / "docs/a.md", self.root / "docs/keep.draft.md", self.root / "docs/top.md"],
        )
        self.assertNotIn(self.root / "top.md", self.resolver.expand(self.root, "./*.md"))

    def test_nested_gitignore_applies_below_its_directory(self) -> None:
        write(self.root, "notes/.gitignore", "private.md\n")
        write(self.root, "notes/public.md", "p")
        write(self.root, "notes/private.md", "x")
        write(self.root, "private.md", "root copy")
        self.assertEqual(self.resolver.expand(self.root, "./notes/*.md"), [self.root / "notes/public.md"])
        self.assertIn(self.root / "private.md", self.resolver.expand(self.root, "./*.md"))

    def test_gitignore_walk_stops_at_repository_root(self) -> None:
        write(self.root, ".gitignore", "*.md\n")
        (self.root / "repo/.git").mkdir(parents=True)
        write(self.root, "repo/docs/a.md", "a")
        self.assertEqual(
            self.resolver.expand(self.root / "repo", "./docs/*.md"),
            [self.root / "repo/docs/a.md"],
        )

    def test_no_match_is_empty(self) -> None:
        self.assertEqual(self.resolver.expand(self.root, "./missing/*.md"), [])

    def test_split_glob(self) -> None:
        self.assertEqual(split_glob(Path("/repo/src/**/*.py")), (Path("/repo/src"), "**/*.py"))
        self.assertEqual(split_glob(Path("/repo/a?.md")), (Path("/repo"), "a?.md"))


if __name__ == "__main__":
    unittest.main()
