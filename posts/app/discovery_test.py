"""Unit tests for discovery.py."""

import os
import pathlib
import tempfile
import unittest

from posts.app import discovery, paths


class TestDiscoverSlugs(unittest.TestCase):
    """Tests for discover_slugs()."""

    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.paths = paths.ContentPaths(self._tmp.name)
        self.paths.posts_dir.mkdir(parents=True)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _touch(self, slug: str, meta: bool = True, content: bool = True) -> None:
        self.paths.post_dir(slug).mkdir(parents=True, exist_ok=True)
        if meta:
            self.paths.post_meta_path(slug).write_text('title: x\n')
        if content:
            self.paths.post_content_path(slug).write_text('x')

    def test_finds_nested_slugs(self) -> None:
        """Slugs are slash-separated paths relative to the posts root."""
        self._touch('hello')
        self._touch('2023/nested/post')
        self.assertEqual(
            discovery.discover_slugs(self.paths), ['2023/nested/post', 'hello']
        )

    def test_requires_both_files(self) -> None:
        """Directories missing either file are not posts."""
        self._touch('complete')
        self._touch('meta-only', content=False)
        self._touch('content-only', meta=False)
        self.assertEqual(discovery.discover_slugs(self.paths), ['complete'])

    def test_posts_root_is_never_a_slug(self) -> None:
        """Files placed directly in the posts root are ignored."""
        self.paths.post_meta_path('').write_text('title: x\n')
        self.paths.post_content_path('').write_text('x')
        self.assertEqual(discovery.discover_slugs(self.paths), [])

    def test_order_is_independent_of_creation(self) -> None:
        """Discovery output is sorted regardless of directory creation order."""
        for slug in ('c', 'a', 'b'):
            self._touch(slug)
        self.assertEqual(discovery.discover_slugs(self.paths), ['a', 'b', 'c'])

    def test_missing_root_raises(self) -> None:
        """A missing posts directory aborts with an OSError."""
        missing = paths.ContentPaths(pathlib.Path(self._tmp.name) / 'nope')
        with self.assertRaises(FileNotFoundError):
            discovery.discover_slugs(missing)

    @unittest.skipIf(not hasattr(os, 'symlink'), 'symlinks not supported')
    def test_symlinked_directories_not_followed(self) -> None:
        """A symlink to a post directory does not produce a second slug."""
        self._touch('real')
        os.symlink(self.paths.post_dir('real'), self.paths.post_dir('alias'))
        self.assertEqual(discovery.discover_slugs(self.paths), ['real'])


if __name__ == '__main__':
    unittest.main()
