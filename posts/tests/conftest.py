"""Test configuration and fixtures for ingestion pipeline tests."""

import pathlib
from collections.abc import Callable

import pytest

from posts.app.paths import ContentPaths

WritePost = Callable[..., pathlib.Path]


@pytest.fixture
def content_paths(tmp_path: pathlib.Path) -> ContentPaths:
    """A content root with an empty posts directory."""
    paths = ContentPaths(tmp_path)
    paths.posts_dir.mkdir(parents=True)
    paths.meta_dir.mkdir(parents=True)
    return paths


@pytest.fixture
def write_post(content_paths: ContentPaths) -> WritePost:
    """Returns a helper that writes a metadata/content pair for a slug."""

    def _write(
        slug: str,
        created: str = '2023-01-01T00:00:00Z',
        content: str | None = '<p>body</p>',
        **meta: str,
    ) -> pathlib.Path:
        fields = {
            'title': slug.title(),
            'created': created,
            'modified': created,
            'summary': f'About {slug}',
            'tags': 'misc',
            **meta,
        }
        content_paths.post_dir(slug).mkdir(parents=True, exist_ok=True)
        meta_path = content_paths.post_meta_path(slug)
        meta_path.write_text(''.join(f'{k}: {v}\n' for k, v in fields.items()))
        if content is not None:
            content_paths.post_content_path(slug).write_text(content)
        return meta_path

    return _write
