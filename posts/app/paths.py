"""Layout of a content directory.

    <root>/data/posts/<slug>/meta.yaml     post metadata
    <root>/data/posts/<slug>/content.html  post body
    <root>/data/meta/links.yaml            site links
"""

import pathlib

import common.settings


class ContentPaths:
    """Resolves every file the ingestion pass reads, relative to a content root."""

    def __init__(self, root: pathlib.Path | str) -> None:
        self.root = pathlib.Path(root)
        self.data_dir = self.root / 'data'
        self.posts_dir = self.data_dir / 'posts'
        self.meta_dir = self.data_dir / 'meta'
        self.links_file = self.meta_dir / common.settings.LINKS_FILENAME

    def post_dir(self, slug: str) -> pathlib.Path:
        return self.posts_dir / slug

    def post_meta_path(self, slug: str) -> pathlib.Path:
        return self.post_dir(slug) / common.settings.META_FILENAME

    def post_content_path(self, slug: str) -> pathlib.Path:
        return self.post_dir(slug) / common.settings.CONTENT_FILENAME


def post_url(slug: str) -> str:
    """Return the public URL of the post with the given slug."""
    return common.settings.POSTS_URL_PREFIX + slug + common.settings.POST_URL_SUFFIX
