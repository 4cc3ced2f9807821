"""Finding post directories under the posts root."""

import logging
import os
import pathlib

from .paths import ContentPaths

logger = logging.getLogger(__name__)


def _raise(error: OSError) -> None:
    raise error


def discover_slugs(paths: ContentPaths) -> list[str]:
    """Return the slugs of every directory holding both a metadata and content file.

    Slugs are slash-separated paths relative to the posts root. Symlinked
    directories are not followed. Raises OSError if the tree cannot be walked.
    """
    root = paths.posts_dir
    slugs: list[str] = []
    for dirpath, _dirnames, _filenames in os.walk(root, onerror=_raise):
        slug = pathlib.Path(dirpath).relative_to(root).as_posix().strip('/')
        if slug in ('', '.'):
            continue
        meta_path = paths.post_meta_path(slug)
        content_path = paths.post_content_path(slug)
        if meta_path.is_file() and content_path.is_file():
            slugs.append(slug)
        elif meta_path.exists() or content_path.exists():
            logger.debug('Skipping %s: metadata and content must both exist', slug)
    return sorted(slugs)
