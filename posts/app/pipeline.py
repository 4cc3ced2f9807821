"""One ingestion pass over a content directory."""

import concurrent.futures
import functools
import logging
from collections.abc import Callable

import common.settings

from .discovery import discover_slugs
from .loader import load_post
from .models import Post
from .ordering import check_duplicates, sort_posts
from .paths import ContentPaths, post_url

logger = logging.getLogger(__name__)


def load_posts(
    paths: ContentPaths,
    workers: int | None = None,
    url_for: Callable[[str], str] = post_url,
) -> list[Post]:
    """Load every published post under ``paths`` in publication order.

    Drafts are dropped. Any error aborts the whole pass: nothing is returned
    unless every post loaded and all slugs are unique. With ``workers`` > 1
    posts are read on a thread pool; results are still collected in slug
    order, so the error reported is the same as for a sequential run.
    """
    if workers is None:
        workers = common.settings.LOAD_WORKERS

    slugs = discover_slugs(paths)
    logger.info('Found %d post directories in %s', len(slugs), paths.posts_dir)

    load = functools.partial(load_post, paths, url_for=url_for)
    if workers > 1 and len(slugs) > 1:
        with concurrent.futures.ThreadPoolExecutor(max_workers=workers) as pool:
            futures = [pool.submit(load, slug) for slug in slugs]
            try:
                loaded = [future.result() for future in futures]
            except Exception:
                pool.shutdown(cancel_futures=True)
                raise
    else:
        loaded = [load(slug) for slug in slugs]

    posts = [post for post in loaded if isinstance(post, Post)]
    drafts = len(loaded) - len(posts)
    logger.info('Loaded %d posts, skipped %d drafts', len(posts), drafts)

    check_duplicates(posts)
    return sort_posts(posts)
