#!/usr/bin/env python3
"""
Run one ingestion pass over a content directory and report the result.
Exits non-zero if any post, the links file, or the slug set is invalid.
"""

import argparse
import logging
import sys

import yaml

import common.log
import common.settings
from posts.app.errors import DuplicateSlugError, FieldError
from posts.app.links import load_links
from posts.app.paths import ContentPaths
from posts.app.pipeline import load_posts

logger = logging.getLogger('posts.ingest')


def main(argv: list[str] | None = None) -> int:
    """Load posts and links, logging a summary or the first error."""
    parser = argparse.ArgumentParser(description='Validate and order blog posts')
    parser.add_argument(
        'root',
        nargs='?',
        default=common.settings.CONTENT_ROOT,
        help='Content root holding the data/ directory',
    )
    parser.add_argument(
        '--workers',
        type=int,
        default=common.settings.LOAD_WORKERS,
        help='Number of threads used to read posts',
    )
    parser.add_argument('--log-level', default=common.settings.LOG_LEVEL)

    args = parser.parse_args(argv)
    common.log.configure_logging(args.log_level)

    paths = ContentPaths(args.root)
    try:
        posts = load_posts(paths, workers=args.workers)
        links = load_links(paths)
    except (FieldError, DuplicateSlugError, OSError, yaml.YAMLError) as e:
        logger.error('Ingestion failed: %s', e)
        return 1

    for post in posts:
        logger.debug('%s (%s)', post.title, post.order, extra={'slug': post.slug})
    logger.info('Ingested %d posts and %d links', len(posts), len(links))
    return 0


if __name__ == '__main__':
    sys.exit(main())
