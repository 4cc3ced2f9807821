"""Shared ingestion settings read from environment variables."""

import os

CONTENT_ROOT: str = os.environ.get('CONTENT_ROOT', '.')

SITE_URL: str = os.environ.get('SITE_URL', '/')
POSTS_URL_PREFIX: str = os.environ.get(
    'POSTS_URL_PREFIX', SITE_URL.rstrip('/') + '/posts/'
)
POST_URL_SUFFIX: str = os.environ.get('POST_URL_SUFFIX', '.html')

# Every timestamp in a metadata file is parsed with this format (RFC 3339).
DATE_FORMAT: str = os.environ.get('DATE_FORMAT', '%Y-%m-%dT%H:%M:%S%z')

DEFAULT_POST_TEMPLATE: str = os.environ.get('DEFAULT_POST_TEMPLATE', 'post')

META_FILENAME: str = os.environ.get('META_FILENAME', 'meta.yaml')
CONTENT_FILENAME: str = os.environ.get('CONTENT_FILENAME', 'content.html')
LINKS_FILENAME: str = os.environ.get('LINKS_FILENAME', 'links.yaml')

LOAD_WORKERS: int = int(os.environ.get('LOAD_WORKERS', '1'))
LOG_LEVEL: str = os.environ.get('LOG_LEVEL', 'INFO')
