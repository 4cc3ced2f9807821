"""Loading and validating a single post."""

import datetime
import logging
import pathlib
from collections.abc import Callable
from typing import Any

import common.settings

from . import yamlfile
from .errors import FieldError
from .models import (
    EMPTY,
    INVALID,
    DraftFlag,
    Post,
    PostMetadata,
    PostOrder,
    validate_record,
)
from .paths import ContentPaths, post_url

logger = logging.getLogger(__name__)


def _parse_time(value: str, field: str, meta_path: pathlib.Path) -> datetime.datetime:
    try:
        return datetime.datetime.strptime(value, common.settings.DATE_FORMAT)
    except ValueError as e:
        raise FieldError(field, str(e), meta_path) from e


def _parse_order(value: str, meta_path: pathlib.Path) -> PostOrder:
    if not value:
        return PostOrder.DEFAULT
    try:
        return PostOrder(value)
    except ValueError as e:
        raise FieldError('order', INVALID, meta_path) from e


def load_metadata(paths: ContentPaths, slug: str) -> PostMetadata:
    """Read a post's metadata file as written, without any validation of values."""
    meta_path = paths.post_meta_path(slug)
    return validate_record(PostMetadata, yamlfile.load_yaml_file(meta_path), meta_path)


def _draft_metadata(data: Any, meta_path: pathlib.Path) -> PostMetadata:
    # Drafts are never rejected; keep only the flag if the rest does not fit.
    try:
        return validate_record(PostMetadata, data, meta_path)
    except FieldError as e:
        logger.debug('Draft metadata not readable: %s', e)
        return PostMetadata(draft=True)


def load_post(
    paths: ContentPaths, slug: str, url_for: Callable[[str], str] = post_url
) -> Post | PostMetadata:
    """Load the post at ``slug``.

    Drafts are returned as their raw ``PostMetadata`` without loading the
    content or checking any field. Everything else is validated and returned
    as a ``Post``; the first failing check raises a FieldError naming the
    metadata file and field.
    """
    meta_path = paths.post_meta_path(slug)
    data = yamlfile.load_yaml_file(meta_path)
    if validate_record(DraftFlag, data, meta_path).draft:
        logger.debug('Skipping draft', extra={'slug': slug})
        return _draft_metadata(data, meta_path)
    metadata = validate_record(PostMetadata, data, meta_path)

    try:
        # Line endings are kept as written.
        content = paths.post_content_path(slug).read_bytes().decode('utf-8')
    except (OSError, UnicodeDecodeError) as e:
        raise FieldError('content', str(e), meta_path) from e
    if not content:
        raise FieldError('content', EMPTY, meta_path)

    created = _parse_time(metadata.created, 'created', meta_path)
    permalink = url_for(slug)
    modified = _parse_time(metadata.modified, 'modified', meta_path)

    if not metadata.title:
        raise FieldError('title', EMPTY, meta_path)
    if not metadata.tags:
        raise FieldError('tags', EMPTY, meta_path)

    order = _parse_order(metadata.order, meta_path)

    for name, record in (('author', metadata.author), ('license', metadata.license)):
        if record is None:
            continue
        try:
            record.sanitize()
        except FieldError as e:
            raise e.with_context(meta_path, prefix=f'{name}.') from e

    return Post(
        slug=slug,
        title=metadata.title,
        created=created,
        modified=modified,
        summary=metadata.summary,
        content=content,
        tags_string=metadata.tags,
        permalink=permalink,
        order=order,
        author=metadata.author,
        license=metadata.license,
        template=metadata.template or common.settings.DEFAULT_POST_TEMPLATE,
        keywords=metadata.keywords or metadata.tags,
        search_title=metadata.title.lower(),
        search_content=content.lower(),
    )
