"""Post, link and site metadata models.

A metadata file is first read into ``PostMetadata``, which mirrors the file
as written: every key is optional and timestamps are kept as raw text. Drafts
stay in that shape. Published posts are rebuilt as ``Post``, which only
holds validated, typed values.
"""

from __future__ import annotations

import datetime
import enum
import pathlib
from typing import Any, TypeVar

import pydantic

from .errors import FieldError

EMPTY = 'must not be empty'
INVALID = 'invalid value'

ModelT = TypeVar('ModelT', bound=pydantic.BaseModel)


class PostOrder(enum.StrEnum):
    """Pin state of a post, controlling where it sorts."""

    TOP = 'top'
    DEFAULT = 'default'
    LAST = 'last'


class OutdatedType(enum.StrEnum):
    """Which timestamp an outdated notice is measured from."""

    CREATED = 'created'
    MODIFIED = 'modified'


def _scalar_text(value: bool | int | float) -> str:
    if isinstance(value, bool):
        return 'true' if value else 'false'
    return str(value)


class _Record(pydantic.BaseModel):
    """Base for records read from YAML.

    Records are frozen. Null values mean 'unset', and scalars given for a text
    field are kept as text, e.g. ``title: yes`` reads as ``'true'``.
    """

    model_config = pydantic.ConfigDict(frozen=True)

    @pydantic.model_validator(mode='before')
    @classmethod
    def _normalize_scalars(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        normalized: dict[Any, Any] = {}
        for key, value in data.items():
            if value is None:
                continue
            field = cls.model_fields.get(key)
            if (
                field is not None
                and field.annotation is str
                and isinstance(value, (bool, int, float))
            ):
                value = _scalar_text(value)
            normalized[key] = value
        return normalized


class DraftFlag(_Record):
    """Just the ``draft`` key of a metadata file, read before anything else."""

    draft: bool = False


class Link(_Record):
    """A link shown on the site, also used for license references."""

    url: str = ''
    text: str = ''
    icon: str = ''
    title: str = ''
    rel: str = ''

    def sanitize(self) -> None:
        if not self.text:
            raise FieldError('text', EMPTY)
        if not self.url:
            raise FieldError('url', EMPTY)


class Author(_Record):
    """Author of a post or of the whole site."""

    name: str = ''
    url: str = ''
    email: str = ''
    avatar: str = ''

    def sanitize(self) -> None:
        if not self.name:
            raise FieldError('name', EMPTY)


class Icon(_Record):
    """Site icon, e.g. html>head>link[rel=icon]."""

    url: str = ''
    type: str = ''
    sizes: str = ''

    def sanitize(self) -> None:
        if not self.url:
            raise FieldError('url', EMPTY)


class Outdated(_Record):
    """Site-wide policy for flagging posts that have not been touched in a while.

    ``content`` is plain text and may hold one ``%d`` placeholder, replaced by
    the age of the post in days.
    """

    type: str = ''
    duration: datetime.timedelta = datetime.timedelta(0)
    content: str = ''

    def sanitize(self) -> None:
        if self.type not in list(OutdatedType):
            raise FieldError('outdated.type', INVALID)
        if not self.content:
            raise FieldError('outdated.content', EMPTY)
        if self.duration == datetime.timedelta(0):
            raise FieldError('outdated.duration', EMPTY)
        if self.duration < datetime.timedelta(0):
            raise FieldError('outdated.duration', 'must not be negative')

    def message_for(self, post: Post, now: datetime.datetime) -> str | None:
        """Return the outdated notice for ``post``, or None if it is recent enough."""
        reference = post.created if self.type == OutdatedType.CREATED else post.modified
        age = now - reference
        if age <= self.duration:
            return None
        return self.content.replace('%d', str(age.days), 1)


class PostMetadata(_Record):
    """A metadata file as written. Drafts are returned in this shape."""

    title: str = ''
    created: str = ''
    modified: str = ''
    summary: str = ''
    tags: str = ''
    order: str = ''
    draft: bool = False
    author: Author | None = None
    license: Link | None = None
    template: str = ''
    keywords: str = ''


class Post(pydantic.BaseModel):
    """A fully validated, published post."""

    model_config = pydantic.ConfigDict(frozen=True)

    slug: str
    title: str
    created: datetime.datetime
    modified: datetime.datetime
    summary: str = ''
    content: str
    tags_string: str
    permalink: str
    order: PostOrder = PostOrder.DEFAULT
    author: Author | None = None
    license: Link | None = None
    template: str
    keywords: str

    # Lowercase copies used for search.
    search_title: str
    search_content: str


def validate_record(
    model: type[ModelT], data: Any, file: pathlib.Path | str | None = None
) -> ModelT:
    """Validate ``data`` into ``model``, reporting the first bad key as a FieldError."""
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise FieldError('', f'expected a mapping, got {type(data).__name__}', file)
    try:
        return model.model_validate(data)
    except pydantic.ValidationError as e:
        error = e.errors()[0]
        field = '.'.join(str(part) for part in error['loc'])
        raise FieldError(field, error['msg'], file) from e
