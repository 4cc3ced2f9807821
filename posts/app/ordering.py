"""Duplicate detection and publication order for loaded posts."""

import collections
from collections.abc import Iterable

from .errors import DuplicateSlugError
from .models import Post, PostOrder

# Pinned posts first, posts marked 'last' at the end.
ORDER_RANK: dict[PostOrder, int] = {
    PostOrder.TOP: 0,
    PostOrder.DEFAULT: 1,
    PostOrder.LAST: 2,
}


def check_duplicates(posts: Iterable[Post]) -> None:
    """Raise DuplicateSlugError if any slug appears more than once."""
    counts = collections.Counter(post.slug for post in posts)
    duplicates = [slug for slug, count in counts.items() if count > 1]
    if duplicates:
        raise DuplicateSlugError(duplicates)


def sort_posts(posts: Iterable[Post]) -> list[Post]:
    """Return posts in publication order.

    Ordered by pin state (top, default, last), then newest ``created`` first.
    Posts that tie on both keep their input order.
    """
    newest_first = sorted(posts, key=lambda p: p.created, reverse=True)
    return sorted(newest_first, key=lambda p: ORDER_RANK[p.order])
