"""Errors raised while ingesting posts."""

import pathlib


class FieldError(ValueError):
    """A validation failure scoped to one file and one named field."""

    def __init__(
        self, field: str, message: str, file: pathlib.Path | str | None = None
    ) -> None:
        self.field = field
        self.message = message
        self.file = file
        super().__init__(str(self))

    def __str__(self) -> str:
        parts = [str(part) for part in (self.file, self.field) if part]
        return ': '.join([*parts, self.message])

    def with_context(
        self, file: pathlib.Path | str | None = None, prefix: str = ''
    ) -> 'FieldError':
        """Return a copy located in ``file`` with ``prefix`` added to the field."""
        return FieldError(
            field=prefix + self.field,
            message=self.message,
            file=file if file is not None else self.file,
        )


class DuplicateSlugError(ValueError):
    """Two or more published posts share a slug."""

    def __init__(self, slugs: list[str]) -> None:
        self.slugs = slugs
        super().__init__(f'Duplicate slugs: {slugs}')
