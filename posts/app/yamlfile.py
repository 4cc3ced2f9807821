"""YAML file loading for metadata and links files."""

import pathlib
from typing import Any

import yaml

_TEXT_TAGS = {
    'tag:yaml.org,2002:timestamp',
    'tag:yaml.org,2002:int',
    'tag:yaml.org,2002:float',
}


class TextScalarLoader(yaml.SafeLoader):
    """SafeLoader that leaves numbers and timestamps as the text written.

    Every metadata value except ``draft`` is text, and timestamps are parsed
    later with the configured date format, so ``title: 1984`` must reach the
    models as ``'1984'``. Booleans and nulls are still resolved.
    """


TextScalarLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag not in _TEXT_TAGS]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def load_yaml_file(path: pathlib.Path) -> Any:
    """Parse a YAML file, returning None for an empty document."""
    with path.open(encoding='utf-8') as f:
        return yaml.load(f, Loader=TextScalarLoader)  # noqa: S506
