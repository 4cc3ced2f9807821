"""Loading the site-wide links file."""

from .errors import FieldError
from .models import Link, validate_record
from .paths import ContentPaths
from .yamlfile import load_yaml_file


def load_links(paths: ContentPaths) -> list[Link]:
    """Load and validate every link in the links file, keeping file order.

    A failing entry is reported with its index in the field, e.g. ``[2].url``.
    """
    path = paths.links_file
    data = load_yaml_file(path)
    if data is None:
        return []
    if not isinstance(data, list):
        raise FieldError('', f'expected a list, got {type(data).__name__}', path)

    links: list[Link] = []
    for index, item in enumerate(data):
        prefix = f'[{index}].'
        try:
            link = validate_record(Link, item)
            link.sanitize()
        except FieldError as e:
            raise e.with_context(path, prefix=prefix) from e
        links.append(link)
    return links
