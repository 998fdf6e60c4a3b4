"""
Loading of the HTML templates packaged under ``rendering/templates``.

Templates use ``string.Template`` placeholders (``${name}``) so that CSS braces
need no escaping.
"""

from functools import lru_cache
from importlib import resources
from string import Template

from ..exceptions import TemplateNotFoundError

TEMPLATE_PACKAGE = "eml_converter.rendering"
TEMPLATE_DIR = "templates"

HTML_WRAPPER_TEMPLATE = "html_wrapper"
HEADER_CONTAINER_TEMPLATE = "header_container"
HEADER_ROW_TEMPLATE = "header_row"


@lru_cache(maxsize=None)
def load_template(name: str) -> str:
    """
    Read a packaged template by logical name (file name without ``.html``).

    Raises:
        TemplateNotFoundError: If no such template is packaged
    """
    resource = resources.files(TEMPLATE_PACKAGE).joinpath(TEMPLATE_DIR).joinpath(f"{name}.html")
    if not resource.is_file():
        raise TemplateNotFoundError(f"Unknown template: {name}")
    return resource.read_text(encoding="utf-8")


def render_template(name: str, /, **values: str) -> str:
    """Fill a packaged template; every placeholder must be given."""
    return Template(load_template(name)).substitute(**values)
