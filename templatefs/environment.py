"""Jinja2 environment helpers built on FilesystemLoader."""

from typing import Any

from jinja2 import Environment, select_autoescape

from templatefs.config import LoaderSettings
from templatefs.filesystem import Filesystem
from templatefs.loader import FilesystemLoader


def create_environment(
    filesystem: Filesystem,
    template_path: str = "",
    *,
    settings: LoaderSettings | None = None,
    **options: Any,
) -> Environment:
    """Create a Jinja2 Environment that loads templates from a filesystem.

    Args:
        filesystem: Filesystem capability holding the templates
        template_path: Prefix for template names; ignored when settings given
        settings: Loader settings to build the loader from
        **options: Extra keyword arguments for jinja2.Environment

    Returns:
        Configured Environment
    """
    if settings is not None:
        loader = FilesystemLoader.from_settings(filesystem, settings)
    else:
        loader = FilesystemLoader(filesystem, template_path)

    options.setdefault("autoescape", select_autoescape(["html", "xml"]))
    return Environment(loader=loader, **options)


class TemplateRenderer:
    """Renders templates stored on a filesystem."""

    def __init__(self, filesystem: Filesystem, template_path: str = "", **options: Any):
        """Initialize the renderer.

        Args:
            filesystem: Filesystem capability holding the templates
            template_path: Prefix for template names
            **options: Extra keyword arguments for jinja2.Environment
        """
        self.env = create_environment(filesystem, template_path, **options)

    def render(self, template_name: str, **context: Any) -> str:
        """Render a template with context variables.

        Raises:
            jinja2.TemplateNotFound: If the template can't be loaded
        """
        template = self.env.get_template(template_name)
        return template.render(**context)
