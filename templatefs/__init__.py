"""Templatefs: Jinja2 template loading over pluggable filesystems.

Templatefs resolves, reads and freshness-checks template sources through
an injected filesystem capability instead of direct disk access.
"""

from templatefs.environment import TemplateRenderer, create_environment
from templatefs.errors import (
    DirectoryTemplateError,
    TemplateLoaderError,
    TemplateMissingError,
    TemplateReadError,
)
from templatefs.filesystem import FileHandle, Filesystem
from templatefs.loader import FilesystemLoader
from templatefs.models import Source

__version__ = "0.1.0"
__all__ = [
    "__version__",
    "DirectoryTemplateError",
    "FileHandle",
    "Filesystem",
    "FilesystemLoader",
    "Source",
    "TemplateLoaderError",
    "TemplateMissingError",
    "TemplateReadError",
    "TemplateRenderer",
    "create_environment",
]
