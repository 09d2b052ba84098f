"""Template loader error hierarchy.

Every lookup failure is a TemplateLoaderError, which Jinja2 treats as an
ordinary missing template. Errors raised by the filesystem backend itself
are not wrapped.
"""

from jinja2 import TemplateNotFound

NOT_FOUND_MESSAGE = "Template could not be found on the given filesystem"
DIRECTORY_MESSAGE = "Cannot use directory as template"


class TemplateLoaderError(TemplateNotFound):
    """Base exception for all template lookup failures.

    Attributes:
        name: Logical template name as requested by the caller
        path: Resolved storage path that was looked up
    """

    def __init__(self, name: str, path: str, message: str = NOT_FOUND_MESSAGE) -> None:
        super().__init__(name, message)
        self.path = path


class TemplateMissingError(TemplateLoaderError):
    """Raised when the filesystem has no entry at the resolved path."""

    pass


class DirectoryTemplateError(TemplateLoaderError):
    """Raised when the resolved path points to a directory."""

    def __init__(self, name: str, path: str) -> None:
        super().__init__(name, path, DIRECTORY_MESSAGE)


class TemplateReadError(TemplateLoaderError):
    """Raised when the filesystem read reports failure.

    A read that returns None or False counts as a failure. Empty content
    is a valid, empty template.
    """

    pass
