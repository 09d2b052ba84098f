"""Jinja2 loader backed by a pluggable filesystem capability.

The loader maps logical template names onto storage paths by textual
prefixing, then answers the four questions a template engine asks of a
source provider: does it exist, what is its content, what is its cache
key, and is a cached copy still fresh.
"""

from collections.abc import Callable
from datetime import datetime
from typing import Any

from jinja2 import BaseLoader, Environment

from templatefs.config import LoaderSettings, get_settings
from templatefs.errors import (
    DirectoryTemplateError,
    TemplateLoaderError,
    TemplateMissingError,
    TemplateReadError,
)
from templatefs.filesystem import FileHandle, Filesystem
from templatefs.models import Source
from templatefs.observability.logging import configure_logging, get_logger

logger = get_logger(__name__)


def to_timestamp(value: Any) -> int:
    """Coerce a timestamp-like value to whole POSIX seconds.

    Floats truncate toward zero, datetimes use their POSIX timestamp and
    numeric strings are parsed. Anything else, NaN and infinity included,
    coerces to 0.
    """
    try:
        if isinstance(value, int | float):
            return int(value)
        if isinstance(value, datetime):
            return int(value.timestamp())
        if isinstance(value, str | bytes):
            return int(float(value))
    except (ValueError, OverflowError):
        pass
    logger.warning("timestamp_not_numeric", value=repr(value))
    return 0


class FilesystemLoader(BaseLoader):
    """Loads templates from a Filesystem, optionally under a path prefix.

    The loader keeps no mutable state after construction, so a single
    instance can serve concurrent lookups as long as the filesystem allows
    concurrent reads.
    """

    def __init__(
        self,
        filesystem: Filesystem,
        template_path: str | None = "",
        encoding: str = "utf-8",
    ) -> None:
        """Initialize the loader.

        Args:
            filesystem: Filesystem capability; not owned by the loader
            template_path: Prefix prepended to every template name
            encoding: Encoding used to decode sources for Jinja2
        """
        self._filesystem = filesystem
        self._template_path = template_path or ""
        self._encoding = encoding

    @classmethod
    def from_settings(
        cls,
        filesystem: Filesystem,
        settings: LoaderSettings | None = None,
    ) -> "FilesystemLoader":
        """Build a loader from LoaderSettings (defaults to get_settings()).

        Also applies the configured log level and format.
        """
        settings = settings or get_settings()
        configure_logging(settings)
        return cls(
            filesystem,
            template_path=settings.template_path,
            encoding=settings.encoding,
        )

    @property
    def filesystem(self) -> Filesystem:
        return self._filesystem

    @property
    def template_path(self) -> str:
        return self._template_path

    @property
    def encoding(self) -> str:
        return self._encoding

    def resolve_template_name(self, name: str) -> str:
        """Return the storage path for a template name.

        Purely textual: the prefix gets exactly one trailing "/" and the
        name is appended unchanged.
        """
        if not self._template_path:
            return name
        return self._template_path.rstrip("/") + "/" + name

    def exists(self, name: str) -> bool:
        """Check whether the filesystem has an entry for the template."""
        return bool(self._filesystem.has(self.resolve_template_name(name)))

    def get_file_or_fail(self, name: str) -> FileHandle:
        """Return the entry for a template, failing if absent or a directory.

        Raises:
            TemplateMissingError: No entry at the resolved path
            DirectoryTemplateError: The entry is a directory
        """
        path = self.resolve_template_name(name)

        if not self._filesystem.has(path):
            logger.debug("template_not_found", template=name, path=path)
            raise TemplateMissingError(name, path)

        handle = self._filesystem.get(path)
        if handle.is_dir():
            logger.debug("template_is_directory", template=name, path=path)
            raise DirectoryTemplateError(name, path)

        return handle

    def get_source_context(self, name: str) -> Source:
        """Read a template's raw content.

        Raises:
            TemplateMissingError: No entry at the resolved path
            DirectoryTemplateError: The entry is a directory
            TemplateReadError: The filesystem read reported failure
        """
        self.get_file_or_fail(name)
        return self._read_source(name)

    def _read_source(self, name: str) -> Source:
        """Read content for a template whose entry was already validated."""
        path = self.resolve_template_name(name)
        code = self._filesystem.read(path)

        if code is None or code is False:
            logger.debug("template_read_failed", template=name, path=path)
            raise TemplateReadError(name, path)

        if isinstance(code, str):
            code = code.encode(self._encoding)

        return Source(code=code, name=name)

    def get_cache_key(self, name: str) -> str:
        """Return the cache key for a template: its logical name.

        Raises:
            TemplateLoaderError: If the template cannot be used
        """
        self.get_file_or_fail(name)
        return name

    def is_fresh(self, name: str, time: Any) -> bool:
        """Check that the template was not modified after ``time``.

        Raises:
            TemplateLoaderError: If the template cannot be used
        """
        handle = self.get_file_or_fail(name)
        return to_timestamp(time) >= to_timestamp(handle.get_timestamp())

    def get_source(
        self, environment: Environment, template: str
    ) -> tuple[str, str, Callable[[], bool]]:
        """Jinja2 hook: return (source, filename, uptodate) for a template."""
        handle = self.get_file_or_fail(template)
        mtime = to_timestamp(handle.get_timestamp())
        source = self._read_source(template)

        def uptodate() -> bool:
            try:
                return self.is_fresh(template, mtime)
            except TemplateLoaderError:
                return False

        return (
            source.text(self._encoding),
            self.resolve_template_name(template),
            uptodate,
        )
