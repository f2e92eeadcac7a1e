"""File-backed typed document store.

This module resolves path segments beneath a storage root and performs
XML, JSON, and raw string document IO plus directory maintenance.
Nothing is cached between calls: every operation re-resolves its path
and touches the filesystem directly.
"""

from __future__ import annotations

from pathlib import Path
import shutil
from typing import TypeVar

from core.config import StoreConfig
from core.constants import DEFAULT_ENCODING, NO_FILE_PATH_MESSAGE, NO_PATH_MESSAGE
from core.errors import PlayerDataStorageError
from core.logging_config import get_logger
from core.types import PlatformName, StorageRoots, StorageVariant
from locate.path_resolver import require_segments, resolve_root
from locate.platform_detection import detect_platform
from locate.storage_roots import default_local_storage_path, default_storage_roots
from store.codecs import DocumentCodec
from store.json_codec import JsonCodec
from store.xml_codec import XmlCodec

_LOGGER = get_logger(__name__)

T = TypeVar("T")


class DocumentStore:
    """Typed document store rooted at one storage directory.

    The ``desktop`` variant owns a per-application root and removes it on
    :meth:`wipe`. The ``sandboxed`` variant lives in a host-provided local
    directory that :meth:`wipe` empties but keeps.
    """

    def __init__(
        self,
        root: Path,
        *,
        variant: StorageVariant = "desktop",
        json_codec: DocumentCodec | None = None,
        xml_codec: DocumentCodec | None = None,
    ) -> None:
        """Create a store.

        Args:
            root: Storage root. Created lazily on first write.
            variant: ``desktop`` or ``sandboxed`` wipe semantics.
            json_codec: JSON collaborator, defaults to :class:`JsonCodec`.
            xml_codec: XML collaborator, defaults to :class:`XmlCodec`.
        """
        self._root = Path(root).absolute()
        self._variant = variant
        self._json_codec = json_codec or JsonCodec()
        self._xml_codec = xml_codec or XmlCodec()

    @classmethod
    def for_application(
        cls,
        app_id: str,
        *,
        platform: PlatformName | None = None,
        roots: StorageRoots | None = None,
        json_codec: DocumentCodec | None = None,
        xml_codec: DocumentCodec | None = None,
    ) -> "DocumentStore":
        """Create a desktop store for an application identifier.

        Args:
            app_id: Application identifier naming the save directory.
            platform: Platform family, detected from the host when omitted.
            roots: Host base directories, defaults to home and working dir.
            json_codec: Optional JSON collaborator.
            xml_codec: Optional XML collaborator.

        Returns:
            Desktop-variant store.
        """
        root = resolve_root(
            app_id,
            platform or detect_platform(),
            roots or default_storage_roots(),
        )
        return cls(root, variant="desktop", json_codec=json_codec, xml_codec=xml_codec)

    @classmethod
    def sandboxed(
        cls,
        local_root: Path | None = None,
        *,
        json_codec: DocumentCodec | None = None,
        xml_codec: DocumentCodec | None = None,
    ) -> "DocumentStore":
        """Create a sandboxed store rooted at the local storage directory."""
        return cls(
            local_root or default_local_storage_path(),
            variant="sandboxed",
            json_codec=json_codec,
            xml_codec=xml_codec,
        )

    @classmethod
    def from_config(cls, config: StoreConfig) -> "DocumentStore":
        """Create a store from validated runtime configuration."""
        return cls(config.resolve_root(), variant=config.variant)

    @property
    def root(self) -> Path:
        """Absolute storage root."""
        return self._root

    @property
    def variant(self) -> StorageVariant:
        return self._variant

    def resolve(self, *segments: str) -> Path:
        """Resolve path segments beneath the storage root.

        Raises:
            InvalidPathError: If no segments are given.
        """
        return self._resolve(segments, NO_FILE_PATH_MESSAGE)

    def read_xml(self, target_type: type[T], *segments: str) -> T:
        """Read an XML document into ``target_type``.

        Raises:
            InvalidPathError: If no segments are given.
            PlayerDataStorageError: If the file cannot be read.
            PlayerDataSerializationError: If the document cannot be decoded.
        """
        path = self._resolve(segments, NO_FILE_PATH_MESSAGE)
        return self._xml_codec.decode(self._read_text(path), target_type)

    def write_xml(self, value: object, *segments: str) -> None:
        """Serialize ``value`` as XML, replacing any existing file."""
        path = self._resolve(segments, NO_FILE_PATH_MESSAGE)
        data = _encode_document(path, self._xml_codec.encode(value))
        self._ensure_directory_exists_for_file(path)
        self._write_bytes(path, data)

    def read_json(self, target_type: type[T], *segments: str) -> T:
        """Read a JSON document into ``target_type``.

        Raises:
            InvalidPathError: If no segments are given.
            PlayerDataStorageError: If the file cannot be read.
            PlayerDataSerializationError: If the document cannot be decoded.
        """
        path = self._resolve(segments, NO_FILE_PATH_MESSAGE)
        return self._json_codec.decode(self._read_text(path), target_type)

    def write_json(self, value: object, *segments: str) -> None:
        """Serialize ``value`` as JSON, replacing any existing file."""
        path = self._resolve(segments, NO_FILE_PATH_MESSAGE)
        data = _encode_document(path, self._json_codec.encode(value))
        self._ensure_directory_exists_for_file(path)
        self._write_bytes(path, data)

    def read_string(self, *segments: str) -> str:
        """Return raw file contents, line endings included."""
        path = self._resolve(segments, NO_FILE_PATH_MESSAGE)
        return self._read_text(path)

    def write_string(self, content: str, *segments: str) -> None:
        """Replace file contents with ``content`` exactly as given."""
        path = self._resolve(segments, NO_FILE_PATH_MESSAGE)
        data = _encode_document(path, content)
        self._ensure_directory_exists_for_file(path)
        self._write_bytes(path, data)

    def delete(self, *segments: str) -> bool:
        """Delete a file, or a directory with all of its contents.

        Returns:
            True when something was deleted, False when the path was missing.

        Raises:
            PlayerDataStorageError: If deletion fails.
        """
        path = self._resolve(segments, NO_FILE_PATH_MESSAGE)
        try:
            if path.is_dir() and not path.is_symlink():
                shutil.rmtree(path)
            elif path.exists() or path.is_symlink():
                path.unlink()
            else:
                return False
        except OSError as error:
            raise PlayerDataStorageError(
                f"Failed to delete {path}: {error}. Check file permissions and retry."
            ) from error
        _LOGGER.info("path_deleted", path=str(path))
        return True

    def has_file(self, *segments: str) -> bool:
        """Return whether the path exists and is not a directory."""
        path = self._resolve(segments, NO_FILE_PATH_MESSAGE)
        return _exists(path) and not _is_dir(path)

    def has_directory(self, *segments: str) -> bool:
        """Return whether the path exists and is a directory."""
        path = self._resolve(segments, NO_PATH_MESSAGE)
        return _is_dir(path)

    def create_directory(self, *segments: str) -> None:
        """Create a directory and its intermediates; no-op if it exists."""
        path = self._resolve(segments, NO_PATH_MESSAGE)
        if _exists(path):
            return
        self._ensure_root()
        self._make_directories(path)
        _LOGGER.info("directory_created", path=str(path))

    def wipe(self) -> None:
        """Delete every document under the storage root.

        The desktop variant also removes the root itself. The sandboxed
        variant keeps the now-empty root.
        """
        if not _exists(self._root):
            return
        try:
            for child in self._root.iterdir():
                if child.is_dir() and not child.is_symlink():
                    shutil.rmtree(child)
                else:
                    child.unlink()
            if self._variant == "desktop":
                self._root.rmdir()
        except OSError as error:
            raise PlayerDataStorageError(
                f"Failed to wipe storage root {self._root}: {error}. "
                "Check file permissions and retry."
            ) from error
        _LOGGER.info("storage_wiped", root=str(self._root), variant=self._variant)

    def _resolve(self, segments: tuple[str, ...], message: str) -> Path:
        return self._root.joinpath(*require_segments(segments, message))

    def _ensure_root(self) -> None:
        if _exists(self._root):
            return
        self._make_directories(self._root)

    def _ensure_directory_exists_for_file(self, path: Path) -> None:
        """Create the storage root and the file's parent if either is missing.

        Only the immediate parent is checked; when it exists nothing else
        is created.
        """
        self._ensure_root()
        if _exists(path):
            return
        parent = path.parent
        if _exists(parent):
            return
        self._make_directories(parent)

    def _make_directories(self, path: Path) -> None:
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as error:
            raise PlayerDataStorageError(
                f"Failed to create directory {path}: {error}. "
                "Check that no file blocks the path and that it is writable."
            ) from error

    def _read_text(self, path: Path) -> str:
        _LOGGER.debug("document_read", path=str(path))
        try:
            return path.read_bytes().decode(DEFAULT_ENCODING)
        except FileNotFoundError as error:
            raise PlayerDataStorageError(
                f"Document not found at {path}. Write it before reading."
            ) from error
        except (OSError, UnicodeDecodeError) as error:
            raise PlayerDataStorageError(
                f"Failed to read document at {path}: {error}."
            ) from error

    def _write_bytes(self, path: Path, data: bytes) -> None:
        try:
            path.write_bytes(data)
        except OSError as error:
            raise PlayerDataStorageError(
                f"Failed to write document at {path}: {error}. "
                "Check file permissions and retry."
            ) from error
        _LOGGER.info("document_written", path=str(path), size_bytes=len(data))


def _encode_document(path: Path, content: str) -> bytes:
    """Encode document text without newline translation."""
    try:
        return content.encode(DEFAULT_ENCODING)
    except UnicodeEncodeError as error:
        raise PlayerDataStorageError(
            f"Failed to encode document for {path}: {error}. "
            f"Documents must be valid {DEFAULT_ENCODING} text."
        ) from error


def _exists(path: Path) -> bool:
    try:
        return path.exists()
    except OSError as error:
        raise PlayerDataStorageError(
            f"Failed to inspect {path}: {error}. Check directory permissions and retry."
        ) from error


def _is_dir(path: Path) -> bool:
    try:
        return path.is_dir()
    except OSError as error:
        raise PlayerDataStorageError(
            f"Failed to inspect {path}: {error}. Check directory permissions and retry."
        ) from error
