"""
Profile document loader.

Reads uploaded profile documents (JSON objects) from text, bytes, or a
file path and validates them into ProfileRecords. Every failure is raised
as a ParseError naming the offending document.
"""

import codecs
import json
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from pivotkarir.data.models import ProfileRecord
from pivotkarir.utils.config import get_settings
from pivotkarir.utils.exceptions import ParseError
from pivotkarir.utils.logger import get_logger

logger = get_logger(__name__)


def _reject_constant(token: str) -> None:
    raise ValueError(f"{token} is not valid JSON")


class ProfileLoader:
    """Parses profile documents into ProfileRecords."""

    def __init__(
        self,
        max_file_size: Optional[int] = None,
        supported_formats: Optional[tuple[str, ...]] = None,
    ):
        """
        Initialize the loader.

        Args:
            max_file_size: Maximum accepted file size in bytes.
                          Defaults to config setting.
            supported_formats: Accepted file suffixes. Defaults to config setting.
        """
        settings = get_settings()
        self.max_file_size = max_file_size or settings.profiles.max_file_size_bytes
        self.supported_formats = supported_formats or settings.profiles.supported_formats

    def load_text(self, content: str, source_name: str = "document") -> ProfileRecord:
        """
        Parse a profile from JSON text.

        Args:
            content: Raw document body.
            source_name: Document name used in error messages.

        Returns:
            Parsed ProfileRecord.

        Raises:
            ParseError: If the body is not a standard JSON object.
        """
        try:
            data = json.loads(content, parse_constant=_reject_constant)
        except ValueError as e:
            raise ParseError(source_name, str(e)) from e

        if not isinstance(data, dict):
            raise ParseError(
                source_name,
                f"expected a JSON object, got {type(data).__name__}",
            )

        try:
            profile = ProfileRecord.model_validate(data)
        except ValidationError as e:
            fields = ", ".join(
                ".".join(str(part) for part in err["loc"]) for err in e.errors()
            )
            raise ParseError(source_name, f"invalid value for {fields}") from e

        if profile.is_empty:
            logger.warning(f"{source_name} has no recognized profile fields")
        logger.debug(f"Loaded profile from {source_name}")
        return profile

    def load_bytes(self, content: bytes, source_name: str = "document") -> ProfileRecord:
        """Decode document bytes and parse them."""
        return self.load_text(self._decode(content, source_name), source_name)

    def load_file(self, file_path: str | Path) -> ProfileRecord:
        """
        Read and parse a profile document from disk.

        Args:
            file_path: Path to the JSON document.

        Returns:
            Parsed ProfileRecord.

        Raises:
            ParseError: If the file is missing, unsupported, too large or malformed.
        """
        path = Path(file_path)
        self._validate_file(path)
        try:
            content = path.read_bytes()
        except OSError as e:
            raise ParseError(path.name, str(e)) from e
        return self.load_bytes(content, path.name)

    def _decode(self, content: bytes, source_name: str) -> str:
        """Decode UTF-16 (with BOM) or UTF-8, falling back to latin-1."""
        if content.startswith((codecs.BOM_UTF16_LE, codecs.BOM_UTF16_BE)):
            try:
                return content.decode("utf-16")
            except UnicodeDecodeError as e:
                raise ParseError(source_name, f"unreadable UTF-16 text: {e.reason}") from e
        try:
            return content.decode("utf-8-sig")
        except UnicodeDecodeError:
            logger.debug(f"{source_name} is not UTF-8, reading as latin-1")
            return content.decode("latin-1")

    def _validate_file(self, path: Path) -> None:
        """Check that the file exists, is a supported format and is not too large."""
        if not path.exists():
            raise ParseError(path.name, "file not found")
        if not path.is_file():
            raise ParseError(path.name, "not a file")
        if path.suffix.lower() not in self.supported_formats:
            raise ParseError(
                path.name,
                f"unsupported format {path.suffix or '(none)'} "
                f"(supported: {', '.join(self.supported_formats)})",
            )
        size = path.stat().st_size
        if size > self.max_file_size:
            raise ParseError(path.name, f"file too large: {size} bytes (max: {self.max_file_size})")
