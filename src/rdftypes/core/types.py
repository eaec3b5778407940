"""Core data types for rdftypes.

This module defines the repository objects the validator reads:
- StoredFile: one uploaded file and its declared rdf:type
- FileSet: one intellectual item made of one or more files
"""

from dataclasses import dataclass, field
from typing import Any
from uuid import uuid4


@dataclass
class StoredFile:
    """A single file attached to a file set.

    Attributes:
        type: Declared rdf:type of the file (e.g. "original_file"), or None
        id: Unique file identifier
        filename: Original file name, if known
        mime_type: Content type, if known
    """
    type: str | None = None
    id: str = field(default_factory=lambda: str(uuid4()))
    filename: str | None = None
    mime_type: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize file to dictionary."""
        return {
            "id": self.id,
            "type": self.type,
            "filename": self.filename,
            "mime_type": self.mime_type,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any] | str) -> "StoredFile":
        """Create file from a dictionary or a bare rdf:type string."""
        if isinstance(data, str):
            return cls(type=data)
        return cls(
            id=data.get("id", str(uuid4())),
            type=data.get("type", data.get("rdf_type")),
            filename=data.get("filename"),
            mime_type=data.get("mime_type"),
        )


@dataclass
class FileSet:
    """A logical grouping of uploaded files representing one item.

    Attributes:
        files: Files attached to this file set, in upload order
        id: Unique file set identifier
        title: Optional display title
    """
    files: list[StoredFile] = field(default_factory=list)
    id: str = field(default_factory=lambda: str(uuid4()))
    title: str | None = None

    @property
    def types(self) -> list[str]:
        """Declared rdf:type of each file, skipping files without one."""
        return [f.type for f in self.files if f.type is not None]

    def to_dict(self) -> dict[str, Any]:
        """Serialize file set to dictionary."""
        return {
            "id": self.id,
            "title": self.title,
            "files": [f.to_dict() for f in self.files],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "FileSet":
        """Create file set from dictionary.

        ``files`` must be a list of file mappings or bare rdf:type strings.

        Raises:
            ValueError: If ``data`` is not a mapping or ``files`` is not a list
        """
        if not isinstance(data, dict):
            raise ValueError(f"File set must be a mapping, got {type(data).__name__}")

        files = data.get("files", [])
        if not isinstance(files, list):
            raise ValueError(f"File set 'files' must be a list, got {type(files).__name__}")
        for f in files:
            if not isinstance(f, (dict, str)):
                raise ValueError(f"File entries must be mappings or strings, got {type(f).__name__}")

        return cls(
            id=data.get("id", str(uuid4())),
            title=data.get("title"),
            files=[StoredFile.from_dict(f) for f in files],
        )

    @classmethod
    def from_types(cls, types: list[str], **kwargs: Any) -> "FileSet":
        """Build a file set with one file per rdf:type."""
        return cls(files=[StoredFile(type=t) for t in types], **kwargs)
