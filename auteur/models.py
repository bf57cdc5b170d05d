"""Post document types and their JSON-ready dictionary forms."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, Mapping, Optional, TypeVar, Union

from auteur.schema import plat_schema

__all__ = [
    "FormType",
    "Field",
    "Header",
    "Footer",
    "Block",
    "block_to_dict",
    "block_from_dict",
    "Post",
    "CreatePost",
    "PageData",
    "Reference",
]

T = TypeVar("T")


def _mapping(data: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ValueError(f"invalid type for {what}: expected an object")
    return data


def _require(data: Mapping[str, Any], key: str, what: str) -> Any:
    try:
        return data[key]
    except KeyError:
        raise ValueError(f"missing field `{key}` in {what}") from None


def _string(value: Any, key: str, what: str) -> str:
    if not isinstance(value, str):
        raise ValueError(f"invalid type for `{key}` in {what}: expected a string")
    return value


class FormType(Enum):
    """The kind of form control a field is edited with."""

    INPUT_AREA = "InputArea"
    INPUT_TEXT = "InputText"
    INPUT_DATE = "InputDate"

    @classmethod
    def parse(cls, value: Any) -> "FormType":
        """Return the form type whose wire name is ``value``."""
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"unknown form type: {value!r}") from None


@plat_schema
@dataclass
class Field:
    """A labelled form field."""

    label: str
    hint: str
    form_type: FormType

    def to_dict(self) -> dict[str, Any]:
        return {
            "label": self.label,
            "hint": self.hint,
            "form_type": self.form_type.value,
        }

    @classmethod
    def from_dict(cls, data: Any) -> "Field":
        data = _mapping(data, "Field")
        return cls(
            label=_string(_require(data, "label", "Field"), "label", "Field"),
            hint=_string(_require(data, "hint", "Field"), "hint", "Field"),
            form_type=FormType.parse(_require(data, "form_type", "Field")),
        )


@plat_schema
@dataclass
class Header:
    """A header block."""

    content: Field

    def to_dict(self) -> dict[str, Any]:
        return {"content": self.content.to_dict()}

    @classmethod
    def from_dict(cls, data: Any) -> "Header":
        data = _mapping(data, "Header")
        return cls(content=Field.from_dict(_require(data, "content", "Header")))


@plat_schema
@dataclass
class Footer:
    """A footer block."""

    copyright: Field

    def to_dict(self) -> dict[str, Any]:
        return {"copyright": self.copyright.to_dict()}

    @classmethod
    def from_dict(cls, data: Any) -> "Footer":
        data = _mapping(data, "Footer")
        return cls(copyright=Field.from_dict(_require(data, "copyright", "Footer")))


Block = Union[Header, Footer]

_BLOCK_TYPES: dict[str, type] = {"Header": Header, "Footer": Footer}


def block_to_dict(block: Block) -> dict[str, Any]:
    """Serialise a block as an object tagged with its variant name."""
    for tag, kind in _BLOCK_TYPES.items():
        if isinstance(block, kind):
            return {tag: block.to_dict()}
    raise TypeError(f"not a block: {type(block).__name__}")


def block_from_dict(data: Any) -> Block:
    """Read a block from its tagged-object form."""
    data = _mapping(data, "Block")
    if len(data) != 1:
        raise ValueError("a block must be an object with exactly one variant key")
    ((tag, body),) = data.items()
    kind = _BLOCK_TYPES.get(tag)
    if kind is None:
        raise ValueError(f"unknown block variant: {tag!r}")
    return kind.from_dict(body)


def _blocks_from(value: Any, what: str) -> list[Block]:
    if not isinstance(value, list):
        raise ValueError(f"invalid type for `blocks` in {what}: expected a list")
    return [block_from_dict(item) for item in value]


@plat_schema
@dataclass
class Post:
    """A post document: a title field and a list of blocks."""

    title: Field
    blocks: list[Block] = field(default_factory=list)
    id: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title.to_dict(),
            "blocks": [block_to_dict(block) for block in self.blocks],
        }

    @classmethod
    def from_dict(cls, data: Any) -> "Post":
        data = _mapping(data, "Post")
        record_id = data.get("id")
        if record_id is not None:
            record_id = _string(record_id, "id", "Post")
        return cls(
            id=record_id,
            title=Field.from_dict(_require(data, "title", "Post")),
            blocks=_blocks_from(_require(data, "blocks", "Post"), "Post"),
        )


@dataclass
class CreatePost:
    """The payload for creating a post."""

    title: str

    def to_dict(self) -> dict[str, Any]:
        return {"title": self.title}

    @classmethod
    def from_dict(cls, data: Any) -> "CreatePost":
        data = _mapping(data, "CreatePost")
        return cls(
            title=_string(_require(data, "title", "CreatePost"), "title", "CreatePost")
        )


@dataclass
class PageData:
    """What the admin edit page is rendered with."""

    form_name: str
    title: Field
    blocks: list[Block] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "form_name": self.form_name,
            "title": self.title.to_dict(),
            "blocks": [block_to_dict(block) for block in self.blocks],
        }


@dataclass
class Reference(Generic[T]):
    """A typed reference to another document by id."""

    id: str
    type_name: str = "reference"

    def to_dict(self) -> dict[str, Any]:
        return {"_type": self.type_name, "_ref": self.id}

    @classmethod
    def from_dict(cls, data: Any) -> "Reference[T]":
        data = _mapping(data, "Reference")
        return cls(
            id=_string(_require(data, "_ref", "Reference"), "_ref", "Reference"),
            type_name=_string(
                _require(data, "_type", "Reference"), "_type", "Reference"
            ),
        )