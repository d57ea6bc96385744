"""the decoded document and its JSON presentation"""
import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, Optional

from .resolver import ResolvedItem

# Warning: the field names and their order are the JSON API
FORMAT_VERSION: str = '1.0'


class Layout(Enum):
    """how the JSON is laid out"""

    COMPACT = 'compact'  # single line
    INDENTED = 'indented'  # for human review


def layout_for(pretty: bool, skip_data: bool) -> Layout:
    """output without data is only useful to humans, so it is always indented"""
    return Layout.INDENTED if pretty or skip_data else Layout.COMPACT


def as_int32(value: int) -> int:
    """reinterpret an unsigned 32 bit value as signed"""
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def _without_none(pairs: Iterable[tuple[str, Any]]) -> dict[str, Any]:
    """absent fields are left out rather than written as null"""
    return {key: value for key, value in pairs if value is not None}


@dataclass
class JsonDescriptor:
    """summary of the descriptor"""
    length: int = 0
    data: Optional[list[int]] = None

    def to_dict(self) -> dict[str, Any]:
        """the JSON object"""
        return _without_none([('length', self.length), ('data', self.data)])


@dataclass
class JsonItem:
    """one decoded item"""
    offset: int = 0
    item_type: str = 'Unknown'
    item_name: str = 'Unknown'
    data: Optional[list[int]] = None
    value: Optional[int] = None
    collection: Optional[str] = None
    usage_page: Optional[str] = None
    usage: Optional[str] = None

    @classmethod
    def from_resolved(cls, resolved: ResolvedItem, skip_data: bool = False) -> "JsonItem":
        """project a resolved item, skip_data leaves out the item bytes"""
        value: Optional[int] = resolved.item.value
        collection = resolved.annotations.collection
        return cls(offset=resolved.item.offset,
                   item_type=resolved.category.value,
                   item_name=resolved.name.value,
                   data=None if skip_data else list(resolved.item.raw),
                   value=None if value is None else as_int32(value),
                   collection=None if collection is None else collection.value,
                   usage_page=resolved.annotations.usage_page,
                   usage=resolved.annotations.usage)

    def to_dict(self) -> dict[str, Any]:
        """the JSON object"""
        return _without_none([
            ('offset', self.offset),
            ('data', self.data),
            ('type', self.item_type),
            ('name', self.item_name),
            ('value', self.value),
            ('collection', self.collection),
            ('usage_page', self.usage_page),
            ('usage', self.usage),
        ])


@dataclass
class Document:
    """the complete decode of a descriptor"""
    descriptor: JsonDescriptor
    items: list[JsonItem] = field(default_factory=list)
    version: str = FORMAT_VERSION

    def to_dict(self) -> dict[str, Any]:
        """the JSON object"""
        return {
            'version': self.version,
            'descriptor': self.descriptor.to_dict(),
            'items': [item.to_dict() for item in self.items],
        }

    def to_json(self, layout: Layout = Layout.COMPACT) -> str:
        """serialize the document"""
        if layout == Layout.INDENTED:
            return json.dumps(self.to_dict(), indent=2)
        return json.dumps(self.to_dict(), separators=(',', ':'))


def shape(data: bytes, resolved: Iterable[ResolvedItem], skip_data: bool = False) -> Document:
    """assemble the document, skip_data leaves out every data field"""
    descriptor: JsonDescriptor = JsonDescriptor(length=len(data), data=None if skip_data else list(data))
    return Document(descriptor=descriptor,
                    items=[JsonItem.from_resolved(item, skip_data=skip_data) for item in resolved])
