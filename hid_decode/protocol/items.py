"""tokenizer for the items of a HID report descriptor"""

# Item layout, HID 1.11 section 6.2.2.2 (short items) and 6.2.2.3 (long items):
#   short: [prefix: bTag(4) bType(2) bSize(2)] [0, 1, 2 or 4 data bytes]
#   long:  [0xFE] [bDataSize] [bLongItemTag] [bDataSize data bytes]
#
import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Iterator, Optional

from datastruct import DataStruct
from datastruct.fields import field
from datastruct import Config, Endianness, datastruct_config, datastruct_get_config

from hid_decode.errors import MalformedDescriptorError

from .hid_defs import LONG_ITEM_PREFIX, SHORT_ITEM_DATA_SIZE, ItemType

# field names follow the HID specification
# pylint: disable=invalid-name

LOGGER: logging.Logger = logging.getLogger('hid-decode')

LONG_ITEM_HEADER_SIZE: int = 3  # prefix, bDataSize, bLongItemTag


@dataclass
class ItemBase(DataStruct):
    """report descriptor items are little-endian"""

    @classmethod
    @lru_cache()
    def config(cls) -> Config:
        datastruct_config(endianness=Endianness.LITTLE)
        config = Config(datastruct_get_config())
        config.update(getattr(cls, "_CONFIG", {}))
        return config

    @classmethod
    def new(cls, data: bytes):
        """Create (and return) a new instance based on the binary data"""
        return cls.unpack(data)


@dataclass
class ShortItem(ItemBase):
    """short item, the prefix describes type, tag and data size"""
    prefix: int = field("B", default=0x0)
    data: bytes = field(lambda ctx: SHORT_ITEM_DATA_SIZE[ctx.prefix & 0x3], default=b'')

    @property
    def item_type(self) -> ItemType:
        """bits [3..2] of the prefix"""
        return ItemType((self.prefix >> 2) & 0x3)

    @property
    def tag(self) -> int:
        """bits [7..4] of the prefix"""
        return (self.prefix >> 4) & 0xF


@dataclass
class LongItem(ItemBase):
    """long item, no long item tags are defined by the HID specification"""
    prefix: int = field("B", default=LONG_ITEM_PREFIX)
    bDataSize: int = field("B", default=0x0)
    bLongItemTag: int = field("B", default=0x0)
    data: bytes = field(lambda ctx: ctx.bDataSize, default=b'')


@dataclass(frozen=True)
class TokenizedItem:
    """an item and where it was found in the descriptor"""

    offset: int
    raw: bytes  # the complete item, prefix included
    item_type: ItemType
    tag: int
    data: bytes

    @property
    def value(self) -> Optional[int]:
        """the data as an unsigned little-endian integer, None when there is no data"""
        if self.item_type == ItemType.LONG or not self.data:
            return None
        return int.from_bytes(self.data, byteorder='little', signed=False)

    def __str__(self) -> str:
        """easy to read representation of the item"""
        return f"@{self.offset}: {self.item_type.name}/0x{self.tag:x} [{self.raw.hex()}]"


class ReportDescriptorItems:
    """the ordered items of a report descriptor"""

    def __init__(self, data: bytes):
        """tokenize the whole descriptor, raises MalformedDescriptorError"""
        self._data: bytes = bytes(data)
        self._items: list[TokenizedItem] = list(self._tokenize())

    @property
    def data(self) -> bytes:
        """the descriptor that was tokenized"""
        return self._data

    def __iter__(self) -> Iterator[TokenizedItem]:
        """iterate over the items in descriptor order"""
        return iter(self._items)

    def __len__(self) -> int:
        """number of items"""
        return len(self._items)

    def __getitem__(self, index: int) -> TokenizedItem:
        """item by position"""
        return self._items[index]

    def _tokenize(self) -> Iterator[TokenizedItem]:
        """walk the descriptor one item at a time"""
        offset: int = 0
        while offset < len(self._data):
            if self._data[offset] == LONG_ITEM_PREFIX:
                item: TokenizedItem = self._long_item(offset)
            else:
                item = self._short_item(offset)
            LOGGER.debug(f"item {item}")
            yield item
            offset += len(item.raw)

    def _short_item(self, offset: int) -> TokenizedItem:
        """decode the short item at offset"""
        size: int = 1 + SHORT_ITEM_DATA_SIZE[self._data[offset] & 0x3]
        if offset + size > len(self._data):
            raise MalformedDescriptorError(f"truncated item, expected {size} bytes, "
                                           f"{len(self._data) - offset} available", offset=offset)
        raw: bytes = self._data[offset:offset + size]
        short_item: ShortItem = ShortItem.new(raw)
        return TokenizedItem(offset=offset, raw=raw, item_type=short_item.item_type,
                             tag=short_item.tag, data=bytes(short_item.data))

    def _long_item(self, offset: int) -> TokenizedItem:
        """decode the long item at offset"""
        if offset + LONG_ITEM_HEADER_SIZE > len(self._data):
            raise MalformedDescriptorError("truncated long item header", offset=offset)
        size: int = LONG_ITEM_HEADER_SIZE + self._data[offset + 1]
        if offset + size > len(self._data):
            raise MalformedDescriptorError(f"truncated long item, expected {size} bytes, "
                                           f"{len(self._data) - offset} available", offset=offset)
        raw: bytes = self._data[offset:offset + size]
        long_item: LongItem = LongItem.new(raw)
        return TokenizedItem(offset=offset, raw=raw, item_type=ItemType.LONG,
                             tag=long_item.bLongItemTag, data=bytes(long_item.data))
