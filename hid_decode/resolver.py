"""context aware annotation of classified items

The usage page is global state in a report descriptor: a Usage Page item
applies to every following Usage item until the next Usage Page item. The
resolver threads that state through the items as an immutable value,
``resolve()`` takes the state left by the previous items and returns the
state for the next one.
"""
import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable, Optional

from .classifier import ItemCategory, ItemName, classify
from .protocol.hid_defs import CollectionType
from .protocol.items import TokenizedItem
from .usage_tables import DEFAULT_USAGE_TABLES, UsageTables

LOGGER: logging.Logger = logging.getLogger('hid-decode')


# Warning: the values of this enum are part of the JSON output
class CollectionKind(Enum):
    """kind of a Collection item"""

    PHYSICAL = 'Physical'
    APPLICATION = 'Application'
    LOGICAL = 'Logical'
    UNKNOWN = 'Unknown'  # any collection type not listed above


COLLECTION_KINDS: dict[CollectionType, CollectionKind] = {
    CollectionType.PHYSICAL: CollectionKind.PHYSICAL,
    CollectionType.APPLICATION: CollectionKind.APPLICATION,
    CollectionType.LOGICAL: CollectionKind.LOGICAL,
}


@dataclass(frozen=True)
class ResolverState:
    """state carried from one item to the next"""

    usage_page: int = 0x0  # 16 bit


@dataclass(frozen=True)
class Annotations:
    """human readable additions to an item, each is optional"""

    collection: Optional[CollectionKind] = None
    usage_page: Optional[str] = None
    usage: Optional[str] = None


@dataclass(frozen=True)
class ResolvedItem:
    """a tokenized item with its classification and annotations"""

    item: TokenizedItem
    category: ItemCategory
    name: ItemName
    annotations: Annotations


def collection_kind(value: Optional[int]) -> CollectionKind:
    """map the data of a Collection item, an empty item is a Physical collection"""
    try:
        return COLLECTION_KINDS[CollectionType(value or 0)]
    except ValueError:
        LOGGER.debug(f"unrecognized collection type 0x{value:02x}")
        return CollectionKind.UNKNOWN


def resolve(state: ResolverState, item: TokenizedItem, name: ItemName,
            tables: UsageTables = DEFAULT_USAGE_TABLES) -> tuple[ResolverState, Annotations]:
    """annotate one item using the state left by the previous items, return the next state"""
    annotations: Annotations = Annotations()
    value: Optional[int] = item.value

    if name == ItemName.COLLECTION:
        annotations = replace(annotations, collection=collection_kind(value))
    elif name == ItemName.USAGE_PAGE:
        usage_page: int = (value or 0) & 0xFFFF  # label and state use the same 16-bit page
        if value is not None:
            annotations = replace(annotations, usage_page=tables.usage_page_name(usage_page))
        LOGGER.debug(f"usage page 0x{state.usage_page:04x} -> 0x{usage_page:04x}")
        state = replace(state, usage_page=usage_page)
    elif name == ItemName.USAGE:
        if value is not None:
            annotations = replace(annotations, usage=tables.usage_name(state.usage_page, value))

    return state, annotations


def resolve_all(items: Iterable[TokenizedItem],
                tables: UsageTables = DEFAULT_USAGE_TABLES) -> list[ResolvedItem]:
    """classify and annotate the items in order, each call starts from a fresh state"""
    state: ResolverState = ResolverState()
    resolved: list[ResolvedItem] = []
    for item in items:
        category, name = classify(item)
        LOGGER.debug(f"@{item.offset}: {category.value} {name.label}")
        state, annotations = resolve(state, item, name, tables)
        resolved.append(ResolvedItem(item=item, category=category, name=name, annotations=annotations))
    return resolved
