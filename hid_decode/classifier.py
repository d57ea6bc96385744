"""classification of report descriptor items"""
from enum import Enum

from .protocol.hid_defs import GlobalTag, ItemType, LocalTag, MainTag
from .protocol.items import TokenizedItem


# Warning: the values of these enums are part of the JSON output
class ItemCategory(Enum):
    """coarse category of an item"""

    GLOBAL = 'Global'
    MAIN = 'Main'
    LOCAL = 'Local'
    UNKNOWN = 'Unknown'


class ItemName(Enum):
    """semantic name of an item, one per item kind"""

    UNKNOWN = 'Unknown'
    INPUT = 'Input'
    OUTPUT = 'Output'
    FEATURE = 'Feature'
    COLLECTION = 'Collection'
    END_COLLECTION = 'EndCollection'
    USAGE_PAGE = 'UsagePage'
    LOGICAL_MINIMUM = 'LogicalMinimum'
    LOGICAL_MAXIMUM = 'LogicalMaximum'
    PHYSICAL_MINIMUM = 'PhysicalMinimum'
    PHYSICAL_MAXIMUM = 'PhysicalMaximum'
    UNIT_EXPONENT = 'UnitExponent'
    UNIT = 'Unit'
    REPORT_SIZE = 'ReportSize'
    REPORT_ID = 'ReportId'
    REPORT_COUNT = 'ReportCount'
    PUSH = 'Push'
    POP = 'Pop'
    RESERVED = 'Reserved'
    USAGE = 'Usage'
    USAGE_MINIMUM = 'UsageMinimum'
    USAGE_MAXIMUM = 'UsageMaximum'
    DESIGNATOR_INDEX = 'DesignatorIndex'
    DESIGNATOR_MINIMUM = 'DesignatorMinimum'
    DESIGNATOR_MAXIMUM = 'DesignatorMaximum'
    STRING_INDEX = 'StringIndex'
    STRING_MINIMUM = 'StringMinimum'
    STRING_MAXIMUM = 'StringMaximum'
    DELIMITER = 'Delimiter'

    @property
    def label(self) -> str:
        """human readable name, e.g. 'Usage Page'"""
        return self.name.replace('_', ' ').title().replace('Id', 'ID')


ITEM_CATEGORIES: dict[ItemType, ItemCategory] = {
    ItemType.MAIN: ItemCategory.MAIN,
    ItemType.GLOBAL: ItemCategory.GLOBAL,
    ItemType.LOCAL: ItemCategory.LOCAL,
    ItemType.RESERVED: ItemCategory.UNKNOWN,
    ItemType.LONG: ItemCategory.UNKNOWN,
}

MAIN_ITEM_NAMES: dict[MainTag, ItemName] = {
    MainTag.INPUT: ItemName.INPUT,
    MainTag.OUTPUT: ItemName.OUTPUT,
    MainTag.FEATURE: ItemName.FEATURE,
    MainTag.COLLECTION: ItemName.COLLECTION,
    MainTag.END_COLLECTION: ItemName.END_COLLECTION,
}

GLOBAL_ITEM_NAMES: dict[GlobalTag, ItemName] = {
    GlobalTag.USAGE_PAGE: ItemName.USAGE_PAGE,
    GlobalTag.LOGICAL_MINIMUM: ItemName.LOGICAL_MINIMUM,
    GlobalTag.LOGICAL_MAXIMUM: ItemName.LOGICAL_MAXIMUM,
    GlobalTag.PHYSICAL_MINIMUM: ItemName.PHYSICAL_MINIMUM,
    GlobalTag.PHYSICAL_MAXIMUM: ItemName.PHYSICAL_MAXIMUM,
    GlobalTag.UNIT_EXPONENT: ItemName.UNIT_EXPONENT,
    GlobalTag.UNIT: ItemName.UNIT,
    GlobalTag.REPORT_SIZE: ItemName.REPORT_SIZE,
    GlobalTag.REPORT_ID: ItemName.REPORT_ID,
    GlobalTag.REPORT_COUNT: ItemName.REPORT_COUNT,
    GlobalTag.PUSH: ItemName.PUSH,
    GlobalTag.POP: ItemName.POP,
    GlobalTag.RESERVED_C: ItemName.RESERVED,
    GlobalTag.RESERVED_D: ItemName.RESERVED,
    GlobalTag.RESERVED_E: ItemName.RESERVED,
    GlobalTag.RESERVED_F: ItemName.RESERVED,
}

LOCAL_ITEM_NAMES: dict[LocalTag, ItemName] = {
    LocalTag.USAGE: ItemName.USAGE,
    LocalTag.USAGE_MINIMUM: ItemName.USAGE_MINIMUM,
    LocalTag.USAGE_MAXIMUM: ItemName.USAGE_MAXIMUM,
    LocalTag.DESIGNATOR_INDEX: ItemName.DESIGNATOR_INDEX,
    LocalTag.DESIGNATOR_MINIMUM: ItemName.DESIGNATOR_MINIMUM,
    LocalTag.DESIGNATOR_MAXIMUM: ItemName.DESIGNATOR_MAXIMUM,
    LocalTag.RESERVED_6: ItemName.RESERVED,
    LocalTag.STRING_INDEX: ItemName.STRING_INDEX,
    LocalTag.STRING_MINIMUM: ItemName.STRING_MINIMUM,
    LocalTag.STRING_MAXIMUM: ItemName.STRING_MAXIMUM,
    LocalTag.DELIMITER: ItemName.DELIMITER,
    LocalTag.RESERVED_B: ItemName.RESERVED,
    LocalTag.RESERVED_C: ItemName.RESERVED,
    LocalTag.RESERVED_D: ItemName.RESERVED,
    LocalTag.RESERVED_E: ItemName.RESERVED,
    LocalTag.RESERVED_F: ItemName.RESERVED,
}

# (tag enum, names) per item type; types not listed here have no named tags
TAG_TABLES: dict[ItemType, tuple[type, dict]] = {
    ItemType.MAIN: (MainTag, MAIN_ITEM_NAMES),
    ItemType.GLOBAL: (GlobalTag, GLOBAL_ITEM_NAMES),
    ItemType.LOCAL: (LocalTag, LOCAL_ITEM_NAMES),
}


def item_category(item: TokenizedItem) -> ItemCategory:
    """the coarse category, a direct function of the item type"""
    return ITEM_CATEGORIES.get(item.item_type, ItemCategory.UNKNOWN)


def item_name(item: TokenizedItem) -> ItemName:
    """the semantic name of the item, UNKNOWN when the tag isn't defined for its type"""
    table: tuple[type, dict] | None = TAG_TABLES.get(item.item_type)
    if table is None:
        return ItemName.UNKNOWN
    tag_enum, names = table
    try:
        return names[tag_enum(item.tag)]
    except ValueError:  # reserved main tags
        return ItemName.UNKNOWN


def classify(item: TokenizedItem) -> tuple[ItemCategory, ItemName]:
    """classify a single item, never fails"""
    return item_category(item), item_name(item)
