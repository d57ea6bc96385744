"""definitions for HID report descriptor items"""

# Item encoding can be found here:
# https://www.usb.org/document-library/device-class-definition-hid-111 (section 6.2.2)
#
from enum import IntEnum

LONG_ITEM_PREFIX: int = 0xFE
SHORT_ITEM_DATA_SIZE: dict[int, int] = {0: 0, 1: 1, 2: 2, 3: 4}  # bSize code -> number of data bytes


class ItemType(IntEnum):
    """bType, bits [3..2] of the item prefix"""

    MAIN = 0x0
    GLOBAL = 0x1
    LOCAL = 0x2
    RESERVED = 0x3
    LONG = 0xF  # not a bType, long items are identified by their prefix


class MainTag(IntEnum):
    """bTag of main items"""

    INPUT = 0x8
    OUTPUT = 0x9
    COLLECTION = 0xA
    FEATURE = 0xB
    END_COLLECTION = 0xC


class GlobalTag(IntEnum):
    """bTag of global items"""

    USAGE_PAGE = 0x0
    LOGICAL_MINIMUM = 0x1
    LOGICAL_MAXIMUM = 0x2
    PHYSICAL_MINIMUM = 0x3
    PHYSICAL_MAXIMUM = 0x4
    UNIT_EXPONENT = 0x5
    UNIT = 0x6
    REPORT_SIZE = 0x7
    REPORT_ID = 0x8
    REPORT_COUNT = 0x9
    PUSH = 0xA
    POP = 0xB
    RESERVED_C = 0xC
    RESERVED_D = 0xD
    RESERVED_E = 0xE
    RESERVED_F = 0xF


class LocalTag(IntEnum):
    """bTag of local items"""

    USAGE = 0x0
    USAGE_MINIMUM = 0x1
    USAGE_MAXIMUM = 0x2
    DESIGNATOR_INDEX = 0x3
    DESIGNATOR_MINIMUM = 0x4
    DESIGNATOR_MAXIMUM = 0x5
    RESERVED_6 = 0x6
    STRING_INDEX = 0x7
    STRING_MINIMUM = 0x8
    STRING_MAXIMUM = 0x9
    DELIMITER = 0xA
    RESERVED_B = 0xB
    RESERVED_C = 0xC
    RESERVED_D = 0xD
    RESERVED_E = 0xE
    RESERVED_F = 0xF


class CollectionType(IntEnum):
    """data of a Collection main item"""

    PHYSICAL = 0x00  # group of axes
    APPLICATION = 0x01  # mouse, keyboard
    LOGICAL = 0x02  # interrelated data
