"""
package: mstair.stringify.base
"""

# <AUTOGEN_INIT>
from mstair.stringify.base import (
    config,
    constants,
    datetime_helpers,
    fs_helpers,
    string_helpers,
    types,
)


__all__ = [
    "config",
    "constants",
    "datetime_helpers",
    "fs_helpers",
    "string_helpers",
    "types",
]
# </AUTOGEN_INIT>
