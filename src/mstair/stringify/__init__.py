"""
package: mstair.stringify
"""

# <AUTOGEN_INIT>
from mstair.stringify import (
    base,
    stringifier,
    xlogging,
)


__all__ = [
    "base",
    "stringifier",
    "xlogging",
]
# </AUTOGEN_INIT>

from mstair.stringify.stringifier.model import StringifyConfig
from mstair.stringify.stringifier.stringify_api import stringify, stringify_collection


__all__ += ["StringifyConfig", "stringify", "stringify_collection"]

__version__ = "0.1.0"
