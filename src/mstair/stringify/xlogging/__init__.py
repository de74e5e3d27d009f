"""
package: mstair.stringify.xlogging
"""

# <AUTOGEN_INIT>
from mstair.stringify.xlogging import (
    logger_constants,
    logger_factory,
    logger_formatter,
    logger_util,
)


__all__ = [
    "logger_constants",
    "logger_factory",
    "logger_formatter",
    "logger_util",
]
# </AUTOGEN_INIT>
