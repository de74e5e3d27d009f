"""
package: mstair.stringify.stringifier
"""

# <AUTOGEN_INIT>
from mstair.stringify.stringifier import (
    dispatcher,
    model,
    reflection,
    strategies,
    stringify_api,
    view,
)


__all__ = [
    "dispatcher",
    "model",
    "reflection",
    "strategies",
    "stringify_api",
    "view",
]
# </AUTOGEN_INIT>
