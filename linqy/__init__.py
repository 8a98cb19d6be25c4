"""
 __    _
|  |  |_|___ ___ _ _
|  |__| |   | . | | |
|_____|_|_|_|_  |_  |
              |_|___|
"""
import logging

# expose the main class
from .queryable import Queryable

# expose the factory functions
from .factories import (
    from_iterable,
    from_range,
    repeat,
    empty,
    query,
    Q
)

# expose the element contracts
from .capabilities import Comparable, Cloneable, compare

# expose the error taxonomy
from .exceptions import (
    QueryError,
    EmptySequenceError,
    CardinalityError,
    IndexOutOfRangeError,
    MissingCapabilityError,
    NullSourceError
)

# expose settings and supporting data classes
from .config import Settings, get_settings, configure, override
from .types import Grouping

# the library never configures handlers; applications do
logging.getLogger(__name__).addHandler(logging.NullHandler())

# define what `import *` does
__all__ = [
    "Queryable",
    "from_iterable",
    "from_range",
    "repeat",
    "empty",
    "query",
    "Q",
    "Comparable",
    "Cloneable",
    "compare",
    "QueryError",
    "EmptySequenceError",
    "CardinalityError",
    "IndexOutOfRangeError",
    "MissingCapabilityError",
    "NullSourceError",
    "Settings",
    "get_settings",
    "configure",
    "override",
    "Grouping"
]
