r"""
   ___  ___  __ _  __ _ _   _  ___ _ __ _   _
  / __|/ _ \/ _` |/ _` | | | |/ _ \ '__| | | |
  \__ \  __/ (_| | (_| | |_| |  __/ |  | |_| |
  |___/\___|\__, |\__, |\__,_|\___|_|   \__, |
               |_|   |_|                |___/
"""

import logging

# expose the main class
from .query import SequenceQuery

# expose the factory functions
from .factories import (
    from_iterable,
    from_range,
    repeat,
    empty,
    generate,
    query,
    Q,
)

# expose supporting types and errors
from .types import ABSENT, Group
from .errors import SequenceQueryError, EmptySequenceError, SerializationError

# silent unless the application configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

# define what `import *` does
__all__ = [
    "SequenceQuery",
    "from_iterable",
    "from_range",
    "repeat",
    "empty",
    "generate",
    "query",
    "Q",
    "ABSENT",
    "Group",
    "SequenceQueryError",
    "EmptySequenceError",
    "SerializationError",
]
