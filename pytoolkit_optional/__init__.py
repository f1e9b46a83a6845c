from .exceptions import NoSuchElementError, NullPointerError, OptionalError
from .metadata import VERSION as __version__
from .optional import Optional

__all__ = [
    "Optional",
    "OptionalError",
    "NullPointerError",
    "NoSuchElementError",
    "__version__",
]
