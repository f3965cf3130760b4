__path__ = __import__("pkgutil").extend_path(__path__, __name__)  # NOQA: F-821
__title__ = 'helpwright'
__author__ = 'Eiko Reishin (影皇嶺臣)'
__license__ = 'MIT'
# Placeholder, modified by dynamic-versioning.
__version__ = "0.0.0"

from .escaping import *
from .faults import *
from .formatters import *
from .formatting import *
from .options import *
from .tables import *
from .writers import *

VersionInfo = __import__("collections").namedtuple("VersionInfo", (
    "major",
    "minor",
    "micro",
    "releaselevel",
    "serial",
    "metadata"
))

# Placeholder, modified by dynamic-versioning.
version_info = VersionInfo(0, 0, 0, "final", 0, "")

__all__ = (
    "__path__",
    "__title__",
    "__author__",
    "__license__",
    "__version__",
    "version_info"
)

# Load the exposed API of the option model
__all__ += options.__all__  # type: ignore[attr-defined]
# Load the exposed API of the per-option formatting
__all__ += formatting.__all__  # type: ignore[attr-defined]
# Load the exposed API of the tables
__all__ += tables.__all__  # type: ignore[attr-defined]
# Load the exposed API of the escaping
__all__ += escaping.__all__  # type: ignore[attr-defined]
# Load the exposed API of the writers
__all__ += writers.__all__  # type: ignore[attr-defined]
# Load the exposed API of the help formatters
__all__ += formatters.__all__  # type: ignore[attr-defined]
# Load the exposed API of the faults
__all__ += faults.__all__  # type: ignore[attr-defined]
