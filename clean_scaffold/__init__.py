"""clean-scaffold: generates clean-architecture feature skeletons for Flutter apps.

Quick usage::

    from clean_scaffold import Scaffolder

    result = Scaffolder().generate("lib/features", "user_profile")
    print(result.created_files)
"""

from clean_scaffold.config import Config
from clean_scaffold.scaffolder import ScaffoldError, ScaffoldResult, Scaffolder

__all__ = [
    "Config",
    "ScaffoldError",
    "ScaffoldResult",
    "Scaffolder",
]
