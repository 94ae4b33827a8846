"""engine-validator core package.

Check that the running environment satisfies the ``engines`` ranges declared
in a package.json, as a boolean, a Report, or an assertion.
"""

from .core import IncompatibleEnginesError, assert_engines, check, check_detailed
from .models import Report, SatisfactionEntry

__all__ = [
    "IncompatibleEnginesError",
    "Report",
    "SatisfactionEntry",
    "assert_engines",
    "check",
    "check_detailed",
]
