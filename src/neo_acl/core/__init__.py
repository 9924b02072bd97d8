"""Core building blocks shared by every neo-acl feature."""

from .exceptions import *  # noqa: F401,F403
from .exceptions import __all__  # noqa: F401
