"""Version information for neo-acl."""

__version__ = "0.1.0"
