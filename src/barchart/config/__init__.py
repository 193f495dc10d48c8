"""Configuration package (module level constants, see ``settings``)."""

from . import settings  # noqa: F401
