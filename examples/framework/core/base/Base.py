"""Instantiable base class; needs Master preloaded first."""

Master = __symbols__.lookup("Acme/Core/Base/Master")


class Base(Master):
    """Base for concrete core classes."""
