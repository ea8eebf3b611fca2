"""Array helpers, loaded on demand."""

from autoload.loader import Autoloadable

Base = __symbols__.lookup("Acme/Core/Base/Base")


class Arr(Base, Autoloadable):
    """List helpers with a one-time setup hook."""

    booted = False

    @classmethod
    def on_autoload(cls) -> None:
        cls.booted = True

    @staticmethod
    def first(items):
        return items[0] if items else None
