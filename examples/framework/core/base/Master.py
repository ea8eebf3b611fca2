"""Root of the Acme core class hierarchy."""

__namespace__ = "Acme/Core/Base"


class Master:
    """Every core class derives from Master."""

    def __repr__(self) -> str:
        return f"<{type(self).__name__}>"
