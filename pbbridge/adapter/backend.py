"""Abstract pasteboard surface used by adapter commands.

A ``Pasteboard`` is a live handle on one OS pasteboard. Commands open one per
invocation through a ``PasteboardOpener`` and never keep it past that
invocation.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable


class Pasteboard(ABC):
    """One named pasteboard holding a single logical item in many types."""

    @abstractmethod
    def types(self) -> list[str]:
        """Type identifiers currently present, in pasteboard order."""
        ...

    @abstractmethod
    def string_for_type(self, type_identifier: str) -> str | None:
        """Return the payload for ``type_identifier`` as a string, if representable."""
        ...

    @abstractmethod
    def data_for_type(self, type_identifier: str) -> bytes | None:
        """Return the raw payload bytes for ``type_identifier``, if present."""
        ...

    @abstractmethod
    def clear_contents(self) -> None:
        """Remove every representation."""
        ...

    @abstractmethod
    def set_string(self, value: str, type_identifier: str) -> bool:
        ...

    @abstractmethod
    def set_data(self, data: bytes, type_identifier: str) -> bool:
        ...


# Maps a --pasteboard value (None for the default) to an open pasteboard
PasteboardOpener = Callable[[str | None], Pasteboard]
