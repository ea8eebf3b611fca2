"""
Loaded Unit Types

Pure data describing a source unit after it has been executed.
"""

from dataclasses import dataclass, field
from pathlib import Path
from types import ModuleType
from typing import List


@dataclass
class LoadedUnit:
    """
    Information about a loaded source unit.

    - path: Resolved file path
    - module: Module object the unit executed in
    - namespace: Namespace its classes were defined under
    - symbols: Fully-qualified names the unit defined, in definition order
    """
    path: Path
    module: ModuleType
    namespace: str
    symbols: List[str] = field(default_factory=list)

    def __str__(self) -> str:
        """Human-readable representation"""
        return f"Unit({self.path.name}, {len(self.symbols)} symbols)"

    def __repr__(self) -> str:
        """Developer representation"""
        return (f"LoadedUnit(path={self.path}, namespace={self.namespace!r}, "
                f"symbols={self.symbols!r})")
