from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Protocol

from .errors import UnknownPickerError
from .types import PickerSpec

class Picker(Protocol):
    def open(self) -> Any: ...
    def close(self) -> Any: ...
    def toggle(self) -> Any: ...
    def cancel(self) -> Any: ...
    def snapshot(self) -> Any: ...
    def display_text(self) -> str: ...

@dataclass
class PickerRegistry:
    _specs: Dict[str, PickerSpec]

    def get(self, name: str) -> PickerSpec:
        if name not in self._specs:
            raise UnknownPickerError(f"Unknown picker '{name}'. Available: {sorted(self._specs)}")
        return self._specs[name]

    def list(self) -> List[str]:
        return sorted(self._specs.keys())

    def register(self, name: str, spec: PickerSpec, *, overwrite: bool = False) -> None:
        if (not overwrite) and (name in self._specs):
            raise KeyError(f"Picker '{name}' already exists. Use overwrite=True to replace.")
        self._specs[name] = spec
