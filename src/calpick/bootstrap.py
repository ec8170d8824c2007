from __future__ import annotations
from calpick.core.engine import PickerRegistry
from calpick.engines.specs import ALL_SPECS

def build_registry() -> PickerRegistry:
    return PickerRegistry(dict(ALL_SPECS))
