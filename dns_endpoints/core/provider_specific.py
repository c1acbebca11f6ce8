"""
Provider specific properties

Key/value metadata attached to an endpoint while it moves through a single
synchronization. Names are unique within an endpoint's property list.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, Tuple


@dataclass
class ProviderSpecificProperty:
    """Name and value of a setting specific to an individual DNS provider."""

    name: str
    value: str

    def to_dict(self) -> Dict[str, str]:
        data = {}
        if self.name:
            data["name"] = self.name
        if self.value:
            data["value"] = self.value
        return data

    @classmethod
    def from_dict(cls, data: Dict) -> "ProviderSpecificProperty":
        return cls(name=data.get("name", ""), value=data.get("value", ""))


class ProviderSpecific(list):
    """Ordered list of ProviderSpecificProperty with unique names."""

    def __init__(self, properties: Iterable[ProviderSpecificProperty] = ()):
        super().__init__(properties)

    def get(self, name: str) -> Tuple[str, bool]:
        """Return ``(value, True)`` for the first property called ``name``, else ``("", False)``."""
        for prop in self:
            if prop.name == name:
                return prop.value, True
        return "", False

    def set(self, name: str, value: str) -> None:
        """Replace the value of an existing property in place, or append a new one."""
        for i, prop in enumerate(self):
            if prop.name == name:
                self[i] = ProviderSpecificProperty(name=name, value=value)
                return

        self.append(ProviderSpecificProperty(name=name, value=value))

    def delete(self, name: str) -> None:
        """Remove the property called ``name``; does nothing if it is absent."""
        for i, prop in enumerate(self):
            if prop.name == name:
                del self[i]
                return

    def __str__(self) -> str:
        return "[" + " ".join(f"{{{p.name} {p.value}}}" for p in self) + "]"
