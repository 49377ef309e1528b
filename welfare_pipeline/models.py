from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple


DETAILS_ERROR = {"error": "Failed to load details"}
CRITERIA_ERROR = {"error": "Failed to load criteria"}


@dataclass(frozen=True, slots=True)
class Scheme:
    name: str
    url: str
    id: str = ""
    details: Dict[str, str] = field(default_factory=dict)
    criteria: Dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "url": self.url,
            "details": dict(self.details),
            "criteria": dict(self.criteria),
        }


@dataclass(frozen=True, slots=True)
class Section:
    title: str
    schemes: Tuple[Scheme, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "schemes": [scheme.to_dict() for scheme in self.schemes],
        }


@dataclass(frozen=True, slots=True)
class DetailResult:
    details: Dict[str, str] = field(default_factory=dict)
    criteria: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def failed(cls) -> "DetailResult":
        return cls(details=dict(DETAILS_ERROR), criteria=dict(CRITERIA_ERROR))
