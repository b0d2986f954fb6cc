from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class Project:
    """Entry of the recent-projects registry; `path` is the board directory."""

    id: str
    name: str
    path: str
    last_access: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name, "path": self.path, "last_access": self.last_access}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Project":
        return cls(
            id=str(data["id"]),
            name=str(data.get("name") or data["id"]),
            path=str(data.get("path") or ""),
            last_access=float(data.get("last_access") or 0.0),
        )
