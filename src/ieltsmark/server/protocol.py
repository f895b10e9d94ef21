"""JSON-lines protocol messages for the grading server."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Optional

_MISSING = object()


@dataclass
class Request:
    """Incoming request from a client (test UI, scoring pipeline)."""
    id: int
    method: str
    params: dict = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict) -> Request:
        return cls(
            id=data.get("id", 0),
            method=data["method"],
            params=data.get("params") or {},
        )

    def param(self, name: str, default: Any = _MISSING) -> Any:
        """Fetch a parameter, raising ValueError if a required one is absent."""
        if name in self.params:
            return self.params[name]
        if default is _MISSING:
            raise ValueError(f"Missing parameter: {name}")
        return default


@dataclass
class Response:
    """Outgoing response to the client."""
    id: int
    result: Optional[dict] = None
    error: Optional[str] = None

    def to_json_line(self) -> str:
        d = {"id": self.id}
        if self.error is not None:
            d["error"] = self.error
        else:
            d["result"] = self.result
        return json.dumps(d, ensure_ascii=False) + "\n"


@dataclass
class Notification:
    """Server-initiated message (no id, no response expected)."""
    method: str
    params: dict = field(default_factory=dict)

    def to_json_line(self) -> str:
        return json.dumps({"method": self.method, "params": self.params}, ensure_ascii=False) + "\n"
