"""Guild prune requests."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from chordlet.jsonfields import bool_not_null, int32_not_null
from chordlet.stringops import from_string


def _dump(obj: Any) -> str:
    return json.dumps(obj, separators=(",", ":"), sort_keys=True, ensure_ascii=False)


@dataclass
class Prune:
    """Parameters for pruning inactive guild members."""

    days: int = 0
    include_roles: list[int] = field(default_factory=list)
    compute_prune_count: bool = False

    def fill_from_json(self, data: Mapping[str, Any]) -> Prune:
        """Fill from a decoded JSON object and return self; roles are appended."""
        self.days = int32_not_null(data, "days")
        self.compute_prune_count = bool_not_null(data, "compute_prune_count")
        self.include_roles.extend(
            from_string(role, 10) for role in data.get("include_roles") or ()
        )
        return self

    def build_json(self, with_prune_count: bool = False) -> str:
        """Return this request as compact JSON with sorted keys."""
        body: dict[str, Any] = {"days": self.days}
        if self.include_roles:
            body["include_roles"] = [str(role) for role in self.include_roles]
        if with_prune_count:
            body["compute_prune_count"] = self.compute_prune_count
        return _dump(body)