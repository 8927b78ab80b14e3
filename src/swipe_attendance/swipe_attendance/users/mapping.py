from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from ..core.exceptions import ConfigurationError
from ..shifts.rules import read_yaml_file

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OutputIdentity:
    name: str
    employee_id: str


@dataclass(frozen=True)
class UserMapping:
    """Operator name on the badge reader -> name/id written to the output."""

    operators: dict[str, OutputIdentity] = field(default_factory=dict)

    @classmethod
    def from_config(cls, users: Optional[Mapping[str, Any]]) -> "UserMapping":
        operators = (users or {}).get("operators") or {}
        mapped: dict[str, OutputIdentity] = {}
        for operator, entry in operators.items():
            entry = entry or {}
            mapped[str(operator)] = OutputIdentity(
                name=str(entry.get("output_name", operator)),
                employee_id=str(entry.get("output_id", operator)),
            )
        return cls(operators=mapped)

    def map(self, operator: str, default_id: Optional[str] = None) -> OutputIdentity:
        """Unknown operators keep their own name, and ``default_id`` (or the name) as id."""
        return self.operators.get(operator) or OutputIdentity(name=operator, employee_id=default_id or operator)

    def allowed_users(self, rules: Optional[Mapping[str, Any]] = None) -> set[str]:
        allowed = set(self.operators)
        valid = ((rules or {}).get("operators") or {}).get("valid_users") or []
        allowed.update(str(u) for u in valid)
        return allowed


def load_users_file(path: Union[str, Path]) -> UserMapping:
    data = read_yaml_file(path, fallback={"operators": {}})
    if not isinstance(data, dict) or "operators" not in data:
        raise ConfigurationError(f'{Path(path).name} must contain an "operators" section')
    mapping = UserMapping.from_config(data)
    logger.debug("Loaded %d operator mappings from %s", len(mapping.operators), path)
    return mapping
