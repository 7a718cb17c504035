"""JSON rule-set loading.

Rule sets live beside the package in ``rules/<name>.json`` and are read
once per process.
"""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any

PACKAGE_ROOT = Path(__file__).resolve().parent
RULES_DIR = PACKAGE_ROOT / "rules"


@lru_cache(maxsize=32)
def load_rule_set(name: str) -> dict[str, Any]:
    path = RULES_DIR / f"{name}.json"
    if not path.exists():
        raise FileNotFoundError(f"Rule set not found: {path}")
    with path.open("r", encoding="utf-8") as handle:
        return json.load(handle)


def rule_entry(name: str, section: str, key: str) -> Any:
    """Return ``rules[section][key]`` from rule set *name*.

    Raises ``ValueError`` when the section or key is missing so a bad
    rule file fails loudly instead of scoring with a silent default.
    """
    table = load_rule_set(name).get(section)
    if not isinstance(table, dict):
        raise ValueError(f"Rule set '{name}' has no section: {section}")
    if key not in table:
        raise ValueError(f"No {section} entry configured for: {key}")
    return table[key]
