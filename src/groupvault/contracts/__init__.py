from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List

_BASE = Path(__file__).parent


def _load(name: str) -> List[Any]:
    return json.loads((_BASE / name).read_text())


ERC20_ABI = _load("erc20_abi.json")
FACTORY_ABI = _load("factory_abi.json")
VAULT_ABI = _load("vault_abi.json")
YEARN_VAULT_ABI = _load("yearn_vault_abi.json")

__all__ = ["ERC20_ABI", "FACTORY_ABI", "VAULT_ABI", "YEARN_VAULT_ABI"]
