"""
Public-scheme policies — convert configuration into a monthly GKV cost curve.
"""

from __future__ import annotations

from typing import Dict, Type

from .base import PublicSchemePolicy
from .flat import FlatGrowthPolicy, HalveAfterFirstAdultPolicy
from .pension import PensionBasedPolicy

POLICY_TYPES: Dict[str, Type[PublicSchemePolicy]] = {
    FlatGrowthPolicy.name: FlatGrowthPolicy,
    HalveAfterFirstAdultPolicy.name: HalveAfterFirstAdultPolicy,
    PensionBasedPolicy.name: PensionBasedPolicy,
}


def build_public_policy(kind: str, **params) -> PublicSchemePolicy:
    """Instantiate a policy by name. Unknown parameters are ignored."""
    try:
        cls = POLICY_TYPES[kind]
    except KeyError:
        raise ValueError(
            f"Unknown public scheme policy: {kind!r}. Expected one of {sorted(POLICY_TYPES)}."
        ) from None
    fields = cls.__dataclass_fields__
    return cls(**{k: v for k, v in params.items() if k in fields})


__all__ = [
    "PublicSchemePolicy",
    "FlatGrowthPolicy",
    "HalveAfterFirstAdultPolicy",
    "PensionBasedPolicy",
    "POLICY_TYPES",
    "build_public_policy",
]
