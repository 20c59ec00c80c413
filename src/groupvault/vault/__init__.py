from .service import AsyncVaultService, SyncVaultService
from .types import MemberInfo, PerformanceReport, VaultConfig, VaultSummary

__all__ = [
    "AsyncVaultService",
    "SyncVaultService",
    "MemberInfo",
    "PerformanceReport",
    "VaultConfig",
    "VaultSummary",
]
