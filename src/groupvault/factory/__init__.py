from .service import AsyncVaultFactoryService, SyncVaultFactoryService

__all__ = ["AsyncVaultFactoryService", "SyncVaultFactoryService"]
