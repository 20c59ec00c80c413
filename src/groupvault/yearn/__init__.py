from .service import YEARN_DECIMALS, AsyncYearnVaultService, SyncYearnVaultService

__all__ = ["YEARN_DECIMALS", "AsyncYearnVaultService", "SyncYearnVaultService"]
