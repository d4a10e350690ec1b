from .base import LedgerSDK
from .stellar import StellarLedger

__all__ = ["LedgerSDK", "StellarLedger"]
