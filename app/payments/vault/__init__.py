"""
Vault (stored payment method) support.
"""

from payments.vault.builder import (
    CC_VAULT_CODE,
    TOKEN_TYPE,
    RecurringVaultDataBuilder,
)

__all__ = [
    "CC_VAULT_CODE",
    "TOKEN_TYPE",
    "RecurringVaultDataBuilder",
]
