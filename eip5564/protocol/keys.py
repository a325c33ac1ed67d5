"""
ERC-5564 Recipient Keys

Two key pairs:
- Spending keys (k, K): control funds at discovered stealth addresses
- Viewing keys (v, V): scan for incoming payments, no spending authority

Meta-address = (K, V)
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from eip5564.constants import SCHEME_ID_SECP256K1
from eip5564.core.types import PrivateKey, PublicKey, StealthMetaAddress
from eip5564.crypto.curve import get_curve
from eip5564.crypto.entropy import RandomSource, default_random_source
from eip5564.protocol.derivation import public_key_of
from eip5564.protocol.generator import generate_private_key


@dataclass(frozen=True)
class StealthKeys:
    """Recipient key bundle. Holds secrets in memory only."""
    spending_private_key: PrivateKey
    viewing_private_key: PrivateKey
    spending_public_key: PublicKey
    viewing_public_key: PublicKey

    def __repr__(self) -> str:
        return (
            f"StealthKeys(spending={self.spending_public_key!r}, "
            f"viewing={self.viewing_public_key!r})"
        )

    @classmethod
    def from_private_keys(
        cls,
        spending_private_key: PrivateKey,
        viewing_private_key: PrivateKey,
        scheme_id: int = SCHEME_ID_SECP256K1,
    ) -> StealthKeys:
        curve = get_curve(scheme_id)
        spending = PrivateKey.coerce(spending_private_key)
        viewing = PrivateKey.coerce(viewing_private_key)
        return cls(
            spending_private_key=spending,
            viewing_private_key=viewing,
            spending_public_key=public_key_of(curve, spending),
            viewing_public_key=public_key_of(curve, viewing),
        )

    @classmethod
    def generate(
        cls,
        random_source: Optional[RandomSource] = None,
        scheme_id: int = SCHEME_ID_SECP256K1,
    ) -> StealthKeys:
        """Generate new spending and viewing key pairs."""
        curve = get_curve(scheme_id)
        source = random_source or default_random_source()
        return cls.from_private_keys(
            generate_private_key(source, curve),
            generate_private_key(source, curve),
            scheme_id,
        )

    def meta_address(self) -> StealthMetaAddress:
        return StealthMetaAddress(
            spending_public_key=self.spending_public_key,
            viewing_public_key=self.viewing_public_key,
        )
