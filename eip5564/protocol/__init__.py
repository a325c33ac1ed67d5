"""
ERC-5564 Protocol Operations
"""

from eip5564.protocol.meta_address import (
    parse_meta_address,
    encode_meta_address,
)
from eip5564.protocol.generator import (
    generate_private_key,
    generate_stealth_address,
)
from eip5564.protocol.scanner import (
    check_stealth_address,
    scan_announcements,
)
from eip5564.protocol.recovery import compute_stealth_key
from eip5564.protocol.keys import StealthKeys

__all__ = [
    # Meta-address codec
    "parse_meta_address",
    "encode_meta_address",
    # Sender
    "generate_private_key",
    "generate_stealth_address",
    # Recipient
    "check_stealth_address",
    "scan_announcements",
    "compute_stealth_key",
    "StealthKeys",
]
