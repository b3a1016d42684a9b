"""
Admin login IP allowlist.

An empty allowlist admits every address. Entries are exact addresses or
CIDR ranges (IPv4 or IPv6).
"""

import ipaddress
import logging
from typing import Iterable, List, Union

logger = logging.getLogger(__name__)

Network = Union[ipaddress.IPv4Network, ipaddress.IPv6Network]


class IpAllowlist:
    def __init__(self, patterns: Iterable[str] = ()):
        self.networks: List[Network] = []
        for pattern in patterns:
            pattern = pattern.strip()
            if not pattern:
                continue
            try:
                self.networks.append(ipaddress.ip_network(pattern, strict=False))
            except ValueError:
                logger.warning(f"Ignoring invalid ALLOWED_IPS entry: {pattern!r}")

    def is_allowed(self, ip: str) -> bool:
        if not self.networks:
            return True
        try:
            address = ipaddress.ip_address(ip)
        except ValueError:
            return False
        return any(address in network for network in self.networks)
