"""
Host name resolution for hot serving.
"""

import socket


def resolve_local_ipv4() -> str:
    """
    Resolve the IPv4 address other devices on the local network can reach.

    Connecting a UDP socket sends no packets; it only selects the outgoing
    interface, whose address is then read back.

    Raises:
        OSError: If no network interface is available
    """
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
        sock.connect(("10.255.255.255", 1))
        return sock.getsockname()[0]
