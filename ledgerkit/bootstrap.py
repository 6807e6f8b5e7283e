"""Start-up of a chain and its peer network from boot nodes."""

from __future__ import annotations

from ledgerkit.chain import Blockchain
from ledgerkit.p2p import Address, P2PNetwork

DEFAULT_BOOT_NODES: tuple[Address, ...] = (("127.0.0.1", 8080), ("127.0.0.1", 8081))


class ChainBootstrap:
    """Creates the chain and connects the local node to the boot nodes."""

    def __init__(self, chain_id: int) -> None:
        self.chain_id = chain_id
        self.genesis_data = f"ledgerkit-genesis-{chain_id}"
        self.boot_nodes: list[Address] = list(DEFAULT_BOOT_NODES)

    def initialize_chain(self) -> Blockchain:
        """A new chain holding only its genesis block."""
        return Blockchain()

    def initialize_network(self, local_addr: Address) -> P2PNetwork:
        """Bind the local node and add every boot node other than itself as a peer."""
        local = (local_addr[0], local_addr[1])
        network = P2PNetwork(local)
        for peer in self.boot_nodes:
            if peer != local:
                network.add_peer(peer)
        return network

    def add_boot_node(self, addr: Address) -> None:
        """Add another boot node."""
        self.boot_nodes.append((addr[0], addr[1]))