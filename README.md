# ledgerkit

Building blocks for experimenting with a small blockchain in Python. It is a library only and has no command-line tool.

## What is inside

- `ledgerkit.sha256` provides a self-contained SHA-256 through `sha256` (32-byte digest) and `sha256_hex`.
- `ledgerkit.merkle` provides `MerkleTree`, which has a `root` property, `get_proof(index)` and `verify_proof(leaf, proof)`.
- `ledgerkit.chain` provides `Block` and `Blockchain`.
  - A `Blockchain` starts with a genesis block.
  - It has a `latest_block` property, `add_block(block)` and `is_valid()`, and supports `len()`.
- `ledgerkit.pow` provides `PowConsensus(difficulty)` with `block_hash`, `mine_block`, `validate_block` and `adjust_difficulty`.
- `ledgerkit.serialize` converts blocks to bytes and back with `to_bytes` and `from_bytes`, and to hex and back with `to_hex` and `from_hex`.
  - It also provides `is_valid_bytes`.
  - Malformed input raises `SerializationError`.
- `ledgerkit.genesis` provides `GenesisConfig` and `GenesisBuilder`, which has `build_genesis_block()` and `export_config()` (JSON).
- `ledgerkit.errors` provides `ChainErrorType`, the `ChainError` exception and `ErrorLog`, which records the errors it creates.
- `ledgerkit.txpool` provides `Transaction` and `TxPool`.
  - `TxPool` is a bounded pool with `add`, `remove`, `top(count)` (highest fee first) and `clear`.
- `ledgerkit.batch` provides `BatchProcessor`, which selects transactions for a block within a fee budget.
- `ledgerkit.mempool` provides `MempoolCleaner`, which evicts expired transactions and surplus ones.
- `ledgerkit.lightclient` provides `BlockHeader` and `LightClient`, which verify a chain of headers and transaction proofs.
- `ledgerkit.state` provides `AccountState` and `WorldState`, which has a `state_root` hash over all accounts.
- `ledgerkit.sync` provides `SyncState` and `ChainSyncProtocol`, which track the block ranges being synchronised.
- `ledgerkit.prune` provides `ChainPruner`.
  - It drops the oldest blocks of a chain beyond a kept count.
  - It writes the dropped blocks as JSON to `archive_<unix-time>.bin` in an archive directory.
- `ledgerkit.monitor` provides `ChainMonitor`, which reports block count, TPS, peers and uptime.
- `ledgerkit.metrics` provides `ChainMetrics` and `MetricsCollector`, which keep the last 100 snapshots.
- `ledgerkit.utxo` provides `Utxo` and `UtxoManager`, which track balances and double spends.
- `ledgerkit.validators` provides `ValidatorManager`, with round-robin proposer election and offlining after missed blocks.
- `ledgerkit.pos` provides `PosConsensus`, with stake registration, stake-weighted proposer choice and slashing.
- `ledgerkit.governance` provides `Governance`, with proposals, stake-weighted votes and execution after the voting period.
- `ledgerkit.contract` is a toy contract compiler.
  - It defines `ValueType`, `Opcode`, `Instruction`, `FunctionDef`, `ContractAST` and `ContractCompiler`.
  - The compiler recognises a `function transfer` and emits JSON bytecode.
- `ledgerkit.gas` provides `GasCalculator` for transaction and contract gas, limits and refunds.
- `ledgerkit.ed25519` provides `Ed25519Crypto`, using PKCS#8 DER key pairs and raw public keys.
- `ledgerkit.ecdsa` provides `EcdsaHandler` for P-256/SHA-256 signatures and address derivation.
- `ledgerkit.aes` provides `AesCrypto` and `generate_key` for AES-256-GCM.
  - The nonce is prepended to the ciphertext.
  - `decrypt` returns `None` on failure.
- `ledgerkit.txsign` provides `TxType`, `SignedTransaction` and `TxSigner`, which sign transactions with Ed25519.
- `ledgerkit.peerauth` provides `PeerAuth`, which admits peers by trusted key and a signed random challenge.
- `ledgerkit.secrets_share` provides `ShamirSecretSharing`.
  - It splits a secret into numbered shares. The first `threshold` shares hold the secret itself and the rest hold random bytes.
  - `reconstruct_secret` returns the first share's data once enough shares are given. It does not use polynomial secret sharing.
- `ledgerkit.p2p` provides `P2PMessage`, `MessageKind`, `encode_message` and `decode_message`.
  - Messages are encoded as JSON.
  - `P2PNetwork` is a UDP node with `add_peer`, `broadcast`, `listen` and `close`, and it works as a context manager.
- `ledgerkit.bootstrap` provides `ChainBootstrap`.
  - It creates a chain.
  - It binds a `P2PNetwork` whose peers are the boot nodes, which default to `127.0.0.1:8080` and `127.0.0.1:8081`.
- `ledgerkit.rpc` provides `RpcRequest`, `RpcResponse` and `RpcServer`.
  - `RpcServer` dispatches requests to handlers in-process.
  - The built-in handlers are `get_block`, `get_balance` and `send_tx`.
- `ledgerkit.bridge` provides `CrossChainTx` and `CrossChainBridge`, a queue of locked cross-chain transfers.
- `ledgerkit.storage` provides `BlockchainDB`, a byte key-value store kept in SQLite inside a directory.
  - Iteration is in key order.
  - `close()` deletes the database files.

## Installation

```
pip install .
```

## Quick start

```python
from ledgerkit.chain import Block, Blockchain
from ledgerkit.pow import PowConsensus

chain = Blockchain()
latest = chain.latest_block
pow_ = PowConsensus(2)

block = pow_.mine_block(
    Block(index=latest.index + 1, timestamp=0, prev_hash=latest.hash, hash="", data="hello")
)
assert pow_.validate_block(block)
assert chain.add_block(block)
assert chain.is_valid()
print(len(chain))  # 2
```

Merkle proofs:

```python
from ledgerkit.merkle import MerkleTree

tree = MerkleTree(["tx1", "tx2", "tx3"])
print(tree.root)
proof = tree.get_proof(0)
```

## What it does not do

- There is no node program or command-line tool.
- `RpcServer` stores a port number but does not listen on the network. Requests are handled by calling `handle_request` directly.
- Contracts can be compiled to bytecode and priced for gas, but there is no virtual machine to run them.
- There is no wallet or mnemonic handling. Keys come from `Ed25519Crypto` and `EcdsaHandler`.

## Running the tests

```
pip install .[test]
pytest
```