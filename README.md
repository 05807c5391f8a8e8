# tensor-eigen

A pure-Python library of building blocks for working with Solana program
accounts. It has no third-party dependencies.

## Installation

```
pip install .
```

## What it offers

### Addresses — `tensor_eigen.pubkey`

- `b58encode(data)` and `b58decode(text)` convert bytes to base58 text and
  back. `b58decode` raises `PubkeyError` on a character outside the alphabet.
- `Pubkey` is a frozen 32-byte address. `Pubkey.from_string(text)` parses base58,
  and `str()` and `bytes()` give the text and raw forms.
- `is_on_curve(data)` tells whether 32 bytes decode to an ed25519 point.
- `create_program_address(seeds, program_id)` derives a program address and
  raises `PubkeyError` if the result lies on the curve.
  `find_program_address(seeds, program_id)` tries bumps from 255 down. It
  returns `(address, bump)`.

```python
from tensor_eigen.pubkey import Pubkey, find_program_address

program = Pubkey.from_string("TFEEgwDP6nn1s8mMX2tTNPPz8j2VomkphLUmyxKm17A")
address, bump = find_program_address([b"fee_shard", bytes([0])], program)
```

### Anchor discriminators — `tensor_eigen.discriminators`

- `DiscriminatorKind.parse(text)` accepts `account`/`acc`/`a` and
  `instruction`/`ix`/`i`, in any case.
- `anchor_discriminator(kind, name)` returns the first eight bytes of
  `sha256("account:<name>")` or `sha256("global:<name>")`.
- `format_discriminator(kind, name)` renders those bytes as a decimal list and
  as `0x` hex.
- `check_discriminator(data, name)` raises `DiscriminatorError` when the data
  is shorter than eight bytes or does not start with the account discriminator.

### Anchor error codes — `tensor_eigen.anchor_errors`

- `parse_error_code(text)` reads an unsigned 32-bit code, in decimal or in hex
  after a `0x` prefix. It raises `ValueError` otherwise.
- `describe_error(code)` names the matching `AnchorErrorCode`, or reports the
  code as unknown.

```python
from tensor_eigen.anchor_errors import describe_error, parse_error_code

print(describe_error(parse_error_code("0x7d6")))   # ConstraintSeeds, code 2006
```

### Raydium pool layouts — `tensor_eigen.raydium`

- `AmmInfo.from_bytes`, `ClmmPoolState.from_bytes` and `CpPoolState.from_bytes`
  decode raw account data into frozen dataclasses. The CLMM and CP-swap decoders
  first check the `PoolState` account discriminator.
- `ClmmPoolState.key()` derives the pool's own address.
  `RewardInfo.initialized()` and `reward_growths(...)` read reward state.
- `CpPoolState.get_status_by_bit(PoolStatusBitIndex...)`,
  `vault_amount_without_fee(vault_0, vault_1)` and
  `token_price_x32(vault_0, vault_1)` cover the pool status and price helpers.

### Text rendering — `tensor_eigen.formatting`

- `format_amm_info`, `format_state_data`, `format_clmm_pool`,
  `format_reward_info` and `format_cp_pool` render decoded pools as labelled
  text.
- Smaller helpers: `pad_label`, `option_formatter` and `format_timestamp`. The
  last gives RFC 3339 in UTC.

### Fee shards — `tensor_eigen.shards`

- `FEE_SHARDS` lists the 256 known shard addresses. `is_fee_shard(address)`
  checks membership.
- `fee_shard_address(index)` derives the address for an index from 0 to 255.
  `generate_fee_shards(path)` derives all of them and writes them as a JSON
  list. By default it writes `fee_shards.json`.
- `get_shard_balances(client)` returns a `ShardBalance` for each shard.
  `format_shard_balances(balances)` renders one line per shard and a summary.
  You supply the client: any object with
  `get_minimum_balance_for_rent_exemption(size)` and `get_balance(address)`.

### Self-update — `tensor_eigen.eigen`

`update_eigen()` downloads the release binary for the current platform. It
downloads with `curl` into `~/.cargo/bin/eigen` and marks the file executable
with `chmod`. It supports macOS on arm64 or x86_64, and Linux on x86_64.

Set the base download location with the `EIGEN_RELEASE_URL` environment
variable. The built-in default is a placeholder. On any failure the function
raises `EigenUpdateError`.

## What it does not do

- There is no command-line program; everything is used from Python.
- The package has no RPC client. It does not read the Solana CLI configuration
  or keypair files, and it does not connect to a cluster. Account bytes and
  balances must be fetched by other means and passed in.
- It cannot fund shards, build or send transactions, or create and edit pools
  or whitelists.

## Development

```
pip install -e ".[test]"
pytest
```