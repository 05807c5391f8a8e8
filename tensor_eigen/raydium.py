"""Account layouts of the Raydium AMM v4, CLMM and CP-swap programs."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Callable, Iterable, TypeVar

from tensor_eigen.discriminators import check_discriminator
from tensor_eigen.pubkey import (
    PUBKEY_LENGTH,
    SYSTEM_PROGRAM_ID,
    Pubkey,
    create_program_address,
)

RAYDIUM_AMM_PROGRAM_ID = Pubkey.from_string("675kPX9MHTjS2zt1qfr1NYHuzeLXfQM9H24wFSUt1Mp8")
RAYDIUM_CLMM_PROGRAM_ID = Pubkey.from_string("CAMMCzo5YL8w4VFF8KVHrK22GGUsp5VTaW7grrKgrWqK")
RAYDIUM_CPSWAP_PROGRAM_ID = Pubkey.from_string("CPMMoo8L3F4NbTegBCKVNunggL7H1ZpdTHKxQB5qKP1C")

REWARD_NUM = 3
CLMM_POOL_SEED = "pool"

POOL_SEED = "pool"
POOL_LP_MINT_SEED = "pool_lp_mint"
POOL_VAULT_SEED = "pool_vault"

Q32 = 1 << 32

_POOL_STATE_NAME = "PoolState"
_T = TypeVar("_T")


class _Reader:
    """Sequential little-endian reader over account bytes."""

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self._pos = 0

    def take(self, size: int) -> bytes:
        end = self._pos + size
        if end > len(self._data):
            raise ValueError("Unexpected end of account data")
        chunk = self._data[self._pos:end]
        self._pos = end
        return chunk

    def _unpack(self, fmt: str) -> int:
        return struct.unpack(fmt, self.take(struct.calcsize(fmt)))[0]

    def u8(self) -> int:
        return self._unpack("<B")

    def u16(self) -> int:
        return self._unpack("<H")

    def i32(self) -> int:
        return self._unpack("<i")

    def u64(self) -> int:
        return self._unpack("<Q")

    def u128(self) -> int:
        return int.from_bytes(self.take(16), "little")

    def pubkey(self) -> Pubkey:
        return Pubkey(self.take(PUBKEY_LENGTH))

    def array(self, count: int, read: Callable[[], _T]) -> tuple[_T, ...]:
        return tuple(read() for _ in range(count))


# ---- AMM v4 ----


@dataclass(frozen=True)
class Fees:
    """Fee parameters of an AMM v4 pool."""

    min_separate_numerator: int = 0
    min_separate_denominator: int = 0
    trade_fee_numerator: int = 0
    trade_fee_denominator: int = 0
    pnl_numerator: int = 0
    pnl_denominator: int = 0
    swap_fee_numerator: int = 0
    swap_fee_denominator: int = 0

    @classmethod
    def _read(cls, reader: _Reader) -> "Fees":
        return cls(*reader.array(8, reader.u64))


@dataclass(frozen=True)
class StateData:
    """Statistical data of an AMM v4 pool."""

    need_take_pnl_coin: int = 0
    need_take_pnl_pc: int = 0
    total_pnl_pc: int = 0
    total_pnl_coin: int = 0
    pool_open_time: int = 0
    padding: tuple[int, ...] = (0,) * 2
    orderbook_to_init_time: int = 0
    swap_coin_in_amount: int = 0
    swap_pc_out_amount: int = 0
    swap_acc_pc_fee: int = 0
    swap_pc_in_amount: int = 0
    swap_coin_out_amount: int = 0
    swap_acc_coin_fee: int = 0

    @classmethod
    def _read(cls, reader: _Reader) -> "StateData":
        return cls(
            need_take_pnl_coin=reader.u64(),
            need_take_pnl_pc=reader.u64(),
            total_pnl_pc=reader.u64(),
            total_pnl_coin=reader.u64(),
            pool_open_time=reader.u64(),
            padding=reader.array(2, reader.u64),
            orderbook_to_init_time=reader.u64(),
            swap_coin_in_amount=reader.u128(),
            swap_pc_out_amount=reader.u128(),
            swap_acc_pc_fee=reader.u64(),
            swap_pc_in_amount=reader.u128(),
            swap_coin_out_amount=reader.u128(),
            swap_acc_coin_fee=reader.u64(),
        )


@dataclass(frozen=True)
class AmmInfo:
    """An AMM v4 pool account."""

    LEN = 752

    status: int = 0
    nonce: int = 0
    order_num: int = 0
    depth: int = 0
    coin_decimals: int = 0
    pc_decimals: int = 0
    state: int = 0
    reset_flag: int = 0
    min_size: int = 0
    vol_max_cut_ratio: int = 0
    amount_wave: int = 0
    coin_lot_size: int = 0
    pc_lot_size: int = 0
    min_price_multiplier: int = 0
    max_price_multiplier: int = 0
    sys_decimal_value: int = 0
    fees: Fees = Fees()
    state_data: StateData = StateData()
    coin_vault: Pubkey = SYSTEM_PROGRAM_ID
    pc_vault: Pubkey = SYSTEM_PROGRAM_ID
    coin_vault_mint: Pubkey = SYSTEM_PROGRAM_ID
    pc_vault_mint: Pubkey = SYSTEM_PROGRAM_ID
    lp_mint: Pubkey = SYSTEM_PROGRAM_ID
    open_orders: Pubkey = SYSTEM_PROGRAM_ID
    market: Pubkey = SYSTEM_PROGRAM_ID
    market_program: Pubkey = SYSTEM_PROGRAM_ID
    target_orders: Pubkey = SYSTEM_PROGRAM_ID
    padding1: tuple[int, ...] = (0,) * 8
    amm_owner: Pubkey = SYSTEM_PROGRAM_ID
    lp_amount: int = 0
    client_order_id: int = 0
    recent_epoch: int = 0
    padding2: int = 0

    @classmethod
    def from_bytes(cls, data: bytes) -> "AmmInfo":
        """Decode an AMM v4 account from its raw data."""
        reader = _Reader(data)
        head = reader.array(16, reader.u64)
        fees = Fees._read(reader)
        state_data = StateData._read(reader)
        keys = reader.array(9, reader.pubkey)
        padding1 = reader.array(8, reader.u64)
        amm_owner = reader.pubkey()
        tail = reader.array(4, reader.u64)
        return cls(
            *head,
            fees,
            state_data,
            *keys,
            padding1,
            amm_owner,
            *tail,
        )


# ---- CLMM ----


@dataclass(frozen=True)
class RewardInfo:
    """Reward emission state of a CLMM pool."""

    LEN = 169

    reward_state: int = 0
    open_time: int = 0
    end_time: int = 0
    last_update_time: int = 0
    emissions_per_second_x64: int = 0
    reward_total_emissioned: int = 0
    reward_claimed: int = 0
    token_mint: Pubkey = SYSTEM_PROGRAM_ID
    token_vault: Pubkey = SYSTEM_PROGRAM_ID
    authority: Pubkey = SYSTEM_PROGRAM_ID
    reward_growth_global_x64: int = 0

    @classmethod
    def _read(cls, reader: _Reader) -> "RewardInfo":
        return cls(
            reward_state=reader.u8(),
            open_time=reader.u64(),
            end_time=reader.u64(),
            last_update_time=reader.u64(),
            emissions_per_second_x64=reader.u128(),
            reward_total_emissioned=reader.u64(),
            reward_claimed=reader.u64(),
            token_mint=reader.pubkey(),
            token_vault=reader.pubkey(),
            authority=reader.pubkey(),
            reward_growth_global_x64=reader.u128(),
        )

    def initialized(self) -> bool:
        """True once a reward mint has been set."""
        return self.token_mint != SYSTEM_PROGRAM_ID


def reward_growths(reward_infos: Iterable[RewardInfo]) -> tuple[int, ...]:
    """Return the global reward growth of each reward."""
    return tuple(info.reward_growth_global_x64 for info in reward_infos)


@dataclass(frozen=True)
class ClmmPoolState:
    """A concentrated-liquidity pool account."""

    LEN = 1544

    discriminator: bytes = bytes(8)
    bump: bytes = bytes(1)
    amm_config: Pubkey = SYSTEM_PROGRAM_ID
    owner: Pubkey = SYSTEM_PROGRAM_ID
    token_mint_0: Pubkey = SYSTEM_PROGRAM_ID
    token_mint_1: Pubkey = SYSTEM_PROGRAM_ID
    token_vault_0: Pubkey = SYSTEM_PROGRAM_ID
    token_vault_1: Pubkey = SYSTEM_PROGRAM_ID
    observation_key: Pubkey = SYSTEM_PROGRAM_ID
    mint_decimals_0: int = 0
    mint_decimals_1: int = 0
    tick_spacing: int = 0
    liquidity: int = 0
    sqrt_price_x64: int = 0
    tick_current: int = 0
    padding3: int = 0
    padding4: int = 0
    fee_growth_global_0_x64: int = 0
    fee_growth_global_1_x64: int = 0
    protocol_fees_token_0: int = 0
    protocol_fees_token_1: int = 0
    swap_in_amount_token_0: int = 0
    swap_out_amount_token_1: int = 0
    swap_in_amount_token_1: int = 0
    swap_out_amount_token_0: int = 0
    status: int = 0
    padding: bytes = bytes(7)
    reward_infos: tuple[RewardInfo, ...] = (RewardInfo(),) * REWARD_NUM
    tick_array_bitmap: tuple[int, ...] = (0,) * 16
    total_fees_token_0: int = 0
    total_fees_claimed_token_0: int = 0
    total_fees_token_1: int = 0
    total_fees_claimed_token_1: int = 0
    fund_fees_token_0: int = 0
    fund_fees_token_1: int = 0
    open_time: int = 0
    recent_epoch: int = 0
    padding1: tuple[int, ...] = (0,) * 24
    padding2: tuple[int, ...] = (0,) * 32

    @classmethod
    def from_bytes(cls, data: bytes) -> "ClmmPoolState":
        """Decode a CLMM pool account, checking its discriminator."""
        reader = _Reader(check_discriminator(data, _POOL_STATE_NAME))
        return cls(
            discriminator=reader.take(8),
            bump=reader.take(1),
            amm_config=reader.pubkey(),
            owner=reader.pubkey(),
            token_mint_0=reader.pubkey(),
            token_mint_1=reader.pubkey(),
            token_vault_0=reader.pubkey(),
            token_vault_1=reader.pubkey(),
            observation_key=reader.pubkey(),
            mint_decimals_0=reader.u8(),
            mint_decimals_1=reader.u8(),
            tick_spacing=reader.u16(),
            liquidity=reader.u128(),
            sqrt_price_x64=reader.u128(),
            tick_current=reader.i32(),
            padding3=reader.u16(),
            padding4=reader.u16(),
            fee_growth_global_0_x64=reader.u128(),
            fee_growth_global_1_x64=reader.u128(),
            protocol_fees_token_0=reader.u64(),
            protocol_fees_token_1=reader.u64(),
            swap_in_amount_token_0=reader.u128(),
            swap_out_amount_token_1=reader.u128(),
            swap_in_amount_token_1=reader.u128(),
            swap_out_amount_token_0=reader.u128(),
            status=reader.u8(),
            padding=reader.take(7),
            reward_infos=reader.array(REWARD_NUM, lambda: RewardInfo._read(reader)),
            tick_array_bitmap=reader.array(16, reader.u64),
            total_fees_token_0=reader.u64(),
            total_fees_claimed_token_0=reader.u64(),
            total_fees_token_1=reader.u64(),
            total_fees_claimed_token_1=reader.u64(),
            fund_fees_token_0=reader.u64(),
            fund_fees_token_1=reader.u64(),
            open_time=reader.u64(),
            recent_epoch=reader.u64(),
            padding1=reader.array(24, reader.u64),
            padding2=reader.array(32, reader.u64),
        )

    def seeds(self) -> list[bytes]:
        """Seeds from which the pool address is derived."""
        return [
            CLMM_POOL_SEED.encode(),
            bytes(self.amm_config),
            bytes(self.token_mint_0),
            bytes(self.token_mint_1),
            bytes(self.bump),
        ]

    def key(self) -> Pubkey:
        """The pool's own address."""
        return create_program_address(self.seeds(), RAYDIUM_CLMM_PROGRAM_ID)


# ---- CP-swap ----


class PoolStatusBitIndex(IntEnum):
    """Bits of the CP-swap pool status; a set bit disables the operation."""

    DEPOSIT = 0
    WITHDRAW = 1
    SWAP = 2


@dataclass(frozen=True)
class CpPoolState:
    """A constant-product swap pool account."""

    LEN = 637

    discriminator: bytes = bytes(8)
    amm_config: Pubkey = SYSTEM_PROGRAM_ID
    pool_creator: Pubkey = SYSTEM_PROGRAM_ID
    token_0_vault: Pubkey = SYSTEM_PROGRAM_ID
    token_1_vault: Pubkey = SYSTEM_PROGRAM_ID
    lp_mint: Pubkey = SYSTEM_PROGRAM_ID
    token_0_mint: Pubkey = SYSTEM_PROGRAM_ID
    token_1_mint: Pubkey = SYSTEM_PROGRAM_ID
    token_0_program: Pubkey = SYSTEM_PROGRAM_ID
    token_1_program: Pubkey = SYSTEM_PROGRAM_ID
    observation_key: Pubkey = SYSTEM_PROGRAM_ID
    auth_bump: int = 0
    status: int = 0
    lp_mint_decimals: int = 0
    mint_0_decimals: int = 0
    mint_1_decimals: int = 0
    lp_supply: int = 0
    protocol_fees_token_0: int = 0
    protocol_fees_token_1: int = 0
    fund_fees_token_0: int = 0
    fund_fees_token_1: int = 0
    open_time: int = 0
    recent_epoch: int = 0
    padding: tuple[int, ...] = field(default=(0,) * 31)

    @classmethod
    def from_bytes(cls, data: bytes) -> "CpPoolState":
        """Decode a CP-swap pool account, checking its discriminator."""
        reader = _Reader(check_discriminator(data, _POOL_STATE_NAME))
        discriminator = reader.take(8)
        keys = reader.array(10, reader.pubkey)
        small = reader.array(5, reader.u8)
        amounts = reader.array(7, reader.u64)
        padding = reader.array(31, reader.u64)
        return cls(discriminator, *keys, *small, *amounts, padding)

    def get_status_by_bit(self, bit: PoolStatusBitIndex) -> bool:
        """True when the operation for this bit is in its normal state."""
        return self.status & (1 << int(bit)) == 0

    def vault_amount_without_fee(self, vault_0: int, vault_1: int) -> tuple[int, int]:
        """Vault balances minus protocol and fund fees owed."""
        fees_0 = self.protocol_fees_token_0 + self.fund_fees_token_0
        fees_1 = self.protocol_fees_token_1 + self.fund_fees_token_1
        if vault_0 < fees_0 or vault_1 < fees_1:
            raise ValueError("Vault amount is smaller than the fees owed")
        return vault_0 - fees_0, vault_1 - fees_1

    def token_price_x32(self, vault_0: int, vault_1: int) -> tuple[int, int]:
        """Prices of each token in the other, as Q32 fixed-point values."""
        amount_0, amount_1 = self.vault_amount_without_fee(vault_0, vault_1)
        return amount_1 * Q32 // amount_0, amount_0 * Q32 // amount_1