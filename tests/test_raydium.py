import struct

import pytest

from tensor_eigen.discriminators import (
    DiscriminatorError,
    DiscriminatorKind,
    anchor_discriminator,
)
from tensor_eigen.pubkey import SYSTEM_PROGRAM_ID, Pubkey, find_program_address
from tensor_eigen.raydium import (
    CLMM_POOL_SEED,
    Q32,
    RAYDIUM_CLMM_PROGRAM_ID,
    REWARD_NUM,
    AmmInfo,
    ClmmPoolState,
    CpPoolState,
    PoolStatusBitIndex,
    RewardInfo,
    reward_growths,
)

POOL_DISC = anchor_discriminator(DiscriminatorKind.ACCOUNT, "PoolState")


def _key(byte):
    return Pubkey(bytes([byte]) * 32)


def _amm_bytes():
    head = struct.pack("<16Q", *range(1, 17))
    fees = struct.pack("<8Q", *range(17, 25))
    state = struct.pack("<7Q", *range(25, 32))
    state += (100).to_bytes(16, "little") + (101).to_bytes(16, "little")
    state += struct.pack("<Q", 102)
    state += (103).to_bytes(16, "little") + (104).to_bytes(16, "little")
    state += struct.pack("<Q", 105)
    keys = b"".join(bytes(_key(i)) for i in range(1, 10))
    padding1 = struct.pack("<8Q", *range(40, 48))
    owner = bytes(_key(20))
    tail = struct.pack("<4Q", 50, 51, 52, 53)
    return head + fees + state + keys + padding1 + owner + tail


def test_amm_info_layout_length():
    assert len(_amm_bytes()) == AmmInfo.LEN


def test_amm_info_decodes_fields():
    info = AmmInfo.from_bytes(_amm_bytes())
    assert info.status == 1
    assert info.sys_decimal_value == 16
    assert info.fees.min_separate_numerator == 17
    assert info.fees.swap_fee_denominator == 24
    assert info.state_data.need_take_pnl_coin == 25
    assert info.state_data.padding == (30, 31)
    assert info.state_data.swap_coin_in_amount == 100
    assert info.state_data.swap_acc_coin_fee == 105
    assert info.coin_vault == _key(1)
    assert info.target_orders == _key(9)
    assert info.padding1 == tuple(range(40, 48))
    assert info.amm_owner == _key(20)
    assert (info.lp_amount, info.client_order_id, info.recent_epoch, info.padding2) == (
        50,
        51,
        52,
        53,
    )


def test_amm_info_zero_bytes_equal_default():
    assert AmmInfo.from_bytes(bytes(AmmInfo.LEN)) == AmmInfo()


def test_amm_info_short_data_raises():
    with pytest.raises(ValueError):
        AmmInfo.from_bytes(bytes(AmmInfo.LEN - 1))


def _clmm_bytes(bump=0, tick=0, mint_reward=None):
    data = bytearray(ClmmPoolState.LEN)
    data[:8] = POOL_DISC
    data[8] = bump
    struct.pack_into("<i", data, 269, tick)
    if mint_reward is not None:
        index, key = mint_reward
        base = 397 + index * RewardInfo.LEN
        data[base + 57 : base + 89] = bytes(key)
        data[base + 153 : base + 169] = (7).to_bytes(16, "little")
    return bytes(data)


def test_clmm_decodes_signed_tick_and_rewards():
    pool = ClmmPoolState.from_bytes(_clmm_bytes(bump=3, tick=-5, mint_reward=(1, _key(9))))
    assert pool.discriminator == POOL_DISC
    assert pool.bump == b"\x03"
    assert pool.tick_current == -5
    assert len(pool.reward_infos) == REWARD_NUM
    assert [r.initialized() for r in pool.reward_infos] == [False, True, False]
    assert pool.reward_infos[1].token_mint == _key(9)
    assert reward_growths(pool.reward_infos) == (0, 7, 0)


def test_clmm_wrong_discriminator_raises():
    data = bytearray(_clmm_bytes())
    data[0] ^= 0xFF
    with pytest.raises(DiscriminatorError):
        ClmmPoolState.from_bytes(bytes(data))


def test_clmm_short_data_raises():
    with pytest.raises(ValueError):
        ClmmPoolState.from_bytes(_clmm_bytes()[:-1])


def test_clmm_seeds_and_key_match_derived_address():
    amm, mint0, mint1 = _key(1), _key(2), _key(3)
    address, bump = find_program_address(
        [CLMM_POOL_SEED.encode(), bytes(amm), bytes(mint0), bytes(mint1)],
        RAYDIUM_CLMM_PROGRAM_ID,
    )
    pool = ClmmPoolState(
        amm_config=amm, token_mint_0=mint0, token_mint_1=mint1, bump=bytes([bump])
    )
    assert pool.seeds()[0] == b"pool"
    assert pool.seeds()[-1] == bytes([bump])
    assert pool.key() == address


def test_reward_info_default_not_initialized():
    assert RewardInfo().initialized() is False
    assert RewardInfo(authority=_key(4)).initialized() is False
    assert RewardInfo(token_mint=_key(4)).initialized() is True
    assert RewardInfo().token_mint == SYSTEM_PROGRAM_ID


def test_cp_pool_decodes_fields():
    data = bytearray(CpPoolState.LEN)
    data[:8] = POOL_DISC
    data[8:40] = bytes(_key(1))
    data[296:328] = bytes(_key(10))
    data[328:333] = bytes([1, 2, 3, 4, 5])
    struct.pack_into("<7Q", data, 333, 11, 12, 13, 14, 15, 16, 17)
    pool = CpPoolState.from_bytes(bytes(data))
    assert pool.amm_config == _key(1)
    assert pool.observation_key == _key(10)
    assert (pool.auth_bump, pool.status, pool.mint_1_decimals) == (1, 2, 5)
    assert pool.lp_supply == 11
    assert pool.recent_epoch == 17
    assert pool.padding == (0,) * 31


def test_cp_pool_wrong_discriminator_raises():
    with pytest.raises(DiscriminatorError):
        CpPoolState.from_bytes(bytes(CpPoolState.LEN))


@pytest.mark.parametrize(
    "status, normal",
    [
        (0, (True, True, True)),
        (1, (False, True, True)),
        (2, (True, False, True)),
        (4, (True, True, False)),
        (7, (False, False, False)),
    ],
)
def test_cp_status_bits(status, normal):
    pool = CpPoolState(status=status)
    result = tuple(
        pool.get_status_by_bit(bit)
        for bit in (
            PoolStatusBitIndex.DEPOSIT,
            PoolStatusBitIndex.WITHDRAW,
            PoolStatusBitIndex.SWAP,
        )
    )
    assert result == normal


def test_cp_vault_amount_without_fee():
    pool = CpPoolState(
        protocol_fees_token_0=10,
        fund_fees_token_0=5,
        protocol_fees_token_1=2,
        fund_fees_token_1=3,
    )
    assert pool.vault_amount_without_fee(100, 50) == (85, 45)


def test_cp_vault_amount_underflow_raises():
    pool = CpPoolState(protocol_fees_token_0=10)
    with pytest.raises(ValueError):
        pool.vault_amount_without_fee(9, 0)


def test_cp_token_price_x32():
    pool = CpPoolState()
    assert pool.token_price_x32(2, 4) == (2 * Q32, Q32 // 2)
    assert pool.token_price_x32(5, 5) == (Q32, Q32)


def test_cp_token_price_zero_vault_raises():
    with pytest.raises(ZeroDivisionError):
        CpPoolState().token_price_x32(0, 5)