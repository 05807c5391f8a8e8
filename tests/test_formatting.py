from datetime import datetime

import pytest

from tensor_eigen.formatting import (
    AMM_LABEL_LENGTH,
    LINE_BREAK,
    STATE_LABEL_LENGTH,
    format_amm_info,
    format_clmm_pool,
    format_cp_pool,
    format_reward_info,
    format_state_data,
    format_timestamp,
    option_formatter,
    pad_label,
)
from tensor_eigen.pubkey import Pubkey
from tensor_eigen.raydium import (
    AmmInfo,
    ClmmPoolState,
    CpPoolState,
    RewardInfo,
    StateData,
)


def key(n):
    return Pubkey(bytes([n]) * 32)


def test_pad_label_pads_to_width():
    assert pad_label("abc", 6) == "abc   "
    assert len(pad_label("status", AMM_LABEL_LENGTH)) == AMM_LABEL_LENGTH


def test_pad_label_keeps_long_label():
    label = "a_label_longer_than_width"
    assert pad_label(label, 5) == label


def test_option_formatter():
    assert option_formatter(None) == "None"
    assert option_formatter(42) == "42"
    assert option_formatter(True) == "true"
    assert option_formatter(key(3)) == str(key(3))


def test_format_timestamp_epoch():
    assert format_timestamp(0) == "1970-01-01T00:00:00+00:00"


@pytest.mark.parametrize("ts", [1, 86_400, 1_700_000_000, -3_600])
def test_format_timestamp_round_trip(ts):
    assert datetime.fromisoformat(format_timestamp(ts)).timestamp() == ts


def test_format_timestamp_out_of_range_falls_back_to_epoch():
    assert format_timestamp(10**15) == format_timestamp(0)
    assert format_timestamp(-(10**15)) == format_timestamp(0)


def test_format_state_data():
    data = StateData(need_take_pnl_coin=11, swap_acc_pc_fee=99)
    lines = format_state_data(data).split("\n")
    assert lines[0] == "--State Data-------------"
    assert lines[1] == "  " + pad_label("need_take_pnl_coin", STATE_LABEL_LENGTH) + ": 11"
    assert lines[8] == "  " + pad_label("swap_acc_pc_fee", STATE_LABEL_LENGTH) + ": 99"
    assert lines[-1] == LINE_BREAK
    assert len(lines) == 10


def test_format_amm_info_layout():
    info = AmmInfo(
        status=6,
        nonce=254,
        coin_vault=key(1),
        pc_vault=key(2),
        amm_owner=key(9),
        lp_amount=123,
        state_data=StateData(total_pnl_pc=77),
    )
    text = format_amm_info(info)
    lines = text.split("\n")
    assert lines[0] == "Raydium AMM Info---------"
    assert lines[1] == pad_label("status", AMM_LABEL_LENGTH) + ": 6"
    assert lines[2] == pad_label("nonce", AMM_LABEL_LENGTH) + ": 254"
    assert format_state_data(info.state_data) in text
    joint = LINE_BREAK + ": " + pad_label("coin_vault", AMM_LABEL_LENGTH)
    index = lines.index(joint)
    assert lines[index + 1] == str(key(1))
    assert lines[index + 2] == pad_label("pc_vault", AMM_LABEL_LENGTH) + ": " + str(key(2))
    assert lines[-2] == pad_label("amm_owner", AMM_LABEL_LENGTH) + ": " + str(key(9))
    assert lines[-1] == pad_label("lp_amount", AMM_LABEL_LENGTH) + ": 123"


def test_format_reward_info():
    reward = RewardInfo(token_mint=key(5), authority=key(6), emissions_per_second_x64=2**70)
    lines = format_reward_info(reward).split("\n")
    assert lines[0] == "--Reward Info-------------"
    assert len(lines) == 11
    assert lines[5] == "  " + pad_label("emissions_per_second", STATE_LABEL_LENGTH) + ": " + str(2**70)
    assert lines[-1] == "  " + pad_label("authority", STATE_LABEL_LENGTH) + ": " + str(key(6))


def test_format_clmm_pool_without_rewards():
    pool = ClmmPoolState(amm_config=key(1), tick_current=-5, liquidity=2**100)
    lines = format_clmm_pool(pool).split("\n")
    assert lines[0] == "--CLMM Pool State---------"
    assert len(lines) == 17
    assert lines[10] == pad_label("tick_current", AMM_LABEL_LENGTH) + ": -5"
    assert lines[8] == pad_label("liquidity", AMM_LABEL_LENGTH) + ": " + str(2**100)
    assert lines[-1] == LINE_BREAK
    assert "Reward #" not in "\n".join(lines)


def test_format_clmm_pool_lists_only_initialized_rewards():
    active = RewardInfo(token_mint=key(7))
    pool = ClmmPoolState(reward_infos=(RewardInfo(), active, RewardInfo()))
    text = format_clmm_pool(pool)
    assert "--Reward #2--------------\n" + format_reward_info(active) in text
    assert "--Reward #1" not in text
    assert "--Reward #3" not in text
    assert text.endswith("\n" + LINE_BREAK)


def test_format_cp_pool():
    pool = CpPoolState(pool_creator=key(4), lp_supply=1000, recent_epoch=600)
    lines = format_cp_pool(pool).split("\n")
    assert lines[0] == "--CPSwap Pool State-------"
    assert len(lines) == 20
    assert lines[2] == pad_label("pool_creator", AMM_LABEL_LENGTH) + ": " + str(key(4))
    assert lines[12] == pad_label("lp_supply", AMM_LABEL_LENGTH) + ": 1000"
    assert lines[18] == pad_label("recent_epoch", AMM_LABEL_LENGTH) + ": 600"
    assert lines[-1] == LINE_BREAK