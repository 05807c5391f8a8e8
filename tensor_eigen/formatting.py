"""Text rendering of decoded accounts."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, Iterable

from tensor_eigen.raydium import (
    AmmInfo,
    ClmmPoolState,
    CpPoolState,
    RewardInfo,
    StateData,
)

AMM_LABEL_LENGTH = 25
STATE_LABEL_LENGTH = AMM_LABEL_LENGTH - 2
LINE_BREAK = "-------------------------"

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def pad_label(label: str, width: int) -> str:
    """Left-align a label in a field of the given width."""
    return f"{label:<{width}}"


def _display(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def option_formatter(value: Any) -> str:
    """Render an optional value, showing None for a missing one."""
    return "None" if value is None else _display(value)


def format_timestamp(timestamp: int) -> str:
    """Render Unix seconds as RFC 3339 in UTC, falling back to the epoch."""
    try:
        moment = _EPOCH + timedelta(seconds=int(timestamp))
    except OverflowError:
        moment = _EPOCH
    return moment.isoformat()


def _field_lines(
    fields: Iterable[tuple[str, Any]], width: int, indent: str = ""
) -> list[str]:
    return [f"{indent}{pad_label(label, width)}: {_display(value)}" for label, value in fields]


def format_state_data(data: StateData) -> str:
    """Render the statistics block of an AMM v4 pool."""
    fields = [
        ("need_take_pnl_coin", data.need_take_pnl_coin),
        ("need_take_pnl_pc", data.need_take_pnl_pc),
        ("total_pnl_pc", data.total_pnl_pc),
        ("total_pnl_coin", data.total_pnl_coin),
        ("pool_open_time", data.pool_open_time),
        ("swap_coin_in_amount", data.swap_coin_in_amount),
        ("swap_pc_out_amount", data.swap_pc_out_amount),
        ("swap_acc_pc_fee", data.swap_acc_pc_fee),
    ]
    lines = ["--State Data-------------"]
    lines += _field_lines(fields, STATE_LABEL_LENGTH, "  ")
    lines.append(LINE_BREAK)
    return "\n".join(lines)


def format_amm_info(info: AmmInfo) -> str:
    """Render an AMM v4 pool account."""
    head = [
        ("status", info.status),
        ("nonce", info.nonce),
        ("order_num", info.order_num),
        ("depth", info.depth),
        ("coin_decimals", info.coin_decimals),
        ("pc_decimals", info.pc_decimals),
        ("state", info.state),
        ("reset_flag", info.reset_flag),
        ("min_size", info.min_size),
        ("coin_lot_size", info.coin_lot_size),
        ("pc_lot_size", info.pc_lot_size),
        ("min_price_multiplier", info.min_price_multiplier),
        ("max_price_multiplier", info.max_price_multiplier),
    ]
    tail = [
        ("pc_vault", info.pc_vault),
        ("coin_vault_mint", info.coin_vault_mint),
        ("pc_vault_mint", info.pc_vault_mint),
        ("lp_mint", info.lp_mint),
        ("open_orders", info.open_orders),
        ("market", info.market),
        ("market_program", info.market_program),
        ("target_orders", info.target_orders),
        ("amm_owner", info.amm_owner),
        ("lp_amount", info.lp_amount),
    ]
    lines = ["Raydium AMM Info---------"]
    lines += _field_lines(head, AMM_LABEL_LENGTH)
    # The statistics block shares its closing line with the coin vault label.
    lines.append(
        f"{format_state_data(info.state_data)}: "
        f"{pad_label('coin_vault', AMM_LABEL_LENGTH)}"
    )
    lines.append(_display(info.coin_vault))
    lines += _field_lines(tail, AMM_LABEL_LENGTH)
    return "\n".join(lines)


def format_reward_info(info: RewardInfo) -> str:
    """Render one CLMM reward entry."""
    fields = [
        ("reward_state", info.reward_state),
        ("open_time", info.open_time),
        ("end_time", info.end_time),
        ("last_update_time", info.last_update_time),
        ("emissions_per_second", info.emissions_per_second_x64),
        ("total_emissioned", info.reward_total_emissioned),
        ("reward_claimed", info.reward_claimed),
        ("token_mint", info.token_mint),
        ("token_vault", info.token_vault),
        ("authority", info.authority),
    ]
    lines = ["--Reward Info-------------"]
    lines += _field_lines(fields, STATE_LABEL_LENGTH, "  ")
    return "\n".join(lines)


def format_clmm_pool(pool: ClmmPoolState) -> str:
    """Render a CLMM pool account with its initialized rewards."""
    fields = [
        ("amm_config", pool.amm_config),
        ("owner", pool.owner),
        ("token_mint_0", pool.token_mint_0),
        ("token_mint_1", pool.token_mint_1),
        ("token_vault_0", pool.token_vault_0),
        ("token_vault_1", pool.token_vault_1),
        ("tick_spacing", pool.tick_spacing),
        ("liquidity", pool.liquidity),
        ("sqrt_price_x64", pool.sqrt_price_x64),
        ("tick_current", pool.tick_current),
        ("protocol_fees_0", pool.protocol_fees_token_0),
        ("protocol_fees_1", pool.protocol_fees_token_1),
        ("status", pool.status),
        ("open_time", pool.open_time),
        ("recent_epoch", pool.recent_epoch),
    ]
    lines = ["--CLMM Pool State---------"]
    lines += _field_lines(fields, AMM_LABEL_LENGTH)
    for number, reward in enumerate(pool.reward_infos, start=1):
        if reward.initialized():
            lines.append(f"--Reward #{number}--------------")
            lines.append(format_reward_info(reward))
    lines.append(LINE_BREAK)
    return "\n".join(lines)


def format_cp_pool(pool: CpPoolState) -> str:
    """Render a CP-swap pool account."""
    fields = [
        ("amm_config", pool.amm_config),
        ("pool_creator", pool.pool_creator),
        ("token_0_vault", pool.token_0_vault),
        ("token_1_vault", pool.token_1_vault),
        ("lp_mint", pool.lp_mint),
        ("token_0_mint", pool.token_0_mint),
        ("token_1_mint", pool.token_1_mint),
        ("token_0_program", pool.token_0_program),
        ("token_1_program", pool.token_1_program),
        ("observation_key", pool.observation_key),
        ("status", pool.status),
        ("lp_supply", pool.lp_supply),
        ("protocol_fees_0", pool.protocol_fees_token_0),
        ("protocol_fees_1", pool.protocol_fees_token_1),
        ("fund_fees_0", pool.fund_fees_token_0),
        ("fund_fees_1", pool.fund_fees_token_1),
        ("open_time", pool.open_time),
        ("recent_epoch", pool.recent_epoch),
    ]
    lines = ["--CPSwap Pool State-------"]
    lines += _field_lines(fields, AMM_LABEL_LENGTH)
    lines.append(LINE_BREAK)
    return "\n".join(lines)