"""GET /api/v1/config — expose game configuration."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from hedgehog_sim.api.dependencies import get_session_manager
from hedgehog_sim.api.schemas import ConfigResponse
from hedgehog_sim.api.session_manager import SessionManager

router = APIRouter()


@router.get("/config", response_model=ConfigResponse)
def get_config(
    manager: SessionManager = Depends(get_session_manager),
) -> ConfigResponse:
    cfg = manager.config
    return ConfigResponse(
        seed=manager.seed,
        max_energy=cfg.max_energy,
        normal_move_cost=cfg.normal_move_cost,
        curled_move_cost=cfg.curled_move_cost,
        max_time=cfg.max_time,
        default_lives=cfg.default_lives,
        win_score=cfg.win_score,
        pit_survival_chance=cfg.pit_survival_chance,
        curled_move_interval=cfg.curled_move_interval,
        predator_move_interval=cfg.predator_move_interval,
        predator_leash_radius=cfg.predator_leash_radius,
        npc_honesty_rate=cfg.npc_honesty_rate,
        tick_interval=manager.tick_interval,
    )
