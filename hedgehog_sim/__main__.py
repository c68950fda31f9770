"""Entry point: ``python -m hedgehog_sim``.

Supports two modes:
  - ``python -m hedgehog_sim``        → Launch the FastAPI server
  - ``python -m hedgehog_sim cli``    → Headless seeded autoplay
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING"]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Hedgehog Forest game engine")
    sub = parser.add_subparsers(dest="command")

    # --- Server mode (default) ---
    srv = sub.add_parser("serve", help="Start the FastAPI game server (default)")
    srv.add_argument("--host", type=str, default="127.0.0.1")
    srv.add_argument("--port", type=int, default=8000)
    srv.add_argument("--seed", type=int, default=None)
    srv.add_argument("--map", type=str, default=None, help="JSON map description file")
    srv.add_argument("--tick-interval", type=float, default=0.5)
    srv.add_argument("--no-ticker", action="store_true", help="Do not start the predator ticker")
    srv.add_argument("--log-level", type=str, default="INFO", choices=LOG_LEVELS)

    # --- Headless CLI mode ---
    cli = sub.add_parser("cli", help="Run a headless seeded autoplay")
    cli.add_argument("--seed", type=int, default=42)
    cli.add_argument("--map", type=str, default=None, help="JSON map description file")
    cli.add_argument("--turns", type=int, default=100)
    cli.add_argument("--replay", type=str, default=None, help="Write a JSON replay here")
    cli.add_argument("--log-level", type=str, default="INFO", choices=LOG_LEVELS)

    return parser


def _load_map(parser: argparse.ArgumentParser, path: str | None) -> dict[str, Any] | None:
    if path is None:
        return None
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        parser.error(f"cannot read map {path}: {exc}")
    if not isinstance(data, dict):
        parser.error(f"map {path} must be a JSON object")
    return data


def _run_server(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    import uvicorn

    from hedgehog_sim.api.app import create_app
    from hedgehog_sim.config import GameConfig

    config = GameConfig(
        seed=args.seed,
        tick_interval=args.tick_interval,
        log_level=args.log_level,
    )
    app = create_app(config, _load_map(parser, args.map), autostart=not args.no_ticker)
    uvicorn.run(app, host=args.host, port=args.port, log_level=args.log_level.lower())


def _run_cli(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    from hedgehog_sim.config import GameConfig
    from hedgehog_sim.core.maps import default_map
    from hedgehog_sim.engine.autoplay import Autoplayer
    from hedgehog_sim.engine.game_controller import GameController
    from hedgehog_sim.systems.rng import RandomSource
    from hedgehog_sim.utils.logging import setup_logging
    from hedgehog_sim.utils.replay import ReplayRecorder

    config = GameConfig(seed=args.seed, log_level=args.log_level)
    setup_logging(config.log_level)

    map_data = _load_map(parser, args.map)
    if map_data is None:
        map_data = default_map()
    rng = RandomSource(config.seed)
    controller = GameController(map_data, rng, config)
    controller.event_bus.on_any(lambda name, payload: logger.info("event %s %s", name, payload))

    recorder = ReplayRecorder(args.replay, rng.seed) if args.replay else None
    if recorder is not None:
        controller.event_bus.on_any(recorder.on_event)

    player = Autoplayer(controller, rng.spawn(0xA070))
    for turn in range(args.turns):
        if controller.is_game_over():
            break
        command = player.play_turn()
        controller.tick()
        if recorder is not None:
            recorder.record_turn(turn, command, controller)

    if recorder is not None:
        recorder.flush()

    state = controller.get_game_state()
    logger.info("Finished: %s", state)
    print(json.dumps(state.to_dict(), indent=2))


def main() -> None:
    parser = _build_parser()
    args = parser.parse_args()

    # Default to serve mode if no subcommand given
    if args.command is None:
        args = parser.parse_args(["serve"])

    if args.command == "serve":
        _run_server(parser, args)
    elif args.command == "cli":
        _run_cli(parser, args)


if __name__ == "__main__":
    main()
