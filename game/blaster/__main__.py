"""
Play the blaster in an arcade window, or run headless random episodes

Usage:
    python -m game.blaster
    python -m game.blaster --seed 7 --max-dt 0.25 --spawn-policy dt_normalized
    python -m game.blaster --headless 5
"""

import argparse
import logging

from .config import SPAWN_POLICIES, GameConfig


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Side-scrolling arcade blaster")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--max-dt", type=float, default=None,
                        help="Clamp frame deltas to this many seconds")
    parser.add_argument("--spawn-policy", choices=SPAWN_POLICIES, default=None,
                        help="Enemy spawn chance per frame or per 1/60 s")
    parser.add_argument("--clear-explosions-on-reset", action="store_true", default=None,
                        help="Drop running explosions when a new round starts")
    parser.add_argument("--assets", type=str, default=None,
                        help="Directory containing img/sprites.png and img/terrain.png")
    parser.add_argument("--log-level", type=str, default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--headless", type=int, default=0, metavar="N",
                        help="Run N random episodes without a window")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    config = GameConfig.from_dict({
        "seed": args.seed,
        "max_dt": args.max_dt,
        "spawn_policy": args.spawn_policy,
        "clear_explosions_on_reset": args.clear_explosions_on_reset,
    })

    if args.headless:
        from .blaster_env import run_random_episode

        returns = []
        for i in range(args.headless):
            seed = None if args.seed is None else args.seed + i
            overrides = {k: v for k, v in config.to_dict().items() if k != "seed"}
            returns.append(run_random_episode(seed=seed, **overrides))
        print(f"Mean return over {len(returns)} episodes: {sum(returns) / len(returns):.3f}")
        return

    from .window import run

    run(config, args.assets)


if __name__ == "__main__":
    main()
