"""
Duel CLI - Command-line interface for the engine.

Usage:
    duel serve [--host H] [--port P]       Run the API server
    duel simulate [--seed N] [--games K]   Play bot-vs-bot matches
    duel validate                          Validate the card catalogue

Environment:
    DUEL_HOST, DUEL_PORT    serve defaults (0.0.0.0, 8080)
    DUEL_LOG_LEVEL          logging level (INFO)
"""

import argparse
import logging
import os
import random
import sys


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Duel - Two-player card drafting engine",
        prog="duel",
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Run the API server")
    serve_parser.add_argument("--host", default=os.getenv("DUEL_HOST", "0.0.0.0"), help="Bind address")
    serve_parser.add_argument("--port", type=int, default=int(os.getenv("DUEL_PORT", "8080")), help="Bind port")

    # Simulate command
    simulate_parser = subparsers.add_parser("simulate", help="Play bot-vs-bot matches")
    simulate_parser.add_argument("--seed", type=int, default=None, help="Random seed")
    simulate_parser.add_argument("--games", type=int, default=1, help="Number of matches")

    # Validate command
    subparsers.add_parser("validate", help="Validate the card catalogue")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=os.getenv("DUEL_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "serve":
        cmd_serve(args)
    elif args.command == "simulate":
        cmd_simulate(args)
    elif args.command == "validate":
        cmd_validate(args)
    else:
        parser.print_help()
        sys.exit(1)


def cmd_serve(args):
    """Run the API server."""
    import uvicorn

    uvicorn.run("duel.api.app:app", host=args.host, port=args.port)


def cmd_simulate(args):
    """Play bot-vs-bot matches and print outcomes."""
    from .bots import RandomPolicy, play_match
    from .engine_core.state import Outcome, Side

    rng = random.Random(args.seed)
    tally = {outcome: 0 for outcome in Outcome}

    for game_number in range(1, args.games + 1):
        result = play_match(
            RandomPolicy(rng=random.Random(rng.getrandbits(64))),
            RandomPolicy(rng=random.Random(rng.getrandbits(64))),
            rng=random.Random(rng.getrandbits(64)),
        )
        tally[result.outcome] += 1
        print(
            f"Game {game_number}: {result.outcome.value} "
            f"(age {result.final_age}, {result.turns} turns, "
            f"A {result.points[Side.A]} pts / B {result.points[Side.B]} pts)"
        )

    print(f"\nA wins: {tally[Outcome.A]}  B wins: {tally[Outcome.B]}  Ties: {tally[Outcome.TIE]}")


def cmd_validate(args):
    """Validate the card catalogue."""
    from .catalogue import validate_catalogue

    result = validate_catalogue()
    for warning in result.warnings:
        print(f"  Warning: {warning}")
    for error in result.errors:
        print(f"  Error: {error}")

    if result.valid:
        print("Catalogue is valid")
    else:
        print(f"Catalogue has {len(result.errors)} error(s)")
        sys.exit(1)


if __name__ == "__main__":
    main()
