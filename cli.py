"""Bracket Pool Standings - CLI entry point.

Usage:
    python cli.py decode --tournament state.json [--field teams.json]
    python cli.py score --pool pool.json --tournament state.json [--field teams.json]
    python cli.py standings --pool pool.json --tournament state.json [--tiers 5] [--progress]
    python cli.py result --tournament state.json --game 32 --winner left|right
"""

import argparse
import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import config


def _load_field(args):
    if not args.field:
        return None
    from ingestion.field_loader import load_field_from_json
    return load_field_from_json(args.field)


def _require_files(*paths) -> bool:
    for path in paths:
        if not os.path.exists(path):
            print(f"ERROR: File not found: {path}")
            return False
    return True


# --- Commands ---

def cmd_decode(args):
    """Show the games decided so far."""
    if not _require_files(args.tournament):
        return 1

    from ingestion.pool_loader import load_tournament_from_json
    from output.printer import print_bracket

    tournament = load_tournament_from_json(args.tournament)
    print_bracket(tournament.slots, _load_field(args))
    return 0


def cmd_score(args):
    """Score every bracket in the pool against the current tournament."""
    if not _require_files(args.pool, args.tournament):
        return 1

    from ingestion.pool_loader import load_pool_from_json, load_tournament_from_json
    from output.printer import print_scores

    pool = load_pool_from_json(args.pool)
    tournament = load_tournament_from_json(args.tournament)
    print_scores(pool, tournament.slots, _load_field(args))
    return 0


def cmd_standings(args):
    """Enumerate remaining outcomes and report each bracket's best finish."""
    if not _require_files(args.pool, args.tournament):
        return 1
    if args.tiers < 1:
        print(f"ERROR: --tiers must be at least 1, got {args.tiers}")
        return 1

    from ingestion.pool_loader import load_pool_from_json, load_tournament_from_json
    from output.printer import print_standings
    from standings.enumerator import best_ranks, count_outcomes

    pool = load_pool_from_json(args.pool)
    tournament = load_tournament_from_json(args.tournament)

    unplayed = len(tournament.unplayed_games())
    print(f"Enumerating {count_outcomes(tournament)} outcomes ({unplayed} games unplayed)...")
    record = best_ranks(pool.values(), tournament, tiers=args.tiers, show_progress=args.progress)
    print_standings(record, pool)
    return 0


def cmd_result(args):
    """Record one game result in the tournament state file."""
    from ingestion.pool_loader import load_tournament_from_json, save_tournament_to_json
    from models.bracket import Tournament

    if os.path.exists(args.tournament):
        tournament = load_tournament_from_json(args.tournament)
    else:
        print(f"Starting a new tournament at {args.tournament}")
        tournament = Tournament()

    try:
        tournament = tournament.with_result(args.game, 1 if args.winner == "right" else 0)
    except ValueError as e:
        print(f"ERROR: {e}")
        return 1

    winner = tournament.slots[args.game]
    if winner is None:
        print(f"Game {args.game} recorded; its winner is known once the games before it are entered")
    else:
        from models.team import describe_slot
        print(f"Game {args.game} recorded: {describe_slot(winner)} advances")
    save_tournament_to_json(tournament, args.tournament)
    return 0


# --- Main ---

def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Bracket Pool Standings",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Workflow:
  1. python cli.py result --tournament state.json --game 32 --winner left  # Enter each result
  2. python cli.py decode --tournament state.json --field teams.json  # Check the results entered so far
  3. python cli.py score --pool pool.json --tournament state.json     # Current scores
  4. python cli.py standings --pool pool.json --tournament state.json # Who can still finish top 5
        """
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # decode
    p_decode = subparsers.add_parser("decode", help="Show the decided games of a tournament")
    p_decode.add_argument("--tournament", required=True, help="JSON file with decisions and mask")
    p_decode.add_argument("--field", help="JSON file with team names by region and seed")

    # score
    p_score = subparsers.add_parser("score", help="Score the pool against the tournament")
    p_score.add_argument("--pool", required=True, help="JSON file with the bracket pool")
    p_score.add_argument("--tournament", required=True, help="JSON file with decisions and mask")
    p_score.add_argument("--field", help="JSON file with team names by region and seed")

    # standings
    p_stand = subparsers.add_parser("standings", help="Best possible finish for every bracket")
    p_stand.add_argument("--pool", required=True, help="JSON file with the bracket pool")
    p_stand.add_argument("--tournament", required=True, help="JSON file with decisions and mask")
    p_stand.add_argument("--tiers", type=int, default=config.TOP_RANKS,
                         help="Number of rank tiers to track")
    p_stand.add_argument("--progress", action="store_true", help="Show a progress bar")

    # result
    p_result = subparsers.add_parser("result", help="Record a game result")
    p_result.add_argument("--tournament", required=True, help="JSON file with decisions and mask")
    p_result.add_argument("--game", type=int, required=True, help="Game slot (1 = championship, 32-63 = first round)")
    p_result.add_argument("--winner", choices=["left", "right"], required=True,
                          help="Which side advanced (left = lower-numbered slot)")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    commands = {
        "decode": cmd_decode,
        "score": cmd_score,
        "standings": cmd_standings,
        "result": cmd_result,
    }

    cmd_func = commands.get(args.command)
    if cmd_func:
        return cmd_func(args)
    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
