"""Pretty-print brackets, scores and standings."""

from tabulate import tabulate

from models.bracket import Bracket, get_all_game_slots_for_round, get_matchup
from models.team import Team, describe_slot
from standings.rankings import RankRecord
from standings.scorer import max_possible_score, score_bracket, score_bracket_by_round

ROUND_NAMES = {1: "Round of 64", 2: "Round of 32", 3: "Sweet 16",
               4: "Elite Eight", 5: "Final Four", 6: "Championship"}


def print_bracket(slots, field: dict[int, Team] | None = None):
    """Print every decided game, round by round.

    Args:
        slots: A decoded slot table (None for undecided games)
        field: Optional team names by slot
    """
    print("\n" + "=" * 60)
    print("           TOURNAMENT")
    print("=" * 60)

    width = len(slots)
    first_round = width // 2
    for round_num in range(1, width.bit_length()):
        print(f"\n  {ROUND_NAMES.get(round_num, f'Round {round_num}')}:")
        for game_slot in get_all_game_slots_for_round(round_num, width):
            left, right = get_matchup(game_slot)
            if game_slot < first_round:
                left, right = slots[left], slots[right]
            winner = slots[game_slot]
            if left is None or right is None:
                continue
            a = describe_slot(left, field)
            b = describe_slot(right, field)
            result = describe_slot(winner, field) if winner is not None else "?"
            print(f"    {a} vs {b}  ->  {result}")

    champion = slots[1]
    if champion is not None:
        print(f"\n  CHAMPION: {describe_slot(champion, field)}")
    print("\n" + "=" * 60)


def print_scores(pool: dict[str, Bracket], actual, field: dict[int, Team] | None = None):
    """Print a score table for every bracket in the pool, best first."""
    rounds = range(1, len(actual).bit_length())
    rows = []
    for name, bracket in pool.items():
        by_round = score_bracket_by_round(bracket.slots, actual)
        rows.append([name, score_bracket(bracket.slots, actual),
                     *[by_round[r] for r in rounds],
                     max_possible_score(bracket.slots, actual), describe_slot(bracket.champion, field)])

    rows.sort(key=lambda row: row[1], reverse=True)
    headers = ["Entrant", "Score", *[f"R{r}" for r in rounds], "Max possible", "Champion"]
    print("\n=== SCORES ===\n")
    print(tabulate(rows, headers=headers, tablefmt="simple"))


def print_standings(record: RankRecord, pool: dict[str, Bracket]):
    """Print each entrant's best possible finish."""
    names: dict[Bracket, list[str]] = {}
    for name, bracket in pool.items():
        names.setdefault(bracket, []).append(name)

    rows = []
    for rank, tier in enumerate(record.rankings()):
        entrants = sorted(n for bracket in tier for n in names.get(bracket, [repr(bracket)]))
        for entrant in entrants:
            rows.append([_ordinal(rank + 1), entrant])

    eliminated = sorted(n for bracket, ns in names.items() if bracket not in record for n in ns)

    print(f"\n=== BEST POSSIBLE FINISH (top {record.tiers}) ===\n")
    if rows:
        print(tabulate(rows, headers=["Best finish", "Entrant"], tablefmt="simple"))
    else:
        print("  No brackets in the pool.")
    if eliminated:
        print(f"\n  Cannot finish in the top {record.tiers}: {', '.join(eliminated)}")


def _ordinal(n: int) -> str:
    if 10 <= n % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"
