"""Central configuration for the bracket pool standings calculator."""

# Scoring: base points awarded per correct pick in each round, plus the
# winning team's seed as an upset bonus.
# Round 1 = Round of 64, Round 6 = Championship
ROUND_POINTS = {1: 1, 2: 2, 3: 3, 4: 5, 5: 8, 6: 13}

# Number of games per round
GAMES_PER_ROUND = {1: 32, 2: 16, 3: 8, 4: 4, 5: 2, 6: 1}

# Bracket structure
NUM_TEAMS = 64
NUM_GAMES = 63
NUM_SLOTS = 64  # decoded table width, index 0 unused
FIRST_ROUND_START = 32  # games 32-63 are first-round games
NUM_REGIONS = 4
REGION_NAMES = ["East", "West", "South", "Midwest"]

# Every game 1-63 settled (bit 0 is never used)
COMPLETE_MASK = 0xFFFFFFFFFFFFFFFE

# Seeds placed in bracket order within a region (1v16, 8v9, 5v12, ...)
SEED_ORDER = [1, 16, 8, 9, 5, 12, 4, 13, 6, 11, 3, 14, 7, 10, 2, 15]

# Standings settings
TOP_RANKS = 5  # rank tiers kept per enumerated outcome (ranks 0-4)
