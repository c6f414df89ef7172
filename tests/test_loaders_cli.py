"""Tests for the JSON loaders, printer and CLI commands."""

import json

import pytest

import cli
import config
from ingestion.field_loader import build_region, load_field_from_json
from ingestion.pool_loader import (
    load_pool_from_json,
    load_tournament_from_json,
    save_tournament_to_json,
)
from models.bracket import Bracket, Tournament
from models.team import Team, describe_slot

CHAMP_OPEN = config.COMPLETE_MASK & ~(1 << 1)


@pytest.fixture
def pool_file(tmp_path):
    path = tmp_path / "pool.json"
    path.write_text(json.dumps({"brackets": {
        "Alice": 0,
        "Bob": hex(1 << 1),
        "Carol": str(1 << 61),
    }}))
    return str(path)


@pytest.fixture
def tournament_file(tmp_path):
    path = tmp_path / "state.json"
    path.write_text(json.dumps({"decisions": "0x0", "mask": hex(CHAMP_OPEN)}))
    return str(path)


@pytest.fixture
def field_file(tmp_path):
    regions = []
    for name in config.REGION_NAMES:
        regions.append({"name": name, "teams": {str(seed): f"{name} {seed}" for seed in range(1, 17)}})
    path = tmp_path / "teams.json"
    path.write_text(json.dumps({"regions": regions}))
    return str(path)


def test_load_pool_accepts_ints_and_strings(pool_file):
    pool = load_pool_from_json(pool_file)
    assert pool == {"Alice": Bracket(0), "Bob": Bracket(1 << 1), "Carol": Bracket(1 << 61)}


def test_tournament_round_trip(tmp_path, tournament_file):
    tournament = load_tournament_from_json(tournament_file)
    assert tournament == Tournament(0, CHAMP_OPEN)

    path = str(tmp_path / "copy.json")
    save_tournament_to_json(tournament, path)
    assert load_tournament_from_json(path) == tournament


def test_pool_with_bad_mask_rejected(tmp_path):
    path = tmp_path / "pool.json"
    path.write_text(json.dumps({"brackets": {"Eve": 1}}))
    with pytest.raises(ValueError):
        load_pool_from_json(str(path))


def test_field_places_seeds_in_bracket_order(field_file):
    field = load_field_from_json(field_file)
    assert len(field) == 64
    assert field[64] == Team(name="East 1", seed=1, region="East")
    assert field[65].seed == 16
    assert field[127] == Team(name="Midwest 15", seed=15, region="Midwest")
    assert describe_slot(64, field) == "(1) East 1"
    assert describe_slot(64) == "(1) slot 64"


def test_build_region_skips_missing_seeds():
    region = build_region(1, "West", {1: "Gonzaga", "16": "Longwood"})
    assert region == {
        80: Team("Gonzaga", 1, "West"),
        81: Team("Longwood", 16, "West"),
    }


def test_cli_standings(pool_file, tournament_file, capsys):
    code = cli.main(["standings", "--pool", pool_file, "--tournament", tournament_file])
    out = capsys.readouterr().out
    assert code == 0
    assert "Enumerating 2 outcomes" in out
    assert "Alice" in out and "Bob" in out and "Carol" in out
    assert "1st" in out


def test_cli_standings_narrow_tiers(pool_file, tournament_file, capsys):
    code = cli.main(["standings", "--pool", pool_file, "--tournament", tournament_file, "--tiers", "1"])
    out = capsys.readouterr().out
    assert code == 0
    assert "Cannot finish in the top 1: Carol" in out


def test_cli_score(pool_file, tournament_file, field_file, capsys):
    code = cli.main(["score", "--pool", pool_file, "--tournament", tournament_file, "--field", field_file])
    out = capsys.readouterr().out
    assert code == 0
    assert "SCORES" in out
    assert "(1) East 1" in out


def test_cli_decode(tournament_file, field_file, capsys):
    code = cli.main(["decode", "--tournament", tournament_file, "--field", field_file])
    out = capsys.readouterr().out
    assert code == 0
    assert "(1) East 1 vs (16) East 16  ->  (1) East 1" in out
    assert "CHAMPION" not in out


def test_cli_missing_file(tmp_path, pool_file, capsys):
    code = cli.main(["score", "--pool", pool_file, "--tournament", str(tmp_path / "nope.json")])
    assert code == 1
    assert "ERROR" in capsys.readouterr().out


def test_cli_rejects_bad_tiers(pool_file, tournament_file, capsys):
    code = cli.main(["standings", "--pool", pool_file, "--tournament", tournament_file, "--tiers", "0"])
    assert code == 1
    assert "ERROR" in capsys.readouterr().out


def test_cli_result_starts_and_extends_tournament(tmp_path, capsys):
    path = str(tmp_path / "state.json")
    assert cli.main(["result", "--tournament", path, "--game", "32", "--winner", "right"]) == 0
    out = capsys.readouterr().out
    assert "Starting a new tournament" in out
    assert "Game 32 recorded: (16) slot 65 advances" in out
    assert load_tournament_from_json(path).slots[32] == 65

    # Game 16 also waits on game 33
    assert cli.main(["result", "--tournament", path, "--game", "16", "--winner", "left"]) == 0
    assert "winner is known once" in capsys.readouterr().out
    tournament = load_tournament_from_json(path)
    assert tournament == Tournament((1 << 32), (1 << 32) | (1 << 16))
    assert tournament.unplayed_games()[-1] == 1


def test_cli_result_rejects_bad_game(tmp_path, capsys):
    path = tmp_path / "state.json"
    code = cli.main(["result", "--tournament", str(path), "--game", "64", "--winner", "left"])
    assert code == 1
    assert "ERROR" in capsys.readouterr().out
    assert not path.exists()


def test_cli_score_shows_max_possible(pool_file, tournament_file, capsys):
    assert cli.main(["score", "--pool", pool_file, "--tournament", tournament_file]) == 0
    assert "Max possible" in capsys.readouterr().out
