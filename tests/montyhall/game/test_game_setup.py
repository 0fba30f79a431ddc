# tests/montyhall/game/test_game_setup.py
"""
pytest-bdd test runner for game setup and door selection
Seeded generators keep the random scenarios reproducible
"""
from collections import Counter

import numpy as np
from pytest_bdd import scenarios, given, when, then, parsers

from src.montyhall.game import (
    DOORS,
    Game,
    Prize,
    InvalidGameStateError,
    create_game,
    select_door,
    validate_game
)

scenarios('game_setup.feature')


# =============================================================================
# GIVEN steps - Setup
# =============================================================================

@given(parsers.parse('a random generator seeded with {seed:d}'))
def step_seeded_generator(test_context, seed):
    test_context['rng'] = np.random.default_rng(seed)


@given(parsers.parse('a game with doors "{labels}"'))
def step_game_from_labels(test_context, labels):
    test_context['game'] = Game.from_labels(labels.split(','))


# =============================================================================
# WHEN steps - Actions
# =============================================================================

@when(parsers.parse('I create {count:d} games'))
def step_create_games(test_context, count):
    rng = test_context['rng']
    test_context['games'] = [create_game(rng) for _ in range(count)]


@when(parsers.parse('I create a game with seed {seed:d} twice'))
def step_create_game_twice(test_context, seed):
    test_context['games'] = [create_game(np.random.default_rng(seed)) for _ in range(2)]


@when(parsers.parse('the contestant selects a door {count:d} times'))
def step_select_doors(test_context, count):
    rng = test_context['rng']
    test_context['picks'] = [select_door(rng) for _ in range(count)]


@when('I validate the game')
def step_validate_game(test_context):
    try:
        validate_game(test_context['game'])
        test_context['error'] = None
    except Exception as e:
        test_context['error'] = e


# =============================================================================
# THEN steps - Assertions
# =============================================================================

@then(parsers.parse('every game should have {door_count:d} doors'))
def step_every_game_has_doors(test_context, door_count):
    for game in test_context['games']:
        assert len(game) == door_count, f"Expected {door_count} doors, got {game.labels()}"


@then(parsers.parse('every game should hold exactly {cars:d} car and {goats:d} goats'))
def step_every_game_one_car(test_context, cars, goats):
    for game in test_context['games']:
        counts = Counter(game.slots)
        assert counts[Prize.CAR] == cars, f"Wrong car count in {game.labels()}"
        assert counts[Prize.GOAT] == goats, f"Wrong goat count in {game.labels()}"


@then(parsers.parse('each door should hide the car in between {low:f} and {high:f} of the games'))
def step_car_positions_uniform(test_context, low, high):
    games = test_context['games']
    counts = Counter(game.car_door for game in games)

    for door in DOORS:
        share = counts[door] / len(games)
        assert low <= share <= high, f"Door {door} hid the car in {share:.3f} of games"


@then('both games should be identical')
def step_games_identical(test_context):
    first, second = test_context['games']
    assert first == second


@then('every selected door should be one of 1, 2, 3')
def step_picks_valid(test_context):
    assert set(test_context['picks']) <= set(DOORS)
    assert all(isinstance(pick, int) for pick in test_context['picks'])


@then(parsers.parse('each door should be selected in between {low:f} and {high:f} of the picks'))
def step_picks_uniform(test_context, low, high):
    picks = test_context['picks']
    counts = Counter(picks)

    for door in DOORS:
        share = counts[door] / len(picks)
        assert low <= share <= high, f"Door {door} selected in {share:.3f} of picks"


@then(parsers.parse('the car should be behind door {car_door:d}'))
def step_car_door(test_context, car_door):
    assert test_context['game'].car_door == car_door


@then(parsers.parse('the goats should be behind doors "{goat_doors}"'))
def step_goat_doors(test_context, goat_doors):
    expected = tuple(int(door) for door in goat_doors.split(','))
    assert test_context['game'].goat_doors == expected


@then('an InvalidGameStateError should be raised')
def step_invalid_game_error(test_context):
    assert isinstance(test_context['error'], InvalidGameStateError), \
        f"Expected InvalidGameStateError, got {test_context['error']!r}"
