# tests/montyhall/strategies/test_decision_resolver.py
"""
pytest-bdd test runner for change_door and the StrategyFactory
"""
from pytest_bdd import scenarios, given, when, then, parsers

from src.montyhall.game import DOORS
from src.montyhall.strategies import StrategyFactory, StrategyType, change_door
from src.montyhall.strategies.implementation import StayStrategy, SwitchStrategy

scenarios('decision_resolver.feature')


class AlwaysFirstDoor:
    """Custom strategy used to exercise factory registration"""

    def __init__(self, name: str):
        self.name = name

    def get_strategy_type(self):
        return None

    def final_pick(self, opened_door: int, initial_pick: int) -> int:
        return 1


# =============================================================================
# GIVEN steps - Setup
# =============================================================================

@given('a strategy factory')
def step_strategy_factory(test_context):
    test_context['factory'] = StrategyFactory()


# =============================================================================
# WHEN steps - Actions
# =============================================================================

@when(parsers.parse('the contestant switches after door {opened:d} was opened with initial pick {pick:d}'))
def step_switch(test_context, opened, pick):
    try:
        test_context['final'] = change_door(False, opened, pick)
        test_context['error'] = None
    except Exception as e:
        test_context['final'] = None
        test_context['error'] = e


@when(parsers.parse('the contestant stays after each possible door was opened with initial pick {pick:d}'))
def step_stay_all_opened(test_context, pick):
    test_context['finals'] = [change_door(True, opened, pick) for opened in DOORS if opened != pick]


@when('I request available strategies')
def step_available_strategies(test_context):
    test_context['available'] = test_context['factory'].get_available_strategies()


@when(parsers.parse('I try to create strategy "{name}"'))
def step_try_create(test_context, name):
    try:
        test_context['strategy'] = test_context['factory'].create_strategy(name)
        test_context['error'] = None
    except Exception as e:
        test_context['strategy'] = None
        test_context['error'] = e


@when(parsers.parse('the contestant switches through that factory after door {opened:d} '
                    'was opened with initial pick {pick:d}'))
def step_switch_through_factory(test_context, opened, pick):
    test_context['final'] = change_door(False, opened, pick, test_context['factory'])
    test_context['error'] = None


@when(parsers.parse('I register a strategy "{name}" that always picks door 1'))
def step_register_custom(test_context, name):
    test_context['factory'].register_strategy(name, AlwaysFirstDoor)


# =============================================================================
# THEN steps - Assertions
# =============================================================================

@then(parsers.parse('the final pick should be door {final:d}'))
def step_check_final(test_context, final):
    assert test_context['error'] is None, f"Unexpected error: {test_context['error']!r}"
    assert test_context['final'] == final


@then(parsers.parse('every final pick should be door {pick:d}'))
def step_check_all_finals(test_context, pick):
    assert test_context['finals'] == [pick, pick]


@then('a ValueError should be raised')
def step_value_error(test_context):
    assert isinstance(test_context['error'], ValueError), \
        f"Expected ValueError, got {test_context['error']!r}"


@then(parsers.parse('error message should include "{expected_text}"'))
def step_error_message(test_context, expected_text):
    assert expected_text in str(test_context['error'])


@then(parsers.parse('the list should contain "{name}"'))
def step_list_contains(test_context, name):
    assert name in test_context['available']


@then(parsers.parse('strategy "{name}" should be created as a stay strategy'))
def step_created_stay(test_context, name):
    strategy = test_context['factory'].create_strategy(StrategyType[name])
    assert isinstance(strategy, StayStrategy)
    assert strategy.get_strategy_type() == StrategyType.STAY
    assert strategy.name == "stay"


@then(parsers.parse('strategy "{name}" should be created as a switch strategy'))
def step_created_switch(test_context, name):
    strategy = test_context['factory'].create_strategy(name)
    assert isinstance(strategy, SwitchStrategy)
    assert strategy.get_strategy_type() == StrategyType.SWITCH


@then(parsers.parse('strategy "{name}" should pick door {final:d} after door {opened:d} '
                    'was opened with initial pick {pick:d}'))
def step_custom_pick(test_context, name, final, opened, pick):
    strategy = test_context['factory'].create_strategy(name)
    assert strategy.final_pick(opened, pick) == final
