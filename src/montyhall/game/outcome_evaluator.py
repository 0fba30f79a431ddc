# outcome_evaluator.py
from src.montyhall.game.game_types import Game, Outcome, Prize, validate_game


def determine_winner(final_pick: int, game: Game) -> Outcome:
    """
    Reveal the prize behind the final pick

    Returns:
        Outcome.WIN for the car, Outcome.LOSE for a goat

    Raises:
        InvalidGameStateError: if the game does not hold exactly one car
        ValueError: if final_pick is not a valid door index
    """
    validate_game(game)

    prize = game[final_pick]
    if prize == Prize.CAR:
        return Outcome.WIN
    return Outcome.LOSE
