"""Game state machine. Transition table maps (state, event) to the next state."""
from __future__ import annotations

from flappy.types import GameState, InvalidTransitionError

START = "start"
CRASH = "crash"

TRANSITIONS: dict[GameState, dict[str, GameState]] = {
    GameState.MENU: {START: GameState.PLAYING},
    GameState.PLAYING: {START: GameState.PLAYING, CRASH: GameState.GAME_OVER},
    GameState.GAME_OVER: {START: GameState.PLAYING},
}


def can_transition(state: GameState, event: str) -> bool:
    return event in TRANSITIONS.get(state, {})


def next_state(state: GameState, event: str) -> GameState:
    """Resolve the target state. Raises InvalidTransitionError if not allowed."""
    try:
        return TRANSITIONS[state][event]
    except KeyError:
        raise InvalidTransitionError(state, event) from None


def is_simulating(state: GameState) -> bool:
    """Only PLAYING advances the world."""
    return state is GameState.PLAYING
