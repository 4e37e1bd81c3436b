"""
Input commands - the discrete actions the input layer sends to a session
"""

from enum import Enum, auto


class Direction(Enum):
    """Move directions as (dx, dy)"""
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)


class Command(Enum):
    """Commands accepted by a GameSession"""
    MOVE_UP = auto()
    MOVE_DOWN = auto()
    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()
    RESTART = auto()
    TOGGLE_FOG = auto()


MOVE_COMMANDS = {
    Command.MOVE_UP: Direction.UP,
    Command.MOVE_DOWN: Direction.DOWN,
    Command.MOVE_LEFT: Direction.LEFT,
    Command.MOVE_RIGHT: Direction.RIGHT,
}


def dispatch(session, command):
    """
    Apply one command to a session

    Args:
        session: GameSession
        command: Command enum value

    Returns:
        For moves, True if the move was accepted; None otherwise
    """
    if not isinstance(command, Command):
        raise ValueError(f"unknown command: {command!r}")

    if command in MOVE_COMMANDS:
        return session.move(MOVE_COMMANDS[command])
    elif command == Command.RESTART:
        session.restart()
    elif command == Command.TOGGLE_FOG:
        session.toggle_fog()
    return None
