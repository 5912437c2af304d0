"""Errors raised when a caller breaks the rules of the board."""


class GameError(RuntimeError):
    """An illegal operation on a board or move, e.g. an illegal move or undo."""


def error(message, *args):
    """Return a GameError whose message is MESSAGE % ARGS.

    Intended usage is ``raise error("Illegal move: %s", move)``.
    """
    if args:
        message = message % args
    return GameError(message)
