"""Exception hierarchy for the maze solver."""


class MazeSolverError(Exception):
    """Base class for all maze solver errors."""


class InvalidInputError(MazeSolverError, ValueError):
    """The maze, start or goal cannot be searched."""


class FrontierError(MazeSolverError):
    """Base class for frontier contract violations (programming errors)."""


class EmptyFrontierError(FrontierError):
    """Extraction was attempted on an empty frontier."""


class DuplicateEntryError(FrontierError):
    """A position was inserted twice; callers must update instead."""


class NotFoundError(FrontierError, KeyError):
    """An update referenced a position with no entry."""


class FinalizedRecordError(MazeSolverError, AttributeError):
    """A cost record was modified after it was finalized."""


class BrokenChainError(MazeSolverError):
    """Parent links form a cycle or point at an unknown position."""


class RecordMismatchError(FrontierError):
    """A record was filed under a position other than its own."""
