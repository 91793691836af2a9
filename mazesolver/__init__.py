"""A* maze solver: grid pathfinding with a text report and a Qt viewer."""

__version__ = "1.0.0"
