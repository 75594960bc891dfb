"""Binary trees of integers: nodes, traversals, metrics, ASCII rendering and demo scenarios."""

__version__ = "0.1.0"