"""Classic algorithms and data structures: number theory, recursion, sorting,
lists, stacks, queues, trees, graphs and small puzzles."""

__version__ = "0.1.0"