from tilitoli.engine.gamecheck.checker import is_solvable, is_solved

__all__ = ["is_solvable", "is_solved"]
