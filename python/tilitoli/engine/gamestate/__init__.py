from tilitoli.engine.gamestate.state import GameState
from tilitoli.engine.gamestate.ticker import ManualScheduler, Scheduler, TickHandle

__all__ = ["GameState", "ManualScheduler", "Scheduler", "TickHandle"]
