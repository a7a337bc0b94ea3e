from tilitoli.engine.gamegrid.adjacency import neighbor_in_direction, neighbors

__all__ = ["neighbor_in_direction", "neighbors"]
