from tilitoli.engine.gameimage.mapper import position

__all__ = ["position"]
