from .wine import load_wine_task

__all__ = ["load_wine_task"]
