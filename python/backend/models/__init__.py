from backend.models.board import BlankNotHomeError, Position, PuzzleBoard

__all__ = ["BlankNotHomeError", "Position", "PuzzleBoard"]
