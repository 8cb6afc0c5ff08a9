from .console import play, pick_secret, render, GameResult, WORDLE_MAX_TURNS

__all__ = ["play", "pick_secret", "render", "GameResult", "WORDLE_MAX_TURNS"]
