from .state import DisplayState, reconstruct_display_state
from .tokens import Action, NavToken, parse_token

__all__ = [
    "Action",
    "DisplayState",
    "NavToken",
    "parse_token",
    "reconstruct_display_state",
]
