from .LoginFormResponse import ButtonView, DialogView, LoginFormView
from .SubmitResponse import SubmitResponse

__all__ = [
    "ButtonView",
    "DialogView",
    "LoginFormView",
    "SubmitResponse",
]
