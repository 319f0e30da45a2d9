from .signup_controller import SignupController
from .login_controller import LoginController

__all__ = [
    "SignupController",
    "LoginController",
]
