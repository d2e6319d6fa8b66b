__all__ = [
    "verify_password",
    "get_password_hash",
    "create_access_token",
    "authenticate_user",
    "get_current_user",
    "require_mentor",
    "require_mentee",
    "oauth2_scheme",
]


def __getattr__(name):
    if name in __all__:
        from . import security as _security
        return getattr(_security, name)
    raise AttributeError(f"module 'app.utils' has no attribute '{name}'")
