from .policy import PasswordPolicy

__all__ = ("PasswordPolicy",)
