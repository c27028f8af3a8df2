import string

__all__ = ("UPPERCASE_LETTERS", "LOWERCASE_LETTERS", "NUMBERS", "SYMBOLS")

UPPERCASE_LETTERS = string.ascii_uppercase
LOWERCASE_LETTERS = string.ascii_lowercase
NUMBERS = string.digits
SYMBOLS = "!@#$%^&*()-_=+[{]}|;:',\\<.>/?\""
