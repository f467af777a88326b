import random
import string

ALPHA_LENGTH = 5
NUMERIC_LENGTH = 10


def random_alpha(length: int = ALPHA_LENGTH) -> str:
    """Random ASCII letters, mixed case."""
    return ''.join(random.choices(string.ascii_letters, k=length))


def random_numeric(length: int = NUMERIC_LENGTH) -> str:
    """Random decimal digits. Leading zeros are allowed."""
    return ''.join(random.choices(string.digits, k=length))


def random_alphanumeric() -> str:
    return random_alpha() + random_numeric()
