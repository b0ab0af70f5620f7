"""ClassicPass: secure random password generator with a three-level strength rating."""

from .generator import generate, generate_from, GenerationOptions, InvalidLengthError
from .score import classify, score_password

__version__ = "1.0.0"
