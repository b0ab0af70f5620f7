import re

WEAK = "Weak"
MEDIUM = "Medium"
STRONG = "Strong"
LABELS = (WEAK, MEDIUM, STRONG)

MIN_MEDIUM_LENGTH = 8
MIN_STRONG_LENGTH = 12


def variety_checks(password: str) -> dict:
    """Which of the three variety points a password earns."""
    return {
        "mixed_case": bool(re.search(r"[a-z]", password) and re.search(r"[A-Z]", password)),
        "digit": bool(re.search(r"[0-9]", password)),
        # anything outside [A-Za-z0-9], non-ASCII included
        "symbol": bool(re.search(r"[^a-zA-Z0-9]", password)),
    }


def score_password(password: str) -> dict:
    """
    Scores the variety of a password on a scale of 0–3 and returns both score and label.
    """

    checks = variety_checks(password)
    score = sum(checks.values())
    length = len(password)

    # --- Strength label ---
    if length < MIN_MEDIUM_LENGTH:
        label = WEAK
    elif score == 3 and length >= MIN_STRONG_LENGTH:
        label = STRONG
    elif score >= 2:
        label = MEDIUM
    else:
        label = WEAK

    return {
        "password": password,
        "length": length,
        "score": score,
        "label": label,
        "checks": checks,
    }


def classify(password: str) -> str:
    """Return the coarse strength label: "Weak", "Medium" or "Strong"."""
    if len(password) < MIN_MEDIUM_LENGTH:
        return WEAK
    return score_password(password)["label"]
