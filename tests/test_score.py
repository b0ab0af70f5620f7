from classicpass.score import classify, score_password, variety_checks, WEAK, MEDIUM, STRONG, LABELS


def test_short_passwords_are_weak():
    assert classify("") == WEAK
    assert classify("short1!") == WEAK
    # full variety does not rescue a short password
    assert classify("Ab1!xyz") == WEAK

def test_single_class_long_password_is_weak():
    result = score_password("alllowercase")
    assert result["score"] == 0
    assert classify("alllowercase") == WEAK

def test_mixed_case_needs_both_cases():
    assert score_password("ALLUPPERCASE")["score"] == 0
    assert score_password("lowerUPPER")["score"] == 1

def test_medium_with_two_points():
    assert score_password("Abcdefgh1")["score"] == 2
    assert classify("Abcdefgh1") == MEDIUM
    assert classify("abcdefg1!") == MEDIUM

def test_full_score_below_twelve_is_medium():
    assert score_password("Abcdef12!@")["score"] == 3
    assert classify("Abcdef12!@") == MEDIUM

def test_strong():
    assert classify("Abcdefgh1234!@") == STRONG
    assert classify("Abcdefgh12!@") == STRONG  # exactly 12

def test_non_ascii_counts_as_symbol():
    result = score_password("Abcdefgh1234é")
    assert result["score"] == 3
    assert result["label"] == STRONG
    # non-ASCII letters are not upper/lower case letters here
    assert score_password("ÄBCDEFGHIJKL")["score"] == 1

def test_score_password_shape():
    result = score_password("Abcdefgh1")
    assert result == {
        "password": "Abcdefgh1",
        "length": 9,
        "score": 2,
        "label": MEDIUM,
        "checks": {"mixed_case": True, "digit": True, "symbol": False},
    }
    assert result["label"] in LABELS

def test_classify_matches_score_label():
    for pw in ("", "abc", "alllowercase", "Abcdefgh1", "Abcdef12!@", "Abcdefgh1234!@", "12345678!"):
        assert classify(pw) == score_password(pw)["label"]

def test_variety_checks_drive_the_score():
    assert variety_checks("") == {"mixed_case": False, "digit": False, "symbol": False}
    assert variety_checks("aB") == {"mixed_case": True, "digit": False, "symbol": False}
    assert variety_checks("9 é") == {"mixed_case": False, "digit": True, "symbol": True}
    for pw in ("alllowercase", "Abcdefgh1", "Abcdef12!@", "ÄBCDEFGHIJKL"):
        result = score_password(pw)
        assert result["score"] == sum(result["checks"].values())
