from recipe_browser.nutrients import extract_calories, sqlite_regexp_replace


def test_extract_calories_with_unit():
    assert extract_calories({"calories": "389 kcal"}) == 389


def test_extract_calories_case_variants():
    assert extract_calories({"Calorie": "12.5g"}) == 12.5
    assert extract_calories({"calorie": "about 90 kcal"}) == 90


def test_extract_calories_first_key_wins():
    assert extract_calories({"calories": "100 kcal", "Calorie": "200 kcal"}) == 100


def test_extract_calories_absent():
    assert extract_calories(None) is None
    assert extract_calories({}) is None
    assert extract_calories({"proteinContent": "5 g"}) is None


def test_extract_calories_unparseable():
    assert extract_calories({"calories": "n/a"}) is None
    assert extract_calories({"calories": ""}) is None


def test_extract_calories_non_text_value():
    assert extract_calories({"calories": 389}) is None
    assert extract_calories({"calories": ["389 kcal"]}) is None


def test_extract_calories_never_raises_on_odd_input():
    assert extract_calories("389 kcal") is None


def test_extract_calories_takes_first_token():
    # the datastore-side rule would read this as 1200
    assert extract_calories({"calories": "1,200 kcal"}) == 1


def test_extract_calories_ascii_digits_only():
    # the datastore rule strips non-ASCII digits as well
    assert extract_calories({"calories": "٣٨٩ kcal"}) is None
    assert extract_calories({"calories": "٣٨٩ / 389 kcal"}) == 389


def test_sqlite_regexp_replace_global_and_first():
    assert sqlite_regexp_replace("389 kcal", "[^0-9.]", "", "g") == "389"
    assert sqlite_regexp_replace("a1b2", "[a-z]", "", "") == "1b2"
    assert sqlite_regexp_replace(None, "[^0-9.]", "", "g") is None
