from astroprompt.paths import truncate


def test_truncate_smaller_path_than_provided_length():
    assert truncate("~/starship", 3) == "~/starship"


def test_truncate_same_path_as_provided_length():
    assert truncate("~/starship/engines", 3) == "~/starship/engines"


def test_truncate_slightly_larger_path_than_provided_length():
    assert truncate("~/starship/engines/booster", 3) == "starship/engines/booster"


def test_truncate_larger_path_than_provided_length():
    assert truncate("~/starship/engines/booster/rocket", 3) == "engines/booster/rocket"


def test_truncate_same_path_as_provided_length_from_root():
    assert truncate("/starship/engines/booster", 3) == "/starship/engines/booster"


def test_truncate_larger_path_than_provided_length_from_root():
    assert truncate("/starship/engines/booster/rocket", 3) == "engines/booster/rocket"


def test_zero_length_leaves_path_alone():
    assert truncate("/starship/engines/booster/rocket", 0) == "/starship/engines/booster/rocket"