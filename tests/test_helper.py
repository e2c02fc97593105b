from sumcc.helper import error_message


def test_single_line():
    assert error_message("1*2", 1, "can not tokenize") == "1*2\n ^ can not tokenize\n"


def test_renders_only_the_failing_line():
    expression = "1\n+\n*"
    assert error_message(expression, 4, "can not tokenize") == "*\n^ can not tokenize\n"


def test_location_past_end_is_clamped():
    assert error_message("1+", 3, "not a number") == "1+\n  ^ not a number\n"


def test_without_location():
    assert error_message("", None, "the number of args is wrong") == (
        "the number of args is wrong\n"
    )
