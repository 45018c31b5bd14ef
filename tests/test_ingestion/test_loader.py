"""
Unit tests for CSV loading and bulk rating quantity parsing.
"""

import pytest
from nps.ingestion.loader import load_responses_csv, parse_rating_quantities
from nps.models.errors import SurveyValidationError
from nps.survey.survey import Survey


def _write(tmp_path, name, content):
    path = tmp_path / name
    path.write_text(content)
    return str(path)


def test_load_integer_ids(tmp_path):
    """Test loading integer ids and ratings."""
    path = _write(tmp_path, "responses.csv", "respondent_id,rating\n1,9\n2,8\n3,6\n")

    pairs = load_responses_csv(path)

    assert pairs == [(1, 9), (2, 8), (3, 6)]
    assert all(type(rating) is int for _, rating in pairs)
    assert Survey.from_responses(pairs).score() == 0


def test_load_custom_columns(tmp_path):
    """Test loading string ids from custom column names."""
    path = _write(
        tmp_path,
        "export.csv",
        "customer,score,comment\nalice,10,great\nbob,3,slow\n"
    )

    pairs = load_responses_csv(path, id_column="customer", rating_column="score")

    assert pairs == [("alice", 10), ("bob", 3)]


def test_load_blank_rating(tmp_path):
    """Blank ratings load as None and are rejected by the survey."""
    path = _write(tmp_path, "responses.csv", "respondent_id,rating\n1,9\n2,\n3,7\n")

    pairs = load_responses_csv(path)
    assert pairs == [(1, 9), (2, None), (3, 7)]
    assert type(pairs[0][1]) is int

    with pytest.raises(SurveyValidationError) as exc_info:
        Survey.from_responses(pairs)

    assert exc_info.value.errors[0].respondent_id == 2
    assert exc_info.value.errors[0].rating is None


def test_load_one_bad_rating_keeps_others(tmp_path):
    """A non-numeric rating only rejects its own row."""
    path = _write(tmp_path, "responses.csv", "respondent_id,rating\n1,9\n2,abc\n3,7\n")

    pairs = load_responses_csv(path)
    assert pairs == [(1, 9), (2, "abc"), (3, 7)]

    with pytest.raises(SurveyValidationError) as exc_info:
        Survey.from_responses(pairs)

    errors = exc_info.value.errors
    assert len(errors) == 1
    assert errors[0].respondent_id == 2
    assert errors[0].rating == "abc"

    survey = Survey()
    with pytest.raises(SurveyValidationError):
        survey.add_multiple_responses(pairs)
    assert survey.respondent_ids() == [1, 3]


@pytest.mark.parametrize("cell,expected", [
    ("9", 9),
    (" 8 ", 8),
    ("10.0", 10),
    ("9.5", "9.5"),
    ("1_0", "1_0"),
    ("ten", "ten")
])
def test_load_rating_cells(tmp_path, cell, expected):
    """Integer-looking ratings become ints; anything else passes through."""
    path = _write(tmp_path, "responses.csv", f"respondent_id,rating\n1,\"{cell}\"\n")

    assert load_responses_csv(path) == [(1, expected)]


def test_load_ids_keep_leading_zeros(tmp_path):
    """Ids such as 007 and 7 stay distinct respondents."""
    path = _write(tmp_path, "responses.csv", "respondent_id,rating\n007,9\n7,3\n")

    pairs = load_responses_csv(path)
    assert pairs == [("007", 9), ("7", 3)]

    survey = Survey.from_responses(pairs)
    assert len(survey) == 2
    assert survey.get("007").rating == 9


def test_load_mixed_ids_stay_text(tmp_path):
    """One non-integer id keeps every id as text."""
    path = _write(tmp_path, "responses.csv", "respondent_id,rating\n1,9\nx2,3\n")

    assert load_responses_csv(path) == [("1", 9), ("x2", 3)]


def test_load_out_of_range_rating(tmp_path):
    """Out-of-range ratings pass through the loader unchanged."""
    path = _write(tmp_path, "responses.csv", "respondent_id,rating\n1,11\n")

    assert load_responses_csv(path) == [(1, 11)]


def test_load_missing_column(tmp_path):
    """Missing columns raise ValueError."""
    path = _write(tmp_path, "responses.csv", "id,rating\n1,9\n")

    with pytest.raises(ValueError, match="Missing column"):
        load_responses_csv(path)


def test_load_missing_file(tmp_path):
    """Missing file raises FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        load_responses_csv(str(tmp_path / "nope.csv"))


def test_parse_rating_quantities():
    """Test parsing rating:quantity entries."""
    assert parse_rating_quantities("1:2,4:1,5:2,7:8,8:10,10:10") == [
        (1, 2), (4, 1), (5, 2), (7, 8), (8, 10), (10, 10)
    ]
    assert parse_rating_quantities(" 9:3 , 0:0 ,") == [(9, 3), (0, 0)]


@pytest.mark.parametrize("text", ["", "9", "9:x", "a:1", "9:1:2", "9:-1", ","])
def test_parse_rating_quantities_invalid(text):
    """Malformed entries raise ValueError."""
    with pytest.raises(ValueError):
        parse_rating_quantities(text)


def test_parse_keeps_out_of_range_rating():
    """Rating range is checked by the survey, not the parser."""
    assert parse_rating_quantities("11:2") == [(11, 2)]


# Run tests if executed directly
if __name__ == "__main__":
    pytest.main([__file__, "-v"])
