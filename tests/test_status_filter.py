import pytest

from core import FilterCriteria, StatusFilter


@pytest.mark.parametrize(
    "raw,expected",
    [("all", StatusFilter.ALL), ("Active", StatusFilter.ACTIVE), (" completed ", StatusFilter.COMPLETED), ("", StatusFilter.ALL), (None, StatusFilter.ALL)],
)
def test_from_string(raw, expected):
    assert StatusFilter.from_string(raw) is expected


def test_from_string_rejects_unknown():
    with pytest.raises(ValueError):
        StatusFilter.from_string("done")


def test_accepts():
    assert StatusFilter.ALL.accepts(True) and StatusFilter.ALL.accepts(False)
    assert StatusFilter.ACTIVE.accepts(False) and not StatusFilter.ACTIVE.accepts(True)
    assert StatusFilter.COMPLETED.accepts(True) and not StatusFilter.COMPLETED.accepts(False)


def test_tokens_and_labels():
    assert [f.token for f in StatusFilter] == ["all", "active", "completed"]
    assert StatusFilter.ACTIVE.label_key == "FILTER_ACTIVE"


def test_criteria_searching_ignores_whitespace():
    assert FilterCriteria().searching is False
    assert FilterCriteria(search_text="   ").searching is False
    assert FilterCriteria(search_text=" x ").searching is True
