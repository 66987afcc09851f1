import pytest

from wakabox.service.date_extract import extract_date, extract_year_last


@pytest.mark.parametrize(
    "name, expected",
    [
        ("2024-01-05", "2024-01-05"),
        ("2024.1.5", "2024-01-05"),
        ("2024/01/05 journal", "2024-01-05"),
        ("2024_01_05", "2024-01-05"),
        ("2024年1月5日", "2024-01-05"),
        ("令和6年1月5日", "2024-01-05"),
        ("令和元年5月1日", "2019-05-01"),
        ("平成31年4月30日", "2019-04-30"),
        ("1-5-2024", "2024-01-05"),
        ("12_31_2023", "2023-12-31"),
    ],
)
def test_extract_date_normalizes_supported_names(name, expected):
    assert extract_date(name) == expected


@pytest.mark.parametrize("name", ["meeting notes", "2024-13-01", "2023-02-30"])
def test_extract_date_rejects_unknown_or_invalid(name):
    assert extract_date(name) is None


def test_custom_extractors_replace_defaults():
    assert extract_date("2024-01-05", extractors=[extract_year_last]) is None
    assert extract_date("x", extractors=[lambda _: "2020-02-02"]) == "2020-02-02"
