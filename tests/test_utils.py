import pytest

from visual_audit.utils import page_identifier, page_label, screenshot_filename


@pytest.mark.parametrize(
    "filename,expected",
    [
        ("1 Homepage.html", "Homepage"),
        ("2 Issues.html", "Issues"),
        ("3 get_involved.html", "Get Involved"),
        ("5 about us.html", "About Us"),
        ("contact.html", "Contact"),
    ],
)
def test_page_label(filename, expected):
    assert page_label(filename) == expected


def test_page_label_is_deterministic_and_has_no_underscores():
    name = "7 our_team_and_board.html"
    assert page_label(name) == page_label(name)
    assert "_" not in page_label(name)
    assert not page_label(name)[0].isdigit()


def test_screenshot_filename_replaces_whitespace():
    assert screenshot_filename("Get Involved") == "Get-Involved.png"
    assert screenshot_filename("Homepage") == "Homepage.png"


def test_page_identifier():
    assert page_identifier("Homepage") == "homepage"
    assert page_identifier("Get Involved") == "get-involved"
