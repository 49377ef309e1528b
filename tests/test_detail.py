from welfare_pipeline.detail import (
    extract_criteria,
    extract_detail,
    extract_details,
    find_criteria_container,
)

from .conftest import DETAIL_HTML, GRANT_URL, make_document


def test_extract_detail_reads_allowed_fields_and_criteria():
    result = extract_detail(make_document(DETAIL_HTML, url=GRANT_URL))

    assert result.details == {
        "Description of the Scheme": "Monthly financial assistance",
        "Eligibility": "Residents of J&K aged 60+",
    }
    assert result.criteria == {
        "Age": "60 years",
        "Income": "Below poverty line",
        "Domicile": "",
    }


def test_unrelated_keys_never_reach_details():
    details = extract_details(make_document(DETAIL_HTML))
    assert "Unrelated Field" not in details


def test_key_without_any_value_cell_is_skipped():
    details = extract_details(make_document(DETAIL_HTML))
    assert "Procedure" not in details


def test_later_rows_overwrite_earlier_values():
    html = """
    <table><tbody>
      <tr><td><b>Procedure</b></td><td>Apply offline</td></tr>
      <tr><td><b>Procedure</b></td><td><span>Apply online at the portal</span></td></tr>
    </tbody></table>
    """
    assert extract_details(make_document(html)) == {"Procedure": "Apply online at the portal"}


def test_bold_span_key_with_styled_value_span():
    html = """
    <table><tbody><tr>
      <td><span style="color: red; font-weight: 700;">Eligibility</span></td>
      <td><span style="color: black">Orphans below 18 years</span></td>
    </tr></tbody></table>
    """
    assert extract_details(make_document(html)) == {"Eligibility": "Orphans below 18 years"}


def test_criteria_use_container_after_first_one_followed_by_paragraph():
    html = """
    <div align="center"><table><tbody>
      <tr><td>Wrong</td></tr><tr><td>Table</td></tr>
    </tbody></table></div>
    <p>Intro</p>
    <div align="center"><table><tbody>
      <tr><td>Gender</td><td>Age</td></tr>
      <tr><td>Female</td><td>18-45</td></tr>
    </tbody></table></div>
    <p>Second paragraph</p>
    <div align="center"><table><tbody>
      <tr><td>Ignored</td></tr><tr><td>Too</td></tr>
    </tbody></table></div>
    """
    assert extract_criteria(make_document(html)) == {"Gender": "Female", "Age": "18-45"}


def test_criteria_empty_without_qualifying_container():
    html = """
    <div align="center"><table><tbody>
      <tr><td>Age</td></tr><tr><td>60</td></tr>
    </tbody></table></div>
    <div>not a paragraph</div>
    """
    document = make_document(html)
    assert find_criteria_container(document) is None
    assert extract_criteria(document) == {}


def test_criteria_empty_when_qualifying_container_is_last():
    html = '<div align="center">Only</div><p>Trailing paragraph</p>'
    assert extract_criteria(make_document(html)) == {}


def test_criteria_need_two_rows():
    html = """
    <div align="center">Lead</div><p>Intro</p>
    <div align="center"><table><tbody><tr><td>Age</td></tr></tbody></table></div>
    """
    assert extract_criteria(make_document(html)) == {}


def test_malformed_document_yields_empty_result():
    result = extract_detail(make_document("<html><body><td><b>Eligibility</b></td>"))
    assert result.details == {}
    assert result.criteria == {}
