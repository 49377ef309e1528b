from __future__ import annotations

import pytest

from welfare_pipeline.config import PipelineConfig
from welfare_pipeline.document import Document
from welfare_pipeline.exceptions import NavigationError


LISTING_URL = "https://socialwelfarekashmir.jk.gov.in/welfareschemes.html"
GRANT_URL = "https://socialwelfarekashmir.jk.gov.in/schemes/grant.html"
OLD_AGE_URL = "https://socialwelfarekashmir.jk.gov.in/schemes/old-age.html"
WIDOW_URL = "https://other.example.org/widow.html"

LISTING_HTML = """
<html><body>
<table><tbody>
  <tr><td>Welcome to the department</td><td><a href="/orphan.html">Orphan link</a></td></tr>
  <tr><td><b>A.) Cash Assistance</b></td></tr>
  <tr><td><a href="schemes/grant.html">Grant</a></td>
      <td><a href="schemes/grant.html">Grant (Renewal)</a></td></tr>
  <tr><td><b>B.) Empty Section:-</b></td></tr>
  <tr><td><b>C.)\tPensions\n</b></td></tr>
  <tr><td><a href="schemes/old-age.html">1. Old Age Pension</a></td></tr>
  <tr><td><a href="https://other.example.org/widow.html">2) Widow Pension -</a></td></tr>
</tbody></table>
</body></html>
"""

DETAIL_HTML = """
<html><body>
<table><tbody>
  <tr><td><span style="font-weight: 700">Description of the Scheme</span></td>
      <td><span style="font-size: 12px">Monthly financial
 assistance</span></td></tr>
  <tr><td><b>Eligibility</b></td><td>Residents of J&amp;K
 aged 60+</td></tr>
  <tr><td><b>Unrelated Field</b></td><td><span>ignored</span></td></tr>
  <tr><td><b>Procedure</b></td></tr>
</tbody></table>
<div align="center">Banner</div>
<div align="center">Introduction</div>
<p>Criteria for the scheme</p>
<div align="center">
  <table><tbody>
    <tr><td>Age</td><td>Income</td><td>Domicile</td></tr>
    <tr><td>60 years</td><td>Below poverty line</td></tr>
  </tbody></table>
</div>
</body></html>
"""


class FakeFetcher:
    def __init__(self, pages: dict[str, str], failures: set[str] | None = None) -> None:
        self.pages = pages
        self.failures = failures or set()
        self.calls: list[tuple[str, str]] = []

    def load(self, url: str, *, purpose: str = "detail") -> Document:
        self.calls.append((url, purpose))
        if url in self.failures or url not in self.pages:
            raise NavigationError(url, "net::ERR_NAME_NOT_RESOLVED")
        return Document.from_html(self.pages[url], url=url)


def make_document(html: str, url: str = LISTING_URL) -> Document:
    return Document.from_html(html, url=url)


@pytest.fixture
def config(tmp_path):
    return PipelineConfig(start_url=LISTING_URL, output_dir=tmp_path, listing_retries=1)


@pytest.fixture
def fetcher():
    return FakeFetcher(
        {
            LISTING_URL: LISTING_HTML,
            GRANT_URL: DETAIL_HTML,
            OLD_AGE_URL: DETAIL_HTML,
            WIDOW_URL: "<html><body><p>No tables here</p></body></html>",
        }
    )
