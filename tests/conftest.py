"""
Fixtures for the browser tests.

The result pages are served from memory through page.route, so the tests
only need a Playwright browser (pytest-playwright provides the page fixture).
"""

from urllib.parse import urlparse

import pytest

BASE_URL = "http://ci.test"

TOGGLE_SCRIPT = """
<script>
function toggleDetails(control) {
    var row = control.closest('tr');
    var next = row.nextElementSibling;
    if (next && next.classList.contains('details')) {
        next.remove();
        return;
    }
    var details = document.createElement('tr');
    details.className = 'details';
    details.innerHTML = '<td colspan="7">' + row.dataset.details + '</td>';
    row.after(details);
}
</script>
"""


def result_page_html(headers, rows, info, title="Analysis Result"):
    head = "".join(f"<th>{header}</th>" for header in headers)
    body = "".join(rows)
    return f"""<html><head><title>{title}</title></head><body>
<h1>{title}</h1>
<ul class="nav-tabs">
  <li><a href="#issuesContent">Issues</a></li>
  <li><a href="#forensicsContent">SCM Forensics</a></li>
</ul>
<div id="issuesContent"></div>
<div id="forensicsContent">
  <table id="forensics">
    <thead><tr>{head}</tr></thead>
    <tbody>{body}</tbody>
  </table>
  <div id="forensics_info">{info}</div>
</div>
{TOGGLE_SCRIPT}
</body></html>"""


FORENSICS_ROWS = [
    '<tr><td><a href="/source/Main.java/">Main.java</a></td><td>2</td><td>14</td><td>10/03/2020</td><td>01/02/2019</td></tr>',
    '<tr><td><a href="/source/Parser.java/">Parser.java</a></td><td>1</td><td>3</td><td>08/03/2020</td><td>05/03/2020</td></tr>',
    '<tr><td><a href="/source/Lexer.java/">Lexer.java</a></td><td>4</td><td>20</td><td>11/03/2020</td><td>01/01/2018</td></tr>',
]

DRY_ROWS = [
    '<tr data-details="Duplicated block in A.java lines 10-31">'
    '<td><span class="details-control" onclick="toggleDetails(this)">+</span></td>'
    '<td><a href="/source/A.java/">A.java</a></td><td>edu.hm</td>'
    '<td><a href="/dry/severity.HIGH/">High</a></td><td>22</td>'
    '<td><a href="/source/B.java/">B.java</a>, <a href="/source/C.java/">C.java</a></td><td>1</td></tr>',
    '<tr data-details="Duplicated block in B.java lines 3-9">'
    '<td><span class="details-control" onclick="toggleDetails(this)">+</span></td>'
    '<td><a href="/source/B.java/">B.java</a></td><td>edu.hm</td>'
    '<td><a href="/dry/severity.NORMAL/">Normal</a></td><td>7</td>'
    '<td><a href="/source/A.java/">A.java</a></td><td>3</td></tr>',
]

PAGES = {
    "/forensics/": result_page_html(
        ["File", "#Authors", "#Commits", "Last Commit", "Added"],
        FORENSICS_ROWS,
        "Showing 1 to 3 of 37 entries",
    ),
    "/dry/": result_page_html(
        ["Details", "File", "Package", "Severity", "#Lines", "Duplicated In", "Age"],
        DRY_ROWS,
        "Showing 1 to 2 of 2 entries",
    ),
    "/dry/severity.HIGH/": result_page_html(
        ["Details", "File", "Package", "Severity", "#Lines", "Duplicated In", "Age"],
        DRY_ROWS[:1],
        "Showing 1 to 1 of 1 entries",
        title="Severity High",
    ),
}


def serve(route):
    path = urlparse(route.request.url).path
    if path in PAGES:
        route.fulfill(status=200, content_type="text/html", body=PAGES[path])
    elif path.startswith("/source/"):
        name = path.split("/")[2]
        route.fulfill(status=200, content_type="text/html", body=f"<html><body><h1>Content of file {name}</h1></body></html>")
    else:
        route.fulfill(status=404, body="Not found")


@pytest.fixture
def result_site(page):
    """Routes all requests to BASE_URL to the in-memory result pages."""
    page.route(f"{BASE_URL}/**", serve)
    return BASE_URL
