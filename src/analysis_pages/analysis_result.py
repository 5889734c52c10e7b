from analysis_pages.forensics_table import TABLE_TIMEOUT, ForensicsTable
from analysis_pages.page_object import NAVIGATION_TIMEOUT, PageObject
from analysis_pages.table_rows import RowKind


class AnalysisResult(PageObject):
    """The details page of a static analysis result, with one tab per table."""

    def open_link_on_site(self, link, target_page_class):
        """Clicks the link and returns a page object of the given class for the target page."""
        link.click()
        self.page.wait_for_load_state(timeout=NAVIGATION_TIMEOUT)
        return target_page_class(self.page, self.page.url)

    def open_filter_link_on_site(self, link):
        """Clicks a filter link and returns the filtered result page."""
        return self.open_link_on_site(link, AnalysisResult)

    def open_tab(self, tab_name):
        """Selects the tab with the given name and returns the locator of its content."""
        self.page.locator(f"a[href='#{tab_name}Content']").click()
        return self.page.locator(f"#{tab_name}Content")

    def open_forensics_table(self, row_kind=RowKind.DEFAULT):
        forensics_tab = self.open_tab("forensics")
        # DataTables fills the body after the tab became visible
        forensics_tab.locator("#forensics tbody tr").first.wait_for(state="attached", timeout=TABLE_TIMEOUT)
        return ForensicsTable(forensics_tab, self, row_kind)
