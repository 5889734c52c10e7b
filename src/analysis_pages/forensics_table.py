from analysis_pages.table_rows import DryTableRow, ForensicsTableRow, RowKind

TABLE_TIMEOUT = 30000

ROW_CLASSES = {
    RowKind.DEFAULT: ForensicsTableRow,
    RowKind.DRY: DryTableRow,
}


def parse_total(table_info):
    """
    Extracts the total number of entries from a DataTables info caption.

    "Showing 1 to 10 of 37 entries" -> 37
    """
    _, separator, rest = table_info.partition("of ")
    if not separator:
        raise ValueError(f"Unexpected table info: '{table_info}'")
    return int(rest.split(" ")[0])


class ForensicsTable:
    """The forensics table shown in a tab of an AnalysisResult page."""

    def __init__(self, forensics_tab, result_details_page, row_kind=RowKind.DEFAULT):
        self.forensics_tab = forensics_tab
        self.result_details_page = result_details_page
        self.row_kind = RowKind(row_kind)
        self.table_rows = []

        self.table_element = forensics_tab.locator("#forensics")
        # Locators are lazy, fail here when the tab holds no table
        self.table_element.wait_for(state="attached", timeout=TABLE_TIMEOUT)
        self.headers = [
            header.strip()
            for header in self.table_element.locator("thead tr th").all_inner_texts()
        ]
        self.update_table_rows()

    def click_link_on_site(self, link, target_page_class):
        """Clicks a link of the table and returns the page object of the target page."""
        return self.result_details_page.open_link_on_site(link, target_page_class)

    def click_filter_link_on_site(self, link):
        """Clicks a link that opens a filtered AnalysisResult and returns it."""
        return self.result_details_page.open_filter_link_on_site(link)

    def get_total(self):
        table_info = self.forensics_tab.locator("#forensics_info").inner_text()
        return parse_total(table_info)

    def update_table_rows(self):
        """Rebuilds the rows from the DOM, e.g. after a details row has been toggled."""
        row_class = ROW_CLASSES[self.row_kind]
        self.table_rows = [
            row_class(element, self)
            for element in self.table_element.locator("tbody tr").all()
        ]

    def get_header_size(self):
        return len(self.headers)

    def get_size(self):
        return len(self.table_rows)

    def get_table_rows(self):
        return self.table_rows

    def get_headers(self):
        return self.headers

    def get_row_as(self, row, expected_class):
        """Returns the row at the given position as an instance of the expected row class."""
        return self.table_rows[row].get_as(expected_class)
