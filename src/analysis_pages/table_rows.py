from enum import Enum


class RowKind(Enum):
    """Supported row types of the forensics table."""

    DEFAULT = "default"
    DRY = "dry"


class GenericTableRow:
    """A single row of a table, wrapping the locator of its <tr> element."""

    def __init__(self, element, table):
        self.element = element
        self.table = table

    def cells(self):
        return self.element.locator("td")

    def cell(self, header):
        """Returns the locator of the cell shown under the given header."""
        headers = self.table.get_headers()
        if header not in headers:
            raise KeyError(f"Table has no column '{header}', headers are {headers}")
        return self.cells().nth(headers.index(header))

    def cell_text(self, header):
        return self.cell(header).inner_text().strip()

    def get_as(self, expected_class):
        """Returns this row as an instance of the expected row class."""
        if not isinstance(self, expected_class):
            raise TypeError(
                f"Row is a {type(self).__name__}, not a {expected_class.__name__}"
            )
        return self


class ForensicsTableRow(GenericTableRow):
    """Row of the default forensics table: one source file and its SCM statistics."""

    FILE = "File"
    AUTHORS = "#Authors"
    COMMITS = "#Commits"
    LAST_COMMIT = "Last Commit"
    ADDED = "Added"

    def file_name(self):
        return self.cell_text(self.FILE)

    def authors_count(self):
        return int(self.cell_text(self.AUTHORS))

    def commits_count(self):
        return int(self.cell_text(self.COMMITS))

    def modified_at(self):
        return self.cell_text(self.LAST_COMMIT)

    def added_at(self):
        return self.cell_text(self.ADDED)

    def click_file_link(self, target_class):
        """Opens the source view of the file in this row."""
        return self.table.click_link_on_site(self.cell(self.FILE).locator("a"), target_class)


class DryTableRow(GenericTableRow):
    """Row of a duplicate code table."""

    DETAILS = "Details"
    FILE = "File"
    PACKAGE = "Package"
    SEVERITY = "Severity"
    LINES = "#Lines"
    DUPLICATED_IN = "Duplicated In"
    AGE = "Age"

    def file_name(self):
        return self.cell_text(self.FILE)

    def package(self):
        return self.cell_text(self.PACKAGE)

    def severity(self):
        return self.cell_text(self.SEVERITY)

    def lines_count(self):
        return int(self.cell_text(self.LINES))

    def age(self):
        return self.cell_text(self.AGE)

    def duplicated_in(self):
        """Returns the file names of the other occurrences of the duplicated block."""
        return [text.strip() for text in self.cell(self.DUPLICATED_IN).locator("a").all_inner_texts()]

    def toggle_details(self):
        """
        Shows or hides the details row below this row.

        The rows of the owning table are rebuilt afterwards, so this row
        object must not be used again.
        """
        self.cell(self.DETAILS).locator(".details-control").click()
        self.table.update_table_rows()

    def details(self):
        """Returns the text of the opened details row that follows this row."""
        next_row = self.element.locator("xpath=./following-sibling::tr[1]")
        # a following data row carries its own details toggle
        if next_row.count() == 0 or next_row.locator(".details-control").count() > 0:
            raise LookupError(f"Details of the row for '{self.file_name()}' are not shown")
        return next_row.inner_text().strip()

    def click_severity_link(self):
        """Opens the result page filtered by the severity of this row."""
        return self.table.click_filter_link_on_site(self.cell(self.SEVERITY).locator("a"))
