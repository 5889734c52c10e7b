NAVIGATION_TIMEOUT = 60000


class PageObject:
    """A single screen of the web UI, bound to a Playwright page."""

    def __init__(self, page, url=None):
        self.page = page
        self.url = url or page.url

    def open(self):
        """Navigates to the URL of this page object."""
        self.page.goto(self.url, timeout=NAVIGATION_TIMEOUT)
        return self

    def __repr__(self):
        return f"{type(self).__name__}({self.url!r})"
