import argparse
import json
import os

from playwright.sync_api import sync_playwright

from analysis_pages import AnalysisResult, RowKind

RESULT_URL = os.environ.get("RESULT_URL", "http://localhost:8080/job/pipeline/lastBuild/analysis/")
HEADLESS = os.environ.get("HEADLESS", "true") != "false"


def snapshot(table, url):
    """Collects the current content of a forensics table as plain data."""
    return {
        "url": url,
        "headers": table.get_headers(),
        "total": table.get_total(),
        "rows": [
            [text.strip() for text in row.cells().all_inner_texts()]
            for row in table.get_table_rows()
        ],
    }


def inspect(url, row_kind, output_path=None):
    with sync_playwright() as p:
        browser = p.chromium.launch(headless=HEADLESS)
        context = browser.new_context(ignore_https_errors=True)
        page = context.new_page()
        try:
            print(f"Navigating to {url}...")
            result = AnalysisResult(page, url).open()
            table = result.open_forensics_table(row_kind)

            data = snapshot(table, url)
            print(f"Headers ({table.get_header_size()}): {', '.join(data['headers'])}")
            print(f"Total: {data['total']}")
            print(f"Found {table.get_size()} rows on this page.")
            for i, cells in enumerate(data["rows"]):
                print(f"--- Row {i} ---")
                for header, text in zip(data["headers"], cells):
                    print(f"  {header}: {text}")

            if output_path:
                with open(output_path, "w", encoding="utf-8") as f:
                    json.dump(data, f, indent=2)
                print(f"Snapshot saved to: {output_path}")
            return data
        except Exception as e:
            print(f"Error inspecting {url}: {e}")
            return None
        finally:
            browser.close()


def main(argv=None):
    parser = argparse.ArgumentParser(description="Print the forensics table of an analysis result page")
    parser.add_argument("--url", default=RESULT_URL, help="URL of the analysis result page")
    parser.add_argument("--kind", default=RowKind.DEFAULT.value, choices=[kind.value for kind in RowKind], help="Row type of the table")
    parser.add_argument("--output", help="Write a JSON snapshot of the table to this file")
    args = parser.parse_args(argv)

    data = inspect(args.url, RowKind(args.kind), args.output)
    return 0 if data is not None else 1


if __name__ == "__main__":
    raise SystemExit(main())
