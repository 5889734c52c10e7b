import argparse
import csv
import json
import os


def load_snapshot(input_file):
    with open(input_file, "r", encoding="utf-8") as f:
        return json.load(f)


def write_csv(data, output_filename):
    """Writes the rows of a table snapshot as CSV, one column per table header."""
    headers = data["headers"]
    with open(output_filename, "w", newline="", encoding="utf-8") as csvfile:
        writer = csv.writer(csvfile)
        writer.writerow(headers)
        for cells in data["rows"]:
            # Details rows span all columns, pad them to the header width
            writer.writerow((cells + [""] * len(headers))[:len(headers)])


def run(input_file, output_filename=None):
    if not os.path.exists(input_file):
        print(f"Error: {input_file} not found.")
        return None

    print(f"Reading from: {input_file}")
    try:
        data = load_snapshot(input_file)
    except Exception as e:
        print(f"Error reading snapshot {input_file}: {e}")
        return None
    if output_filename is None:
        output_filename = os.path.splitext(input_file)[0] + ".csv"

    try:
        write_csv(data, output_filename)
        print(f"Successfully converted {len(data['rows'])} rows to CSV.")
        print(f"Output saved to: {output_filename}")
    except Exception as e:
        print(f"Error writing CSV: {e}")
        return None
    return output_filename


def main(argv=None):
    parser = argparse.ArgumentParser(description="Convert a forensics table snapshot to CSV")
    parser.add_argument("snapshot", help="JSON snapshot written by inspect_table.py")
    parser.add_argument("--output", help="CSV file to write (defaults to the snapshot name)")
    args = parser.parse_args(argv)
    return 0 if run(args.snapshot, args.output) else 1


if __name__ == "__main__":
    raise SystemExit(main())
