import re
import sys
import numpy as np

DEFAULT_INPUT = "day1.txt"
CAPACITY = 1000
INT_MIN = int(np.iinfo(np.int64).min)
INT_MAX = int(np.iinfo(np.int64).max)

INTEGER = re.compile(r"[+-]?[0-9]+")


class InputError(Exception):
    """Input file could not be opened or read."""

    def __init__(self, path, reason):
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


def parse_int(token):
    """ASCII decimal integer within int64, or None."""
    if not INTEGER.fullmatch(token):
        return None
    value = int(token)
    if not INT_MIN <= value <= INT_MAX:
        return None
    return value


def parse_pair(line):
    """Returns (left, right) or None when the line is not two integers."""
    fields = line.split()
    if len(fields) != 2:
        return None
    a, b = parse_int(fields[0]), parse_int(fields[1])
    if a is None or b is None:
        return None
    return a, b


def parse_columns(lines, capacity=CAPACITY):
    """Splits two-column lines into a left and a right list.

    Stops at the first line that is not two integers, or once `capacity`
    records are collected. Blank lines are skipped.
    """
    left, right = [], []
    for line in lines:
        if not line.strip():
            continue
        pair = parse_pair(line)
        if pair is None:
            break
        if len(left) >= capacity:
            print(f"warning: more than {capacity} records, ignoring the rest",
                  file=sys.stderr)
            break
        left.append(pair[0])
        right.append(pair[1])
    return left, right


def read_columns(path, capacity=CAPACITY):
    try:
        # non-ASCII bytes decode to U+FFFD and end the data like any bad line
        with open(path, encoding="ascii", errors="replace") as f:
            return parse_columns(f, capacity)
    except OSError as e:
        raise InputError(path, e.strerror or str(e)) from e


def sort_column(values):
    return np.sort(np.asarray(values, dtype=np.int64), kind="stable")


def paired_difference(left, right):
    """Sum of |right[i] - left[i]| after sorting both columns by value."""
    if len(left) != len(right):
        raise ValueError(f"column length mismatch: {len(left)} != {len(right)}")
    a = sort_column(left)
    b = sort_column(right)
    # differences of two int64 values can exceed int64
    diff = b.astype(object) - a.astype(object)
    return int(np.abs(diff).sum())


def format_total(total):
    return f"\n{total}\n\n"


def main(argv=None):
    args = sys.argv[1:] if argv is None else argv
    if len(args) > 1:
        print("Usage: paired-difference [input.txt]", file=sys.stderr)
        return 2
    path = args[0] if args else DEFAULT_INPUT

    try:
        left, right = read_columns(path)
    except InputError as e:
        print(f"error: cannot read input {e}", file=sys.stderr)
        return 1

    total = paired_difference(left, right)
    sys.stdout.write(format_total(total))
    return 0


if __name__ == "__main__":
    sys.exit(main())
