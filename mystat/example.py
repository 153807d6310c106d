"""Print a sample result of ``double_and_add_one``."""

from mystat.calc import double_and_add_one


def main(argv=None):
    """Print ``double_and_add_one(2)`` and return 0."""
    print(f"mystat::double_and_add_one(2) == {double_and_add_one(2)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())