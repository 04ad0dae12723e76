"""Record a few checks, print them, and save them for `asserting report`."""

from pathlib import Path

from asserting import Assertion, Errored, Location, Suite, assert_equal, assert_that, get_styler
from asserting.results import write_results


def main() -> None:
    one, two = 1, 2
    suite = Suite("arithmetic")
    suite.add(assert_that(one + one == 2, one))
    suite.add(assert_equal(one, two))

    def ratio(a: int, b: int) -> float:
        return a / b

    try:
        suite.add(assert_that(ratio(1, 0) < 1))
    except ZeroDivisionError as exc:
        suite.add(
            Assertion("ratio(1, 0) < 1", at=Location(__file__, 19), value=Errored(exc))
        )

    print(suite.render(get_styler()), end="")
    write_results(Path("results.yaml"), [suite])


if __name__ == "__main__":
    main()
