"""Test suite for the xyz library with one deliberately wrong expectation.

Exits with status 1.
"""

import sys

from microtest import expect_equal, run_suite, run_test_case, start_suite

from xyz import add, mul


def suite(session):
    start_suite(session, "examples/xyz/xyz_fail_suite.py")

    def test_case_xyz_add():
        expect_equal(session, add(1, 2), 3, "1+2 is 3")
        expect_equal(session, add(2, 1), 3, "2+1 is 3")

    def test_case_xyz_mul():
        expect_equal(session, mul(2, 3), 6, "2*3 is 6")
        # expect_equal(session, mul(3, 2), 6, "3*2 is 6")
        expect_equal(session, mul(3, 2), 7, "3*2 is 7")

    run_test_case(session, test_case_xyz_add, "add")
    run_test_case(session, test_case_xyz_mul, "mul")


if __name__ == "__main__":
    sys.exit(run_suite(suite, sys.argv))
