"""Test suite for the xyz library; every assertion holds."""

import sys

from microtest import (
    compute_result,
    expect_equal,
    expect_not_equal,
    initialize,
    run_test_case,
    start_suite,
)

from xyz import add, mul


def suite(session):
    start_suite(session, "examples/xyz/xyz_pass_suite.py")

    def test_case_xyz_add():
        expect_equal(session, add(1, 2), 3, "1+2 is 3")
        expect_equal(session, add(2, 1), 3, "2+1 is 3")

    def test_case_xyz_mul():
        expect_equal(session, mul(2, 3), 6, "2*3 is 6")
        expect_not_equal(session, mul(3, 2), 7, "3*2 is not 7")

    run_test_case(session, test_case_xyz_add, "add")
    run_test_case(session, test_case_xyz_mul, "mul")


if __name__ == "__main__":
    session = initialize(sys.argv)
    suite(session)
    sys.exit(compute_result(session))
