import argparse
import os
import random
import sys
import time

import dill

from .codec import Case, DIGITS
from .consensus import consensus
from .dealer import deal
from .types import Report


class Timer:
    # This is used to measure the time of a block of code.
    def __init__(self, text, enabled=True):
        self.text = text
        self.enabled = enabled

    def __enter__(self):
        if self.enabled:
            print(self.text, end=" ", flush=True)
        self.beg = time.time()

    def __exit__(self, *info):
        self.end = time.time()
        if self.enabled:
            print("{:.3f} sec".format(self.end - self.beg))


def print_report(report: Report | None, stats: bool = False) -> None:
    if report is None:
        print("Could not find a consistent secret.")
        return
    print("=> The calculated secret (c) is:", report.secret)
    print("   Valid share keys:", list(report.valid))
    print("   Invalid share keys:", list(report.invalid))
    if stats:
        print(f"   Supported by {report.votes} of {report.total} combinations ({report.rejected} rejected)")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Shamir secret reconstruction with detection of corrupt shares")

    subparsers = parser.add_subparsers(dest="command", required=True, help="sub-command")

    parser_solve = subparsers.add_parser("solve", help="reconstruct the secret of test cases", description="Reconstruct the secret of each test case by majority vote over all k-subsets of its shares and classify the shares as valid or invalid.")
    parser_solve.add_argument("files", type=str, nargs="+", help="paths to the JSON test cases")
    parser_solve.add_argument("-j", "--jobs", type=int, default=1, help="number of worker processes, 0 for one per CPU core (default: 1)")
    parser_solve.add_argument("-r", "--report", type=str, default=None, help="path to write the reports to, keyed by the paths of the test cases (default: none)")
    parser_solve.add_argument("-s", "--stats", action="store_true", help="print the vote statistics of each test case")
    parser_solve.add_argument("-t", "--time", action="store_true", help="print the time taken by each test case")

    parser_show = subparsers.add_parser("show", help="print saved reports", description="Print the reports saved by the solve sub-command.")
    parser_show.add_argument("report", type=str, help="path to read the reports from")
    parser_show.add_argument("-s", "--stats", action="store_true", help="print the vote statistics of each test case")

    parser_deal = subparsers.add_parser("deal", help="generate a test case", description="Split a secret into n shares with threshold k and write them as a JSON test case.")
    parser_deal.add_argument("secret", type=int, help="the secret, a non-negative integer")
    parser_deal.add_argument("-n", type=int, required=True, help="number of shares")
    parser_deal.add_argument("-k", type=int, required=True, help="threshold")
    parser_deal.add_argument("-c", "--corrupt", type=int, nargs="*", default=[], help="keys of the shares to corrupt")
    parser_deal.add_argument("-b", "--base", type=int, default=None, help="base of the share values (default: random per share)")
    parser_deal.add_argument("--bits", type=int, default=64, help="bit length of the random coefficients (default: 64)")
    parser_deal.add_argument("-o", "--output", type=str, default=None, help="path to write the test case to (default: stdout)")

    # secrets and share values are arbitrary-precision, so parsing and printing them is not length limited
    if hasattr(sys, "set_int_max_str_digits"):
        sys.set_int_max_str_digits(0)

    args = parser.parse_args(argv)

    if args.command == "solve":
        if args.jobs < 0:
            parser.error("jobs must be non-negative")
        reports: dict[str, Report | None] = {}
        failed = 0
        for num, path in enumerate(args.files, 1):
            name = os.path.basename(path)
            print(f"--- Processing Test Case {num} from file: {name} ---")
            try:
                case = Case.load(path)
            except OSError as e:
                print(f"Error reading file {name}: {e}", file=sys.stderr)
                failed += 1
                continue
            except ValueError as e:
                print(f"An error occurred while processing {name}: {e}", file=sys.stderr)
                failed += 1
                continue
            with Timer("Reconstructing secret...", args.time):
                report = consensus(case.shares, case.k, args.jobs)
            print_report(report, args.stats)
            print()
            reports[path] = report

        if args.report is not None:
            with open(args.report, "wb") as report_file:
                print("Saving reports to:", args.report)
                report_file.write(dill.dumps(reports))

        if failed:
            sys.exit(1)

    elif args.command == "show":
        with open(args.report, "rb") as report_file:
            print("Loading reports from:", args.report)
            reports = dill.loads(report_file.read())

        for num, (path, report) in enumerate(reports.items(), 1):
            print(f"--- Test Case {num} from file: {path} ---")
            print_report(report, args.stats)
            print()

    elif args.command == "deal":
        if args.base is not None and not 2 <= args.base <= len(DIGITS):
            parser.error(f"base must be between 2 and {len(DIGITS)}")
        try:
            shares = deal(args.secret, args.k, args.n, args.bits, args.corrupt)
        except ValueError as e:
            parser.error(str(e))
        bases = {share.x: args.base or random.randrange(2, len(DIGITS) + 1) for share in shares}
        text = Case(args.n, args.k, shares).dumps(bases)

        if args.output is not None:
            with open(args.output, "w") as case_file:
                print("Saving test case to:", args.output)
                case_file.write(text + "\n")
        else:
            print(text)


if __name__ == "__main__":
    main()
