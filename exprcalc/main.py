"""Uses the expression evaluator to evaluate files of expressions, a single expression, or to run in command-line mode.
Also uses the error handling context manager. Called from the exprcalc console script.
"""

import argparse
import sys

from exprcalc.lang.error import ErrorHandler
from exprcalc.lang.session import Session
from exprcalc.lang.shell import Shell


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="exprcalc", description="Evaluates arithmetic and text expressions.")
    parser.add_argument("file", help="file of expressions to evaluate, one per line (if empty, goes to command-line "
                                     "mode)", nargs="?")
    parser.add_argument("-e", "--expr", help="evaluate a single expression and exit")
    parser.add_argument("-p", "--precision", type=int, default=Session.DEFAULT_PRECISION,
                        help="decimal places shown for non-integral numbers (default: %(default)s)")
    parser.add_argument("--tree", action="store_true", help="print the syntax tree of each expression")
    return parser.parse_args(argv)


def main(argv=None):
    """Runs the evaluator. Called from the exprcalc console script."""
    assert sys.version_info >= (3, 8), "exprcalc cannot be run with python < 3.8"

    with ErrorHandler() as error_handler:
        args = parse_args(argv)

        if args.expr is not None:
            sess = Session(error_handler, precision=args.precision, show_tree=args.tree)
            sess.add(args.expr, 1)
            sess.run()
            print(sess.pop())

        elif args.file is not None:
            sess = Session(error_handler, args.file, precision=args.precision, show_tree=args.tree)
            try:
                sess.run()
            finally:
                while sess.results:  # results evaluated before an error are still shown
                    print(sess.pop())

        else:
            Shell(Session(error_handler, precision=args.precision, show_tree=args.tree)).cmdloop()
