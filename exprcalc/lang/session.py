"""Session control for the expression language. Evaluates expressions either from a file (one per line) or one at a
time from the command line/interactive shell, and collects their formatted results.
"""

import math

from exprcalc.engine.evaluator import Evaluator
from exprcalc.engine.values import format_value, is_number
from exprcalc.lang.error import GenericException


class Session:
    """Governs a session: parses lines as they are added and evaluates them when run is called."""
    COMMENT = ";;"
    DEFAULT_PRECISION = 4

    def __init__(self, error_handler, path=None, precision=DEFAULT_PRECISION, show_tree=False, evaluator=None):
        """path is the file to read expressions from. If None, expressions are expected to be added one by one."""
        self.error_handler = error_handler
        self.path = path                  # used for error messages
        self.precision = precision        # decimal places shown for non-integral numbers
        self.show_tree = show_tree        # whether or not to print each parsed AST
        self.evaluator = evaluator if evaluator is not None else Evaluator()

        self.to_exec = {}   # dict of line num: (expr, tree) to evaluate
        self.results = []   # formatted results, oldest first

        if path is not None:
            self.error_handler.register_file(path)

            try:
                with open(path, "r") as file:
                    lines = list(file)
            except OSError:
                raise GenericException(f"'{path}' could not be opened", diagnosis=False)

            for line_num, line in enumerate(lines, start=1):
                line = self.preprocess_line(line)
                if line:
                    self.add(line, line_num)

    @staticmethod
    def preprocess_line(line):
        """Removes comments and surrounding whitespace from a line."""
        if Session.COMMENT in line:
            line = line[:line.index(Session.COMMENT)]
        return line.strip()

    def _register(self, expr, line_num):
        if self.path is not None:
            self.error_handler.register_line(self.path, expr, line_num)

    def _unregister(self):
        if self.path is not None:
            self.error_handler.remove_line(self.path)

    def add(self, expr, line_num):
        """Parses expr and queues it for evaluation. Evaluation is delayed until run is called."""
        if not expr or expr.isspace():
            raise GenericException("no input provided", diagnosis=False)

        self._register(expr, line_num)  # in case error is raised

        tree = self.evaluator.parse(expr)
        if self.show_tree:
            print(tree.display())
        self.to_exec[line_num] = (expr, tree)

        self._unregister()  # error was not raised

    def run(self):
        """Evaluates queued expressions in order and stores their formatted results. Will raise any errors that are
        encountered.
        """
        for line_num, (expr, tree) in list(self.to_exec.items()):
            self._register(expr, line_num)

            try:
                value = self.evaluator.run(tree, expr)
            finally:
                del self.to_exec[line_num]

            if is_number(value) and not math.isfinite(value):
                self.error_handler.warn(f"'{expr}' does not have a finite result", diagnosis=False)

            self.results.append(format_value(value, self.precision))
            self._unregister()

    def pop(self):
        """Removes and returns the oldest result."""
        return self.results.pop(0)
