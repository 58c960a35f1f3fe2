"""Handles interactive/command-line mode for the expression evaluator. Uses cmd as backend."""

import cmd

from exprcalc.functions.registry import USAGE
from exprcalc.lang.error import GenericException


class Shell(cmd.Cmd):
    """Expression evaluator shell."""
    intro = ("Expression evaluator :: Python backend\n"
             f"Built-in functions: {', '.join(USAGE)}\n"
             "Type 'help' for more information or 'exit' to quit.")
    prompt = "> "

    def __init__(self, sess, *args, **kwargs):
        super().__init__(*args, **kwargs)

        self.sess = sess
        self.sess.error_handler.fatal = False  # a bad expression should never end the session

        self.line_num = 0

    def default(self, line):
        """Evaluates an arbitrary expression."""
        with self.sess.error_handler:  # needed because cmd.Cmd automatically exits on Exception
            self.line_num += 1

            self.sess.add(line, self.line_num)
            self.sess.run()

            while self.sess.results:
                print(self.sess.pop())

    def do_help(self, arg):
        """Doesnt return docs, but rather a short intro and the usage of each built-in function."""
        if arg in USAGE:
            print(USAGE[arg])
            return

        elif arg:
            with self.sess.error_handler:
                raise GenericException(f"unknown function: '{arg}'", diagnosis=False)
            return

        print("Welcome to the expression evaluator!\n\n"
              "Type an arithmetic expression such as '1 + 2 * (3 - 4) % 5' to evaluate it. \n"
              "Numbers may use decimals and exponents (1.5, 6.02E23) and text is written \n"
              "in double quotes (\"Hello\"). The following functions are built in:\n")
        for usage in USAGE.values():
            print(f"  {usage}")

    def emptyline(self):
        """Do not repeat previous command on empty line: report it instead."""
        with self.sess.error_handler:
            raise GenericException("no input provided", diagnosis=False)

    def do_EOF(self, arg):
        """Exits evaluator."""
        print()
        return True

    def do_exit(self, arg):
        """Exits evaluator. Anything after 'exit' is evaluated as an expression, e.g. 'exit(1)'."""
        if arg:
            self.default("exit" + arg)
            return False
        return True
