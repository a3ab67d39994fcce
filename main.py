# Main.py
""""" Entry point for the calculator.

   Responsibilities:
   - Load configuration and set up logging
   - Evaluate a problem given on the command line, or
   - Run an interactive prompt that keeps the "result delivered" state

   The engine itself (Calculator.MathEngine) is stateless; anything that
   depends on the previous result lives in Session.
"""""
import sys
import logging

from Calculator import config_manager as config_manager, MathEngine as MathEngine
from Calculator.logging_config import configure_logging
from Calculator.Tokenizer import FIND_NUMBERS_REGEX, Operations

logger = logging.getLogger(__name__)

QUIT_COMMANDS = ("q", "quit", "exit")


def as_literal(result):
    """Render a delivered result so the tokenizer reads it back as a number.

    Results in exponent form ("1e+25") are written out in plain digits.
    """
    if FIND_NUMBERS_REGEX.fullmatch(result.lstrip("-")):
        return result
    return format(float(result), "f").rstrip("0").rstrip(".")


class Session:
    """Interactive state owned by the caller, not by the engine.

    After a result has been delivered, a line starting with an operator
    continues from that result ("*2"); anything else starts a new problem.
    """

    def __init__(self):
        self.result_delivered = False
        self.last_result = None

    def prepare(self, line):
        problem = line.strip()
        if self.result_delivered and self.last_result is not None and problem[:1] in Operations:
            problem = as_literal(self.last_result) + problem
        return problem

    def submit(self, line):
        problem = self.prepare(line)
        result = MathEngine.evaluate(problem)
        self.result_delivered = True
        self.last_result = result.value
        return problem, result


def repl(session, input_func=input):
    """Read problems until EOF or a quit command; returns the exit code."""
    print("Enter a problem ('q' to quit):")
    while True:
        try:
            line = input_func("> ")
        except EOFError:
            return 0

        if line.strip().lower() in QUIT_COMMANDS:
            return 0
        if not line.strip():
            continue

        problem, result = session.submit(line)
        print(f"{problem} = {result.display}" if result.ok else result.display)


def main(argv=None):
    """
    Load configuration and evaluate.
    - Keep this thin: no business logic here.
    """
    argv = sys.argv[1:] if argv is None else argv

    all_settings = config_manager.load_setting_value("all")
    configure_logging(all_settings["log_level"])
    logger.debug("Config loaded: %s", all_settings)

    if argv:
        result = MathEngine.evaluate(" ".join(argv))
        print(result.display)
        return 0 if result.ok else 1

    return repl(Session())


if __name__ == "__main__":
    sys.exit(main())
