"""
Line-oriented read-eval-print loop.

Protocol: plain text over stdin/stdout.
- Input: one expression per line.
- Output: the prompt, then for each line the printed result, a newline and
  the prompt again. The session ends when input is exhausted.

Host failures that escape the evaluator (division by zero, stack
exhaustion) are reported as error values so the session survives them.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence, TextIO

from minilisp import __version__, config
from minilisp.interpreter import Interpreter
from minilisp.errors import ConfigError

logger = logging.getLogger(__name__)


class Repl:
    def __init__(
        self,
        interpreter: Interpreter | None = None,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        prompt: str = config.DEFAULT_PROMPT,
    ):
        # Keep a single interpreter to maintain session state
        self.interp = interpreter if interpreter is not None else Interpreter()
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.prompt = prompt

    def eval_line(self, line: str) -> str:
        try:
            return self.interp.eval_print(line)
        except ZeroDivisionError as ex:
            logger.warning("host arithmetic error in %r: %s", line, ex)
            return f"<error: {ex}>"
        except RecursionError as ex:
            logger.warning("stack exhausted evaluating %r", line)
            return f"<error: {ex}>"

    def run(self) -> int:
        logger.debug("session started")
        self.stdout.write(self.prompt)
        self.stdout.flush()
        for line in self.stdin:
            self.stdout.write(self.eval_line(line.rstrip("\r\n")))
            self.stdout.write("\n" + self.prompt)
            self.stdout.flush()
        logger.debug("session ended: input closed")
        return 0


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="minilisp",
        description="Read one s-expression per line from stdin, print its value.",
    )
    parser.add_argument("--prompt", default=None, help="prompt string (default: $MINILISP_PROMPT or '> ')")
    parser.add_argument("--log-level", default=None, help="logging level name (default: $MINILISP_LOG_LEVEL or WARNING)")
    parser.add_argument(
        "--recursion-limit",
        default=None,
        help="host recursion limit for deeply recursive programs (default: $MINILISP_RECURSION_LIMIT or 10000)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    try:
        level = config.parse_log_level(args.log_level) if args.log_level else config.get_log_level()
        limit = (
            config.parse_recursion_limit(args.recursion_limit)
            if args.recursion_limit
            else config.get_recursion_limit()
        )
    except ConfigError as ex:
        parser.error(str(ex))

    logging.basicConfig(level=level, stream=sys.stderr, format="%(levelname)s %(name)s: %(message)s")
    sys.setrecursionlimit(limit)
    logger.debug("recursion limit set to %d", limit)

    prompt = args.prompt if args.prompt is not None else config.get_prompt()
    return Repl(prompt=prompt).run()


if __name__ == "__main__":
    sys.exit(main())
