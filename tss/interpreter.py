from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

from tss import LispValue
from tss.config import recursion_limit
from tss.evaluation.evaluator import evaluate
from tss.printer import to_display
from tss.reader.line_source import LineSource
from tss.reader.parser import read
from tss.reader.tokenizer import Tokenizer
from tss.types.environment import Environment, OutputSink

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Reads and evaluates tss programs.
    Keeps one Environment across calls, so definitions persist between them.
    """

    def __init__(self, output: OutputSink | None = None):
        self.env: Environment = Environment(output)

    @property
    def output(self) -> OutputSink:
        return self.env.output

    def run(self, source: LineSource) -> Iterator[LispValue]:
        """Parse and evaluate top-level forms one at a time, yielding each result."""
        tokenizer = Tokenizer(source)
        while tokenizer.peek() is not None:
            tree = read(tokenizer)
            logger.debug("evaluating top-level form %r", tree)
            with recursion_limit():
                result = evaluate(tree, self.env)
            yield result

    def eval(self, code: str) -> LispValue:
        """Evaluate every form in `code`.

        Returns None for no forms, the result for a single form, else the list
        of results.
        """
        results = list(self.run(LineSource.from_string(code)))
        if not results:
            return None
        if len(results) == 1:
            return results[0]
        return results

    def run_file(self, path: str | Path) -> None:
        """Run a program file, printing every non-null top-level result."""
        logger.info("running %s", path)
        for result in self.run(LineSource.from_file(path)):
            if result is not None:
                self.output(to_display(result))
