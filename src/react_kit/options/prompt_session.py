"""Line-based prompt session: the one input resource of a run."""

import sys
from typing import TextIO


class PromptSession:
    """Writes a question, reads one line of the answer.

    End of input yields an empty answer. Used as a context manager, the
    session is closed on exit whatever happened inside.
    """

    def __init__(self, input_stream: TextIO = None, output: TextIO = None):
        self._input = input_stream if input_stream is not None else sys.stdin
        self._output = output if output is not None else sys.stdout
        self.closed = False

    def ask(self, question: str) -> str:
        if self.closed:
            raise ValueError("Prompt session is closed")
        self._output.write(question)
        self._output.flush()
        line = self._input.readline()
        return line.rstrip("\r\n")

    def close(self):
        self.closed = True

    def __enter__(self) -> "PromptSession":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        self.close()
        return False
