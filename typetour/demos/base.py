#!/usr/bin/env python3
"""
Base class for lessons.

A lesson shows four sections: explanation, the sample code, the output of
running that code, and key takeaways. The code section is read from the
samples' real source, so what is shown is exactly what runs.
"""

import inspect
from abc import abstractmethod
from textwrap import dedent
from typing import List, Tuple

from ..catalog import Demonstration
from ..ui import Renderer


class Lesson(Demonstration):
    """A demonstration made of explanation, code, output and takeaways"""

    topic: str = ''
    explanation: str = ''
    takeaways: str = ''
    samples: Tuple[object, ...] = ()   # Classes/functions whose source is shown

    def __init__(self, renderer: Renderer):
        self.renderer = renderer

    def source(self) -> str:
        """Source code of the samples, in order"""
        return '\n\n'.join(dedent(inspect.getsource(sample)).rstrip() for sample in self.samples)

    @abstractmethod
    def execute(self) -> List[str]:
        """Run the samples and return the lines they produce"""
        pass

    def run(self) -> None:
        self.renderer.explanation(dedent(self.explanation))
        if self.samples:
            self.renderer.code(self.source())
        self.renderer.output(self.execute())
        self.renderer.takeaways(dedent(self.takeaways))
