from __future__ import annotations

import logging
from typing import Iterable

from numcat.core.config import CatConfig
from numcat.core.errors import OpenError
from numcat.core.models import RunReport
from numcat.services.formatter import format_line
from numcat.services.interfaces import InputResolver, OutputSink

logger = logging.getLogger("numcat.runner")


class CatRunner:
    """Streams every configured input to the sink, numbering lines per the config.

    Open failures are reported through ``sink.warn`` and recorded in the
    returned report; the run continues with the next input. A ``ReadError``
    raised while streaming an input propagates and ends the run.
    """

    def __init__(
        self,
        config: CatConfig,
        resolver: InputResolver,
        sink: OutputSink,
    ) -> None:
        self.config = config.validated()
        self.resolver = resolver
        self.sink = sink

    def _emit(self, lines: Iterable[str]) -> int:
        number_all = self.config.number_all
        number_nonblank = self.config.number_nonblank
        line_count = 0
        written = 0
        for line in lines:
            if not (number_nonblank and not line):
                line_count += 1
            show_line = number_all or (number_nonblank and bool(line))
            self.sink.write_line(format_line(line_count, line, show_line))
            written += 1
        return written

    def run(self) -> RunReport:
        report = RunReport()
        for name in self.config.inputs:
            try:
                source = self.resolver.open(name)
            except OpenError as e:
                logger.debug("Skipping %s: %s", name, e.reason)
                report.failures.append(e)
                self.sink.warn(f"Failed to open {name}: {e.reason}")
                continue

            with source as lines:
                written = self._emit(lines)
            logger.debug("Finished %s (%d lines)", name, written)
            report.processed.append(name)
            report.lines_written += written
        return report
