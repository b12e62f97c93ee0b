from pathlib import Path
from typing import Dict, FrozenSet, Optional, Protocol

import lizard
from lizard_languages import get_reader_for

from cyclo.errors import FilesystemFailureError, StatisticsUnavailableError
from cyclo.services.languages import LanguageTag

# Names lizard's readers advertise for each language we classify.
LIZARD_LANGUAGE_NAMES: Dict[LanguageTag, FrozenSet[str]] = {
    LanguageTag.C: frozenset({"c", "cpp"}),
    LanguageTag.CPP: frozenset({"cpp"}),
    LanguageTag.PYTHON: frozenset({"python"}),
    LanguageTag.JAVASCRIPT: frozenset({"javascript", "js"}),
}


class LineStatistics(Protocol):
    def get_code_lines(self, path: str, language: LanguageTag) -> Optional[int]:
        ...


class LizardLineStatistics:
    """Code-line counts from lizard, restricted to the classified language."""

    def get_code_lines(self, path: str, language: LanguageTag) -> Optional[int]:
        reader = get_reader_for(path)
        if reader is None:
            return None

        reader_names = set(getattr(reader, "language_names", ()))
        if not reader_names & LIZARD_LANGUAGE_NAMES[language]:
            return None

        file_info = lizard.analyze_file(path)
        return file_info.nloc


_line_statistics = None

def get_line_statistics() -> LineStatistics:
    global _line_statistics
    if _line_statistics is None:
        _line_statistics = LizardLineStatistics()
    return _line_statistics


def count_lines(path: Path, language: LanguageTag, stats: Optional[LineStatistics] = None) -> int:
    """
    Ask the statistics service for the code lines of exactly one file.

    No answer for the path/language pair is reported as
    StatisticsUnavailableError, so the caller can skip the file.
    """
    service = stats if stats is not None else get_line_statistics()
    try:
        nloc = service.get_code_lines(str(path), language)
    except OSError as e:
        raise FilesystemFailureError(str(path), e.strerror or str(e)) from e

    if nloc is None:
        raise StatisticsUnavailableError(str(path), language.value)
    return int(nloc)
