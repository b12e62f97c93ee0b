from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, TextIO, Union

from cyclo.errors import FilesystemFailureError
from cyclo.services.languages import LanguageProfile


@dataclass(frozen=True)
class ComplexityEstimate:
    score: float
    function_count: int

    @property
    def mean_per_function(self) -> float:
        if self.function_count == 0:
            return 0.0
        return self.score / self.function_count


def _contains_any(line: str, markers: Iterable[str]) -> bool:
    return any(marker in line for marker in markers)


def estimate_complexity(handle: Union[TextIO, Iterable[str]], profile: LanguageProfile) -> ComplexityEstimate:
    """
    Approximate the cyclomatic complexity of one file by searching for
    decision keywords and logical operators, line by line.

    How the scan works:
    - Any line containing a comment marker is dropped, since comment text
      would throw off the keyword search. String literals that happen to
      contain a marker are dropped with it.
    - Every occurrence of a logical operator on the remaining lines counts,
      so ``a && b && c`` adds two.
    - Lines containing the function marker are counted as functions. For
      C/C++ that is ``return``: some functions have several, some none.
    - The remaining lines that contain at least one keyword each count once.

    The score is keyword lines plus operator occurrences. It is the raw sum
    for the whole file, not divided by the function count; see
    ``ComplexityEstimate.mean_per_function`` for the normalized value.
    """
    keyword_lines = 0
    logical_ops_count = 0
    function_count = 0

    for line in handle:
        if _contains_any(line, profile.comments):
            continue

        for op in profile.logical_ops:
            logical_ops_count += line.count(op)

        if profile.function_def in line:
            function_count += 1

        if _contains_any(line, profile.statements):
            keyword_lines += 1

    return ComplexityEstimate(
        score=float(keyword_lines + logical_ops_count),
        function_count=function_count,
    )


def estimate_file_complexity(path: Path, profile: LanguageProfile) -> ComplexityEstimate:
    try:
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            return estimate_complexity(f, profile)
    except OSError as e:
        raise FilesystemFailureError(str(path), e.strerror or str(e)) from e
