from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Dict, FrozenSet

from cyclo.errors import BadExtensionError


class LanguageTag(str, Enum):
    C = "c"
    CPP = "cpp"
    PYTHON = "python"
    JAVASCRIPT = "javascript"


@dataclass(frozen=True)
class LanguageProfile:
    """Marker strings used to scan one language without parsing it."""
    comments: FrozenSet[str]
    statements: FrozenSet[str]
    logical_ops: FrozenSet[str]
    function_def: str


_C_FAMILY = LanguageProfile(
    comments=frozenset({"//", "/*", "*/", "*", "///"}),
    statements=frozenset({
        "if(", "if (", "for(", "for (", "while(", "while (", "switch", "break", "goto",
    }),
    logical_ops=frozenset({"&&", "||"}),
    # There is no reliable C function marker without parsing; returns are
    # close enough on average.
    function_def="return",
)

PROFILES: Dict[LanguageTag, LanguageProfile] = {
    LanguageTag.C: _C_FAMILY,
    LanguageTag.CPP: _C_FAMILY,
    LanguageTag.PYTHON: LanguageProfile(
        comments=frozenset({"#"}),
        statements=frozenset({"if", "for", "while", "break"}),
        logical_ops=frozenset({"and", "or", "not"}),
        function_def="def ",
    ),
    LanguageTag.JAVASCRIPT: LanguageProfile(
        comments=frozenset({"//", "*/", "/*"}),
        statements=frozenset({"if", "for", "while"}),
        logical_ops=frozenset({"&&", "||"}),
        function_def="function",
    ),
}

EXTENSION_TO_LANGUAGE: Dict[str, LanguageTag] = {
    "c": LanguageTag.C,
    "cc": LanguageTag.CPP,
    "cxx": LanguageTag.CPP,
    "cpp": LanguageTag.CPP,
    "py": LanguageTag.PYTHON,
    "js": LanguageTag.JAVASCRIPT,
}


def classify(filename: str) -> LanguageTag:
    """Map a file name to its language by the text after the last dot."""
    name = Path(filename).name
    if "." not in name:
        raise BadExtensionError(name)

    extension = name.rsplit(".", 1)[1]
    try:
        return EXTENSION_TO_LANGUAGE[extension]
    except KeyError:
        raise BadExtensionError(name) from None


def get_profile(tag: LanguageTag) -> LanguageProfile:
    return PROFILES[tag]
