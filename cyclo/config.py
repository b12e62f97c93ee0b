from typing import Tuple

# Exact, case-sensitive suffixes of the files we know how to scan.
SUPPORTED_EXTENSIONS: Tuple[str, ...] = (
    '.c',
    '.cpp',
    '.cc',
    '.cxx',
    '.py',
    '.js',
)

HIDDEN_PREFIX = '.'

# Treemap labels are chart keys, not filesystem paths, so they always use '/'.
LABEL_SEPARATOR = '/'

DEFAULT_OUTPUT_DIR = 'html'
SCRIPT_RELATIVE_PATH = 'scripts/cyclo.js'
INDEX_PAGE_NAME = 'index.html'
DEBUG_FILE_NAME = 'debug.txt'

COLOR_SCALE = 'Blues'
