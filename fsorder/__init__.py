"""
fsorder — natural-order directory listings for batch pipelines
---------------------------------------------------------------

Modules:
  natural.py : natural path comparator, sort key and sort helper
  listing.py : non-recursive regular-file listing in natural order
  paths.py   : extension splitting, readability probes, program-relative paths
  cli.py     : `fsorder` command-line entry point
  base/      : logging and file I/O helpers
  shared/    : YAML task configuration and progress helpers
"""

from fsorder.listing import DirectoryOpenFailed, list_directory, list_directory_files
from fsorder.natural import compare_path_natural, natural_compare, natural_sort, natural_sort_key
from fsorder.paths import (
    filepath_is_readable,
    filter_by_extension,
    get_executable_directory,
    get_file_extension,
    get_file_name_without_extension,
    path_is_directory,
    sanitize_dirpath,
    sanitize_filepath,
)

__all__ = [
    "DirectoryOpenFailed",
    "compare_path_natural",
    "filepath_is_readable",
    "filter_by_extension",
    "get_executable_directory",
    "get_file_extension",
    "get_file_name_without_extension",
    "list_directory",
    "list_directory_files",
    "natural_compare",
    "natural_sort",
    "natural_sort_key",
    "path_is_directory",
    "sanitize_dirpath",
    "sanitize_filepath",
]
