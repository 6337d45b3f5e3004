"""
Configuration file reading utilities.

This module reads the JSON files shipped in the package's ``config/``
directory: message templates used when raising errors or warnings, and
alias tables used to resolve user-facing string flags.

Methods
-------
read_config
    Read and cache JSON configuration files from the package's config directory.

Notes
-----
- All functions use LRU caching to avoid repeated file I/O

Examples
--------
>>> from interdetect._utils import read_config

>>> read_config("messages")["errors"]["missing_interaction_table"]
"'interaction_ind' is missing. Use interaction_index_table(nmain_p) ..."
"""

import json
import pathlib
from functools import lru_cache


@lru_cache(maxsize=2)
def read_config(name: str) -> dict:
    """
    Read and cache JSON configuration files.

    Parameters
    ----------
    name : str
        The name of the configuration file (without .json extension).
        File is located at `config/{name}.json` relative to the package root.

    Returns
    -------
    dict
        The parsed JSON content of the configuration file.

    Raises
    ------
    FileNotFoundError
        If the requested configuration file does not exist.

    Notes
    -----
    - The cache size is set to 2 because the package ships two configuration
      files: ``messages`` and ``aliases``.
    """
    path = pathlib.Path(__file__).resolve().parent.parent / f"config/{name}.json"
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)
