from .validator import validate_wordlist, pretty_summary
from .io import read_lines, write_lines, default_wordlist

__all__ = ["validate_wordlist", "pretty_summary", "read_lines", "write_lines", "default_wordlist"]
