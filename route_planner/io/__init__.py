"""io package."""

from .board_parser import BoardParseError, parse_board, parse_line, read_board_file

__all__ = ["BoardParseError", "parse_board", "parse_line", "read_board_file"]
