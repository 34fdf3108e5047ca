"""Parsing of contest CSV exports."""

from .csv_parser import CsvParser, parse_csv

__all__ = ["CsvParser", "parse_csv"]
