"""
Delimited-text parser for Squad Data

Handles:
- Scanning raw CSV text into rows of raw cells with a two-state scanner
- Quoted fields containing delimiters, newlines and escaped quotes
- Mapping parsed rows onto the header row as string-keyed records
"""

import logging
from typing import Dict, List

logger = logging.getLogger(__name__)

QUOTE = '"'
LINE_FEED = '\n'
CARRIAGE_RETURN = '\r'
BYTE_ORDER_MARK = '\ufeff'


class CsvScanner:
    """Finite-state scanner over a single CSV text.

    The scanner is best-effort and never raises: an unterminated quoted
    field is closed by the end of input. Carriage returns are discarded
    outside quotes but kept verbatim inside a quoted field.
    """

    def __init__(self, text: str, delimiter: str = ','):
        self.text = text
        self.delimiter = delimiter

        self.in_quotes = False
        self.position = 0
        self.rows: List[List[str]] = []
        self._row: List[str] = []
        self._cell: List[str] = []

    def scan(self) -> List[List[str]]:
        """Scan the whole text and return the rows"""
        text = self.text
        length = len(text)

        while self.position < length:
            ch = text[self.position]

            if self.in_quotes:
                self._scan_quoted(ch)
            else:
                self._scan_unquoted(ch)

            self.position += 1

        # Keep a trailing row that has no line terminator
        if self._cell or self._row:
            self._end_row()

        return self.rows

    def _scan_quoted(self, ch: str):
        if ch == QUOTE:
            if self._peek() == QUOTE:
                self._cell.append(QUOTE)
                self.position += 1
            else:
                self.in_quotes = False
        else:
            self._cell.append(ch)

    def _scan_unquoted(self, ch: str):
        if ch == QUOTE:
            self.in_quotes = True
        elif ch == self.delimiter:
            self._end_cell()
        elif ch == LINE_FEED:
            self._end_row()
        elif ch != CARRIAGE_RETURN:
            self._cell.append(ch)

    def _peek(self) -> str:
        """Character after the current position, or empty at end of input"""
        next_position = self.position + 1
        if next_position < len(self.text):
            return self.text[next_position]
        return ''

    def _end_cell(self):
        self._row.append(''.join(self._cell))
        self._cell = []

    def _end_row(self):
        self._end_cell()
        self.rows.append(self._row)
        self._row = []


def parse_csv(text: str, delimiter: str = ',') -> List[List[str]]:
    """Parse CSV text into rows of raw string cells.

    A leading UTF-8 byte order mark is dropped before scanning.
    """
    if text.startswith(BYTE_ORDER_MARK):
        text = text[len(BYTE_ORDER_MARK):]
    return CsvScanner(text, delimiter).scan()


def _is_blank_row(row: List[str]) -> bool:
    return all(cell.strip() == '' for cell in row)


def to_records(rows: List[List[str]]) -> List[Dict[str, str]]:
    """Map parsed rows onto the first non-blank row used as header.

    Header names and values are trimmed. Rows shorter than the header get
    empty strings for the missing columns, extra cells are ignored, and a
    repeated header name keeps the value of its last column.
    """
    rows = [row for row in rows if not _is_blank_row(row)]
    if not rows:
        return []

    header = [name.strip().lstrip(BYTE_ORDER_MARK) for name in rows[0]]

    records = []
    for row in rows[1:]:
        record = {}
        for index, name in enumerate(header):
            value = row[index] if index < len(row) else ''
            record[name] = value.strip()
        records.append(record)

    logger.debug(f"Mapped {len(records)} records onto {len(header)} columns")
    return records


def read_records(text: str) -> List[Dict[str, str]]:
    """Parse CSV text straight into header-keyed records"""
    return to_records(parse_csv(text))
