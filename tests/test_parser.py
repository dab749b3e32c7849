"""Tests for squad_data.parser module."""

import csv
import io

from squad_data.models import Player
from squad_data.normalizer import normalize_players
from squad_data.parser import CsvScanner, parse_csv, read_records, to_records


class TestParseCsv:
    """Tests for the quote-aware scanner."""

    def test_simple_rows(self):
        assert parse_csv('a,b\nc,d\n') == [['a', 'b'], ['c', 'd']]

    def test_empty_input(self):
        assert parse_csv('') == []

    def test_trailing_row_without_newline_is_kept(self):
        assert parse_csv('a,b\nc,d') == [['a', 'b'], ['c', 'd']]

    def test_trailing_delimiter_yields_empty_cell(self):
        assert parse_csv('a,') == [['a', '']]

    def test_quoted_delimiter_stays_in_cell(self):
        assert parse_csv('"a,b",c\n') == [['a,b', 'c']]

    def test_quoted_newline_stays_in_cell(self):
        assert parse_csv('"line1\nline2",x\n') == [['line1\nline2', 'x']]

    def test_escaped_quote(self):
        assert parse_csv('"He said ""hi"""\n') == [['He said "hi"']]

    def test_quoted_empty_cell(self):
        assert parse_csv('"",b\n') == [['', 'b']]

    def test_carriage_return_dropped_outside_quotes(self):
        assert parse_csv('a,b\r\nc,d\r\n') == [['a', 'b'], ['c', 'd']]

    def test_carriage_return_kept_inside_quotes(self):
        assert parse_csv('"a\r\nb",c\r\n') == [['a\r\nb', 'c']]

    def test_unterminated_quote_closed_at_end(self):
        assert parse_csv('x,"abc,def\nghi') == [['x', 'abc,def\nghi']]

    def test_quote_inside_unquoted_cell_opens_quoting(self):
        assert parse_csv('ab"c,d"e,f\n') == [['abc,de', 'f']]

    def test_blank_line_is_a_single_empty_cell(self):
        assert parse_csv('a\n\nb\n') == [['a'], [''], ['b']]

    def test_whitespace_is_preserved(self):
        assert parse_csv(' a , b \n') == [[' a ', ' b ']]

    def test_custom_delimiter(self):
        assert parse_csv('a;b\n', delimiter=';') == [['a', 'b']]

    def test_round_trip_through_quoting_writer(self):
        rows = [
            ['id', 'note'],
            ['1', 'a,b'],
            ['2', 'He said "hi"'],
            ['3', 'line1\nline2'],
            ['4', ''],
            ['5', ' padded '],
            ['6', 'Müller'],
        ]
        buffer = io.StringIO()
        csv.writer(buffer, lineterminator='\n').writerows(rows)

        assert parse_csv(buffer.getvalue()) == rows


class TestCsvScanner:
    """Tests for scanner state handling."""

    def test_ends_unquoted_after_closed_quote(self):
        scanner = CsvScanner('"a",b')
        scanner.scan()
        assert scanner.in_quotes is False

    def test_ends_quoted_when_unterminated(self):
        scanner = CsvScanner('"abc')
        assert scanner.scan() == [['abc']]
        assert scanner.in_quotes is True


class TestToRecords:
    """Tests for mapping rows onto the header."""

    def test_maps_rows_to_header(self):
        rows = [['id', 'name'], ['1', 'Kim']]
        assert to_records(rows) == [{'id': '1', 'name': 'Kim'}]

    def test_no_rows(self):
        assert to_records([]) == []

    def test_only_blank_rows(self):
        assert to_records([[''], ['  ', '']]) == []

    def test_header_only(self):
        assert to_records([['id', 'name']]) == []

    def test_blank_rows_skipped_before_header(self):
        rows = [[''], [' ', ' '], ['id'], ['1']]
        assert to_records(rows) == [{'id': '1'}]

    def test_blank_rows_between_data_skipped(self):
        rows = [['id'], ['1'], ['', ''], ['2']]
        assert to_records(rows) == [{'id': '1'}, {'id': '2'}]

    def test_header_and_values_trimmed(self):
        rows = [[' id ', 'name  '], ['  1', ' Kim ']]
        assert to_records(rows) == [{'id': '1', 'name': 'Kim'}]

    def test_short_row_padded_with_empty_strings(self):
        rows = [['id', 'name', 'pos'], ['1']]
        assert to_records(rows) == [{'id': '1', 'name': '', 'pos': ''}]

    def test_long_row_extra_cells_ignored(self):
        rows = [['id'], ['1', 'extra', 'more']]
        assert to_records(rows) == [{'id': '1'}]

    def test_duplicate_header_last_column_wins(self):
        rows = [['id', 'name', 'name'], ['1', 'first', 'second']]
        assert to_records(rows) == [{'id': '1', 'name': 'second'}]

    def test_read_records(self):
        text = 'player_id,name\r\nP1,"Kim, Minsu"\r\n'
        assert read_records(text) == [{'player_id': 'P1', 'name': 'Kim, Minsu'}]


class TestByteOrderMark:
    """Tests for sources exported with a leading UTF-8 BOM."""

    def test_parse_drops_leading_bom(self):
        assert parse_csv('\ufeffplayer_id,name\nP1,Kim\n') == [['player_id', 'name'], ['P1', 'Kim']]

    def test_bom_only_stripped_at_start(self):
        assert parse_csv('a,\ufeffb\n') == [['a', '\ufeffb']]

    def test_header_bom_stripped_in_records(self):
        rows = [['\ufeffplayer_id', 'name'], ['P1', 'Kim']]
        assert to_records(rows) == [{'player_id': 'P1', 'name': 'Kim'}]

    def test_bom_source_keeps_its_players(self):
        records = read_records('\ufeffplayer_id,name\nP1,Kim\n')
        assert normalize_players(records) == [Player(id='P1', name='Kim')]
