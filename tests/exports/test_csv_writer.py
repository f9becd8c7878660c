from __future__ import annotations

from r3_academy.exports.csv_writer import serialize_rows, to_csv_bytes


def test_values_in_key_order_without_header():
    rows = [
        {"ID": "S1", "Name": "Asha", "Age": 10},
        {"ID": "S2", "Name": "Ravi", "Age": 11},
    ]

    assert serialize_rows(rows) == "S1,Asha,10\nS2,Ravi,11"


def test_header_written_when_requested():
    rows = [{"Date": "2024-12-28", "Status": "Present"}]

    assert serialize_rows(rows, include_header=True) == "Date,Status\n2024-12-28,Present"


def test_commas_quotes_and_newlines_are_escaped():
    rows = [{"ID": "S1", "Address": 'Flat 3B, "Sunrise"\nMG Road', "School": "St. Mary's"}]

    assert serialize_rows(rows) == 'S1,"Flat 3B, ""Sunrise""\nMG Road",St. Mary\'s'


def test_empty_rows_give_empty_payload():
    assert serialize_rows([]) == ""
    assert serialize_rows([], include_header=True) == ""


def test_bytes_are_utf8():
    rows = [{"Name": "Zoë"}]

    assert to_csv_bytes(rows) == "Zoë".encode("utf-8")


def test_address_without_comma_is_written_bare():
    rows = [{"ID": "R3-002", "Address": "44 Park Street"}]

    assert serialize_rows(rows) == "R3-002,44 Park Street"
