import csv
import io
import json

from tms_reformatter.csv_export import (
    CSV_HEADERS,
    escape_csv_field,
    format_number,
    generate_csv,
    services_to_csv,
    stringify_value,
)
from tms_reformatter.transform import transform_data


def parse_csv(text):
    return list(csv.reader(io.StringIO(text)))


def test_empty_input_gives_empty_string():
    assert generate_csv([]) == ""
    assert generate_csv(None) == ""


def test_header_row_is_fixed():
    text = generate_csv([{"soNo": "1"}])
    header = text.split("\n")[0]
    assert header == ",".join(CSV_HEADERS)
    assert CSV_HEADERS[0] == "soNo"
    assert CSV_HEADERS[-1] == "services"
    assert len(CSV_HEADERS) == 24


def test_rows_use_bare_line_feeds(sample_payload):
    orders = transform_data(sample_payload) * 2
    text = generate_csv(orders)
    assert "\r" not in text
    assert len(text.split("\n")) == 3
    assert not text.startswith("\ufeff")


def test_sample_row_values(sample_payload):
    orders = transform_data(sample_payload)
    text = generate_csv(orders)
    row = text.split("\n")[1]

    assert row.startswith('"60325068657","603","157303791","ECOM","2025-06-27",')

    header, values = parse_csv(text)
    cells = dict(zip(header, values))
    assert cells["serviceAmount"] == "4999000"
    assert cells["pickDateTime"] == "0001-01-01 00:00:00"
    assert cells["payStatus"] == "Paid"
    assert cells["codTask"] == "0"
    assert cells["codAmount"] == "0"
    assert cells["orderCmt"] == ""


def test_services_cell_round_trips(sample_payload):
    orders = transform_data(sample_payload)
    text = generate_csv(orders)

    _, values = parse_csv(text)
    assert json.loads(values[-1]) == orders[0]["services"]
    # Single-line JSON inside one quoted cell.
    assert text.split("\n")[1].endswith('}]}]"')


def test_scalar_escaping():
    assert escape_csv_field(None) == ""
    assert escape_csv_field("") == ""
    assert escape_csv_field(0) == '"0"'
    assert escape_csv_field("plain") == '"plain"'
    assert escape_csv_field('say "hi"') == '"say ""hi"""'
    assert escape_csv_field("  a\r\nb\tc   d\n") == '"a b c d"'
    assert escape_csv_field("a,b") == '"a,b"'


def test_stringify_value():
    assert stringify_value(True) == "true"
    assert stringify_value(False) == "false"
    assert stringify_value(5.0) == "5"
    assert stringify_value(1.5) == "1.5"
    assert stringify_value(12) == "12"
    assert stringify_value({"a": [1, 2]}) == '{"a":[1,2]}'


def test_services_cell_collapses_whitespace():
    services = [{"svcCmt": "leave  at\tdoor"}]
    assert services_to_csv(services) == '"[{""svcCmt"":""leave at door""}]"'


def test_services_cell_empty_when_missing():
    assert services_to_csv(None) == ""
    assert services_to_csv([]) == ""
    assert generate_csv([{"soNo": "1", "services": []}]).endswith(",")


def test_unserializable_services_become_empty_quotes():
    circular = [{}]
    circular[0]["self"] = circular
    assert services_to_csv(circular) == '""'
    assert services_to_csv([{"when": object()}]) == '""'

    row = generate_csv([{"soNo": "1", "services": circular}]).split("\n")[1]
    assert row.startswith('"1",')
    assert row.endswith(',""')


def test_non_ascii_is_kept():
    text = generate_csv([{"shipCity": "Depok (Bedahan) ü", "services": [{"svcName": "Pengiriman é"}]}])
    assert '"Depok (Bedahan) ü"' in text
    assert "Pengiriman é" in text


def test_format_number_matches_javascript_layout():
    assert format_number(1.5e-07) == "1.5e-7"
    assert format_number(1e-07) == "1e-7"
    assert format_number(0.00001) == "0.00001"
    assert format_number(0.000001) == "0.000001"
    assert format_number(1e16) == "10000000000000000"
    assert format_number(1e21) == "1e+21"
    assert format_number(1.25e22) == "1.25e+22"
    assert format_number(-2.5) == "-2.5"
    assert format_number(100.0) == "100"
    assert format_number(-0.0) == "0"
    assert format_number(0.1 + 0.2) == "0.30000000000000004"
    assert format_number(float("inf")) == "Infinity"
    assert format_number(float("nan")) == "NaN"


def test_small_float_cells_use_short_exponent():
    row = generate_csv([{"soNo": "1", "productAmount": 1.5e-07}]).split("\n")[1]
    assert row.startswith('"1",,,,,"1.5e-7",')
