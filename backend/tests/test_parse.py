from okefin.utils.parse import (
    build_pagination,
    format_price,
    generate_invoice_code,
    generate_slug,
    parse_positive_int,
    parse_price,
    total_pages
)


def test_generate_slug():
    assert generate_slug("Kopi Gayo Arabika") == "kopi-gayo-arabika"


def test_price_round_trip_format():
    assert format_price(15000) == "15000.00"
    assert parse_price("15000.50") == 15000.5
    assert parse_price(None) == 0.0
    assert parse_price("abc") == 0.0


def test_invoice_code_uses_microseconds():
    assert generate_invoice_code(1_700_000_000_000_123_456) == "INV-1700000000-000123"
    assert generate_invoice_code(1_700_000_000_987_654_321) == "INV-1700000000-987654"


def test_parse_positive_int_falls_back():
    assert parse_positive_int("3", 10) == 3
    assert parse_positive_int("0", 10) == 10
    assert parse_positive_int("-5", 10) == 10
    assert parse_positive_int("abc", 1) == 1
    assert parse_positive_int(None, 1) == 1


def test_total_pages():
    assert total_pages(0, 10) == 0
    assert total_pages(10, 10) == 1
    assert total_pages(11, 10) == 2


def test_build_pagination():
    pagination = build_pagination(2, 5, 12)
    assert pagination.current_page == 2
    assert pagination.total_pages == 3
