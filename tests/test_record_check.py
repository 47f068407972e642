"""Tests for record-level checking."""

from components.record_check import check_record
from matchers import close_to, type_of


class TestCheckRecord:
    def setup_method(self):
        self.field_matchers = {
            "price": close_to(19.99, 1e-5),
            "quantity": type_of(int),
        }

    def test_all_match(self):
        score, details = check_record({"price": 19.99, "quantity": 3, "extra": "x"}, self.field_matchers)
        assert score == 1.0
        assert details["failed_fields"] == 0
        assert details["total_fields"] == 2

    def test_partial_match(self):
        score, details = check_record({"price": 20.5, "quantity": 3}, self.field_matchers)
        assert score == 0.5
        assert details["field_results"]["price"].description == "was 20.5"

    def test_missing_field(self):
        score, details = check_record({"price": 19.99}, self.field_matchers)
        assert score == 0.5
        assert details["field_results"]["quantity"].description == "missing"

    def test_none_is_a_value(self):
        _, details = check_record({"price": None, "quantity": 1}, self.field_matchers)
        assert details["field_results"]["price"].description == "was None"

    def test_object_record(self):
        class Record:
            price = 19.99
            quantity = 2

        score, _ = check_record(Record(), self.field_matchers)
        assert score == 1.0

    def test_no_matchers(self):
        score, details = check_record({"price": 1.0}, {})
        assert score == 1.0
        assert details["total_fields"] == 0
