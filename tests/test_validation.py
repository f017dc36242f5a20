"""
Tests for the request validator (schemas + aggregation across parts).
"""

from typing import ClassVar, Dict

from pydantic import Field

from api.validation import RequestSchema, run_validation
from auth.schemas import LoginRequest, SignupRequest
from products.schemas import MAX_PAGE, PaginationQuery


class ItemParams(RequestSchema):
    item_id: int = Field(..., ge=1)

    messages: ClassVar[Dict[str, str]] = {"item_id.int_parsing": "item_id must be a number"}


class TestPaginationQuery:
    def test_defaults_are_filled(self):
        result = run_validation({"query": PaginationQuery}, {"query": {}})
        assert result.ok
        assert result.values["query"].model_dump() == {"page": 1, "limit": 10}

    def test_strings_are_coerced(self):
        result = run_validation({"query": PaginationQuery}, {"query": {"page": "3", "limit": "25"}})
        assert result.values["query"].page == 3
        assert result.values["query"].limit == 25

    def test_non_numeric_page_is_rejected(self):
        raw = {"page": "abc"}
        result = run_validation({"query": PaginationQuery}, {"query": raw})
        assert not result.ok
        assert result.errors == {"query": ["page must be a number"]}
        assert result.values["query"] is raw

    def test_limit_bounds(self):
        result = run_validation({"query": PaginationQuery}, {"query": {"limit": "101"}})
        assert result.errors["query"] == ["limit must be less than or equal to 100"]

    def test_page_is_bounded_so_offset_fits_int64(self):
        result = run_validation({"query": PaginationQuery}, {"query": {"page": "100000000000000000000"}})
        assert result.errors == {"query": [f"page must be less than or equal to {MAX_PAGE}"]}
        assert (MAX_PAGE - 1) * 100 <= 2**63 - 1

    def test_unknown_keys_are_stripped(self):
        result = run_validation({"query": PaginationQuery}, {"query": {"sort": "name"}})
        assert result.ok
        assert "sort" not in result.values["query"].model_dump()


class TestSignupSchema:
    def test_email_is_trimmed_and_lowercased(self):
        result = run_validation(
            {"body": SignupRequest},
            {"body": {"email": "  John@Example.COM ", "password": "Test@1234", "name": " JohnDoe "}},
        )
        assert result.ok
        assert result.values["body"].email == "john@example.com"
        assert result.values["body"].name == "JohnDoe"

    def test_collects_every_error(self):
        result = run_validation(
            {"body": SignupRequest},
            {"body": {"email": "invalid-email", "password": "abc", "name": "John Doe"}},
        )
        assert result.errors == {
            "body": [
                "Please provide a valid email address",
                "Password must be at least 5 characters long",
                "Name cannot contain spaces",
            ]
        }

    def test_missing_fields(self):
        result = run_validation({"body": SignupRequest}, {"body": {"email": "test@example.com"}})
        assert result.errors == {"body": ["Password is required", "Name is required"]}

    def test_name_length(self):
        result = run_validation(
            {"body": SignupRequest},
            {"body": {"email": "a@example.com", "password": "Test@1234", "name": "J"}},
        )
        assert result.errors == {"body": ["Name must be at least 2 characters long"]}

    def test_is_admin_is_not_accepted_from_clients(self):
        result = run_validation(
            {"body": SignupRequest},
            {"body": {"email": "a@example.com", "password": "Test@1234", "name": "Jo", "isAdmin": True}},
        )
        assert result.ok
        assert "isAdmin" not in result.values["body"].model_dump()


class TestSignupEdgeCases:
    def test_blank_fields_read_as_required(self):
        result = run_validation(
            {"body": SignupRequest},
            {"body": {"email": "  ", "password": "", "name": " "}},
        )
        assert result.errors == {
            "body": ["Email is required", "Password is required", "Name is required"]
        }

    def test_password_over_72_bytes_is_rejected(self):
        result = run_validation(
            {"body": SignupRequest},
            {"body": {"email": "long@example.com", "password": "a" * 80, "name": "LongPw"}},
        )
        assert result.errors == {"body": ["Password cannot exceed 72 bytes"]}

    def test_multibyte_password_is_measured_in_bytes(self):
        result = run_validation(
            {"body": SignupRequest},
            {"body": {"email": "mb@example.com", "password": "\u00e9" * 37, "name": "Multi"}},
        )
        assert result.errors == {"body": ["Password cannot exceed 72 bytes"]}

    def test_password_of_exactly_72_bytes_passes(self):
        result = run_validation(
            {"body": SignupRequest},
            {"body": {"email": "edge@example.com", "password": "a" * 72, "name": "Edge"}},
        )
        assert result.ok


class TestLoginSchema:
    def test_empty_password(self):
        result = run_validation({"body": LoginRequest}, {"body": {"email": "a@example.com", "password": ""}})
        assert result.errors == {"body": ["Password is required"]}


class TestAggregation:
    def test_errors_are_keyed_by_part(self):
        result = run_validation(
            {"params": ItemParams, "query": PaginationQuery},
            {"params": {"item_id": "x"}, "query": {"page": "0"}},
        )
        assert result.errors == {
            "params": ["item_id must be a number"],
            "query": ["page must be greater than or equal to 1"],
        }

    def test_passing_part_is_sanitized_while_other_fails(self):
        result = run_validation(
            {"params": ItemParams, "query": PaginationQuery},
            {"params": {"item_id": "5"}, "query": {"limit": "nope"}},
        )
        assert list(result.errors) == ["query"]
        assert result.values["params"].item_id == 5

    def test_part_without_schema_is_untouched(self):
        result = run_validation({"query": PaginationQuery}, {"query": {}, "params": {"x": "1"}})
        assert result.values["params"] == {"x": "1"}

    def test_unmapped_error_falls_back_to_field_message(self):
        result = run_validation({"params": ItemParams}, {"params": {"item_id": 0}})
        assert len(result.errors["params"]) == 1
        assert result.errors["params"][0].startswith("item_id: ")
