"""
Tests for the response envelope builders.
"""

import json
from datetime import datetime

from api import responses


class TestSuccessEnvelope:
    def test_defaults(self):
        assert responses.success({"id": 1}) == {
            "success": True,
            "message": "Success",
            "data": {"id": 1},
            "statusCode": 200,
        }

    def test_custom_message_and_status(self):
        envelope = responses.success([1, 2], "Created", 201)
        assert envelope["message"] == "Created"
        assert envelope["statusCode"] == 201
        assert "error" not in envelope

    def test_none_data(self):
        assert responses.success(None)["data"] is None


class TestErrorEnvelope:
    def test_no_arguments(self):
        assert responses.error() == {
            "success": False,
            "message": "An error occurred",
            "statusCode": 500,
            "data": None,
        }

    def test_detail_is_attached(self):
        envelope = responses.error("Validation error", 400, {"body": ["Email is required"]})
        assert envelope["error"] == {"body": ["Email is required"]}
        assert envelope["statusCode"] == 400

    def test_string_detail_and_data(self):
        envelope = responses.error("Nope", 404, "missing", data={"id": 7})
        assert envelope["error"] == "missing"
        assert envelope["data"] == {"id": 7}


class TestResponders:
    def test_respond_success_sets_status_and_body(self):
        response = responses.respond_success({"at": datetime(2024, 1, 2, 3, 4, 5)}, "Done", 201)
        assert response.status_code == 201
        body = json.loads(response.body)
        assert body["success"] is True
        assert body["statusCode"] == 201
        assert body["data"]["at"] == "2024-01-02T03:04:05"

    def test_respond_error_omits_missing_detail(self):
        response = responses.respond_error("Bad", 400)
        assert response.status_code == 400
        assert json.loads(response.body) == {
            "success": False,
            "message": "Bad",
            "data": None,
            "statusCode": 400,
        }
