"""Unit tests for envelope helpers and the DRF exception handler."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from django.core.signals import got_request_exception
from pydantic import ValidationError
from rest_framework import exceptions
from rest_framework.test import APIRequestFactory
from rest_framework.request import Request

from modules.core.exception_handler import envelope_exception_handler
from modules.core.responses import (
    failure,
    internal_error,
    success,
    validation_errors,
)
from modules.products.dtos import CreateProductDTO

pytestmark = pytest.mark.unit


class TestEnvelope:
    def test_success_shape(self):
        response = success("Done", {"a": 1}, total=3)
        assert response.status_code == 200
        assert response.data == {
            "status": True,
            "message": "Done",
            "data": {"a": 1},
            "total": 3,
        }

    def test_failure_shape(self):
        response = failure("Nope", 404)
        assert response.status_code == 404
        assert response.data == {"status": False, "message": "Nope", "data": None}

    def test_validation_errors_are_flattened(self):
        with pytest.raises(ValidationError) as exc_info:
            CreateProductDTO(product_name="", price="x", stock=1)
        errors = validation_errors(exc_info.value)
        fields = {error["field"] for error in errors}
        assert fields == {"product_name", "price"}
        assert all(error["detail"] for error in errors)


class TestInternalError:
    def test_hides_exception_text_and_signals(self):
        request = Request(APIRequestFactory().get("/api/v1/products"))
        receiver = MagicMock()
        got_request_exception.connect(receiver)
        try:
            try:
                raise RuntimeError("connection refused to db-host:5432")
            except RuntimeError as exc:
                response = internal_error(request, "Failed to list products", exc)
        finally:
            got_request_exception.disconnect(receiver)

        assert response.status_code == 500
        assert response.data == {
            "status": False,
            "message": "Failed to list products",
            "data": None,
        }
        receiver.assert_called_once()


class TestExceptionHandler:
    def test_wraps_auth_failure(self):
        response = envelope_exception_handler(exceptions.NotAuthenticated(), {})
        assert response.status_code == 401
        assert response.data["status"] is False
        assert response.data["data"] is None
        assert response.data["message"]

    def test_wraps_parse_error(self):
        response = envelope_exception_handler(exceptions.ParseError("bad json"), {})
        assert response.status_code == 400
        assert response.data == {"status": False, "message": "bad json", "data": None}

    def test_unhandled_exception_passes_through(self):
        assert envelope_exception_handler(RuntimeError("boom"), {}) is None
