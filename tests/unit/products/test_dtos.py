"""Unit tests for Product DTOs.

Covers:
- ProductListQuery: defaults, lenient integer parsing, limit/skip edge cases.
- CreateProductDTO: required fields, no floor on price/stock, frozen.
- UpdateProductDTO: image field, omitted fields become None.
"""

from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from modules.products.dtos import CreateProductDTO, ProductListQuery, UpdateProductDTO

pytestmark = pytest.mark.unit


# ===========================================================================
# ProductListQuery
# ===========================================================================


class TestProductListQuery:
    def test_defaults(self):
        query = ProductListQuery()
        assert query.limit == 3
        assert query.skip == 0
        assert query.category == "All"
        assert query.q == ""

    def test_none_values_fall_back_to_defaults(self):
        query = ProductListQuery(limit=None, skip=None, category=None, q=None)
        assert (query.limit, query.skip, query.category, query.q) == (3, 0, "All", "")

    def test_parses_string_integers(self):
        query = ProductListQuery(limit="10", skip="20")
        assert query.limit == 10
        assert query.skip == 20

    def test_unparsable_integers_fall_back_to_defaults(self):
        query = ProductListQuery(limit="many", skip="x")
        assert query.limit == 3
        assert query.skip == 0

    def test_no_upper_bound_on_limit(self):
        assert ProductListQuery(limit="100000").limit == 100000

    def test_negative_limit_uses_absolute_value(self):
        assert ProductListQuery(limit="-5").limit == 5

    def test_negative_skip_clamps_to_zero(self):
        assert ProductListQuery(skip="-4").skip == 0

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("10abc", 10), ("5.9", 5), (" 7", 7), ("+4", 4), ("abc10", 3)],
    )
    def test_limit_reads_leading_integer(self, raw, expected):
        assert ProductListQuery(limit=raw).limit == expected

    def test_skip_reads_leading_integer(self):
        assert ProductListQuery(skip="6px").skip == 6

    def test_is_frozen(self):
        query = ProductListQuery()
        with pytest.raises(ValidationError):
            query.limit = 10


# ===========================================================================
# CreateProductDTO
# ===========================================================================


class TestCreateProductDTO:
    def test_minimal_payload(self):
        dto = CreateProductDTO(product_name="Widget", price=10, stock=5)
        assert dto.product_name == "Widget"
        assert dto.price == Decimal("10")
        assert dto.stock == 5
        assert dto.description is None
        assert dto.brand is None
        assert dto.category is None

    def test_coerces_form_strings(self):
        dto = CreateProductDTO(product_name="Widget", price="19.99", stock="7")
        assert dto.price == Decimal("19.99")
        assert dto.stock == 7

    def test_product_name_is_kept_verbatim(self):
        dto = CreateProductDTO(product_name="  Widget  ", price=1, stock=1)
        assert dto.product_name == "  Widget  "

    def test_largest_price_fitting_column(self):
        dto = CreateProductDTO(product_name="Widget", price="9999999999.99", stock=1)
        assert dto.price == Decimal("9999999999.99")

    @pytest.mark.parametrize("price", ["12345678901234", "10000000000", "-1e12"])
    def test_price_too_large_for_column_raises(self, price):
        with pytest.raises(ValidationError, match="at most 10 digits"):
            CreateProductDTO(product_name="Widget", price=price, stock=1)

    def test_price_rounding_past_column_raises(self):
        with pytest.raises(ValidationError):
            CreateProductDTO(product_name="Widget", price="9999999999.999", stock=1)

    def test_negative_price_and_stock_are_accepted(self):
        dto = CreateProductDTO(product_name="Widget", price="-1.50", stock=-3)
        assert dto.price == Decimal("-1.50")
        assert dto.stock == -3

    def test_blank_name_raises(self):
        with pytest.raises(ValidationError, match="Product name must not be empty"):
            CreateProductDTO(product_name="   ", price=1, stock=1)

    @pytest.mark.parametrize("missing", ["product_name", "price", "stock"])
    def test_required_fields(self, missing):
        payload = {"product_name": "Widget", "price": 1, "stock": 1}
        payload[missing] = None
        with pytest.raises(ValidationError) as exc_info:
            CreateProductDTO(**payload)
        assert exc_info.value.errors()[0]["loc"] == (missing,)

    def test_non_numeric_price_raises(self):
        with pytest.raises(ValidationError):
            CreateProductDTO(product_name="Widget", price="cheap", stock=1)

    def test_ignores_image(self):
        dto = CreateProductDTO(product_name="Widget", price=1, stock=1, image="x.png")
        assert "image" not in dto.editable_fields()

    def test_is_frozen(self):
        dto = CreateProductDTO(product_name="Widget", price=1, stock=1)
        with pytest.raises(ValidationError):
            dto.product_name = "Changed"


# ===========================================================================
# UpdateProductDTO
# ===========================================================================


class TestUpdateProductDTO:
    def test_carries_image_verbatim(self):
        dto = UpdateProductDTO(
            product_name="Widget", price=1, stock=1, image="products/custom.png"
        )
        assert dto.editable_fields()["image"] == "products/custom.png"

    def test_omitted_optional_fields_are_none(self):
        dto = UpdateProductDTO(product_name="Widget", price=1, stock=1)
        fields = dto.editable_fields()
        assert fields == {
            "product_name": "Widget",
            "price": Decimal("1"),
            "stock": 1,
            "description": None,
            "brand": None,
            "category": None,
            "image": None,
        }
