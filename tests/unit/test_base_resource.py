"""
Attribute mapping and shared resource behaviour
"""

from typing import Any

import pytest

from omie.exceptions import RequestError
from omie.models import BaseResource, OmieModel, Product, TaxRecommendation, is_blank


class Entry(OmieModel):
    foo: Any = None
    bar: Any = None


class TestOmieModel:
    """Tests for attribute mapping"""

    def test_initializer_assigns_attributes(self):
        entry = Entry({"bar": 1, "foo": 2})
        assert entry.foo == 2
        assert entry.bar == 1

    def test_keyword_arguments(self):
        entry = Entry(foo="x")
        assert entry.foo == "x"
        assert entry.bar is None

    def test_ignores_unknown_keys(self):
        entry = Entry({"foo": 1, "unknown": 2})
        assert not hasattr(entry, "unknown")
        assert entry.to_payload() == {"foo": 1}

    def test_update_attributes_keeps_others(self):
        entry = Entry({"bar": 1, "foo": 2})
        entry.update_attributes({"bar": 4, "unknown": 5})
        assert entry.foo == 2
        assert entry.bar == 4

    def test_values_are_not_converted(self):
        entry = Entry({"foo": "123", "bar": [1, {"a": 1}]})
        assert entry.foo == "123"
        assert entry.bar == [1, {"a": 1}]

    def test_payload_has_only_set_fields(self):
        entry = Entry()
        entry.bar = 3
        assert entry.to_payload() == {"bar": 3}

    def test_builds_nested_models(self):
        product = Product({"recomendacoes_fiscais": {"origem_mercadoria": "1"}})
        assert isinstance(product.recomendacoes_fiscais, TaxRecommendation)
        assert product.recomendacoes_fiscais.origem_mercadoria == "1"

    def test_update_attributes_builds_nested_models(self):
        product = Product()
        product.update_attributes(recomendacoes_fiscais={"cupom_fiscal": "N"})
        assert isinstance(product.recomendacoes_fiscais, TaxRecommendation)
        assert product.to_payload() == {"recomendacoes_fiscais": {"cupom_fiscal": "N"}}


class TestIsBlank:

    @pytest.mark.parametrize("value", [None, "", "  ", [], {}])
    def test_blank(self, value):
        assert is_blank(value)

    @pytest.mark.parametrize("value", [0, 123, "0", "abc", [1], False])
    def test_not_blank(self, value):
        assert not is_blank(value)


class TestUnsupportedOperations:

    def test_missing_call(self, connection):
        """Should refuse operations absent from the call table"""
        with pytest.raises(NotImplementedError):
            BaseResource.create({}, connection=connection)
        connection.send.assert_not_called()

    def test_request_error_propagates_from_create(self, connection):
        connection.send.side_effect = RequestError(fault_code="1", fault_string="x")
        with pytest.raises(RequestError):
            Product.create({}, connection=connection)
