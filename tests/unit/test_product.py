"""
Product Unit Tests
"""

from unittest.mock import MagicMock

import pytest

from omie.exceptions import MissingCredentialsError, RequestError
from omie.models import Product, TaxRecommendation


PATH = "/v1/geral/produtos/"


@pytest.fixture
def product_data() -> dict:
    return {
        "codigo_produto_integracao": "QW3RT7YU",
        "codigo_produto": 4422108537,
        "descricao": "Produto de teste",
        "unidade": "UN",
        "ncm": "84799090",
        "valor_unitario": 200,
    }


@pytest.fixture
def tax_recommendation_data() -> dict:
    return {
        "origem_mercadoria": "1",
        "id_cest": "",
        "id_preco_tabelado": "",
        "cupom_fiscal": "N",
        "market_place": "",
        "indicador_escala": "",
        "cnpj_fabricante": "",
    }


class TestClassMethods:

    def test_create(self, connection: MagicMock, product_data: dict):
        connection.send.return_value = product_data
        product = Product.create(product_data, connection=connection)
        assert product.codigo_produto == 4422108537
        assert product.valor_unitario == 200
        connection.send.assert_called_once_with(PATH, "IncluirProduto", product_data)

    def test_create_with_tax_recommendation(
        self, connection: MagicMock, product_data: dict, tax_recommendation_data: dict
    ):
        connection.send.return_value = {
            **product_data, "recomendacoes_fiscais": tax_recommendation_data
        }
        product = Product.create(product_data, connection=connection)

        assert isinstance(product.recomendacoes_fiscais, TaxRecommendation)
        assert product.recomendacoes_fiscais.origem_mercadoria == "1"
        assert product.recomendacoes_fiscais.cupom_fiscal == "N"

    def test_find(self, connection: MagicMock, product_data: dict):
        connection.send.return_value = product_data
        product = Product.find({"codigo_produto": 4422108537}, connection=connection)
        assert product.descricao == "Produto de teste"
        assert connection.send.call_args.args[1] == "ConsultarProduto"

    def test_find_returns_none_on_request_error(self, connection: MagicMock):
        connection.send.side_effect = RequestError(fault_code="SOAP-ENV:Client-102")
        assert Product.find({"codigo_produto": 1}, connection=connection) is None

    def test_find_propagates_missing_credentials(self, connection: MagicMock):
        connection.send.side_effect = MissingCredentialsError()
        with pytest.raises(MissingCredentialsError):
            Product.find({"codigo_produto": 1}, connection=connection)

    def test_list(self, connection: MagicMock, product_data: dict):
        connection.send.return_value = {
            "produto_servico_cadastro": [
                product_data,
                {**product_data, "descricao": "Another Product"},
            ]
        }
        products = Product.list(connection=connection)

        assert [product.descricao for product in products] == [
            "Produto de teste",
            "Another Product",
        ]

    def test_list_defaults(self, connection: MagicMock):
        connection.send.return_value = {"produto_servico_cadastro": []}
        Product.list({"registros_por_pagina": 20}, connection=connection)
        connection.send.assert_called_once_with(
            PATH,
            "ListarProdutos",
            {
                "pagina": 1,
                "registros_por_pagina": 20,
                "apenas_importado_api": "N",
                "filtrar_apenas_omiepdv": "N",
            },
        )

    def test_list_returns_empty_list_on_request_error(self, connection: MagicMock):
        connection.send.side_effect = RequestError(fault_code="SOAP-ENV:Client-5113")
        assert Product.list(connection=connection) == []

    def test_update(self, connection: MagicMock, product_data: dict):
        connection.send.return_value = product_data
        assert isinstance(Product.update(connection=connection), Product)
        assert connection.send.call_args.args[1] == "AlterarProduto"

    def test_associate(self, connection: MagicMock):
        connection.send.return_value = {"codigo_status": "0"}
        assert Product.associate("123", "ABC", connection=connection) is True
        connection.send.assert_called_once_with(
            PATH,
            "AssociarCodIntProduto",
            {"codigo_produto": "123", "codigo_produto_integracao": "ABC"},
        )

    def test_call_table_is_read_only(self):
        with pytest.raises(TypeError):
            Product.CALLS["create"] = "Other"


class TestInstanceMethods:

    @pytest.fixture
    def product(self) -> Product:
        return Product()

    def test_saved_when_remote_id_present(self, product: Product):
        assert not product.is_saved()
        product.codigo_produto = 123
        assert product.is_saved()

    def test_save_creates_and_copies_remote_id(
        self, product: Product, connection: MagicMock, product_data: dict
    ):
        product.descricao = "Produto de teste"
        connection.send.return_value = product_data

        product.save(connection=connection)

        assert connection.send.call_args.args[1] == "IncluirProduto"
        assert product.codigo_produto == 4422108537

    def test_save_updates_when_saved(self, product: Product, connection: MagicMock):
        product.codigo_produto = 123
        product.recomendacoes_fiscais = {"cupom_fiscal": "S"}
        connection.send.return_value = {"codigo_produto": 456}

        product.save(connection=connection)

        connection.send.assert_called_once_with(
            PATH,
            "AlterarProduto",
            {"codigo_produto": 123, "recomendacoes_fiscais": {"cupom_fiscal": "S"}},
        )
        assert product.codigo_produto == 456

    def test_associate_entry(self, product: Product, connection: MagicMock):
        product.codigo_produto_integracao = "ABC"
        product.codigo_produto = "123"
        connection.send.return_value = {}

        assert product.associate_entry(connection=connection) is True
        assert connection.send.call_args.args[2] == {
            "codigo_produto": "123",
            "codigo_produto_integracao": "ABC",
        }
