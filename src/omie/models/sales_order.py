"""Sales order model (Omie: Pedido de venda)"""

from types import MappingProxyType
from typing import Any, Dict, Optional

from omie.client.connection import Connection
from omie.models.base import BaseResource


class SalesOrder(BaseResource):
    """
    Sales order registered in Omie

    An order payload is split into sections (``cabecalho``, ``det``,
    ``frete``, ...); the ``add_*`` helpers fill them and return the order
    so calls can be chained.

    Endpoint reference: https://app.omie.com.br/api/v1/produtos/pedido/
    """

    PATH = "/v1/produtos/pedido/"
    CALLS = MappingProxyType({
        "list": "ListarPedidos",
        "create": "IncluirPedido",
        "update": "AlterarPedidoVenda",
        "find": "ConsultarPedido",
        "change_status": "TrocarEtapaPedido",
        "status": "StatusPedido",
    })
    ID_FIELD = "codigo_pedido"
    INTEGRATION_FIELD = "codigo_pedido_integracao"
    LIST_KEY = "pedido_venda_produto"
    FIND_KEY = "pedido_venda_produto"

    cabecalho: Any = None
    det: Any = None
    frete: Any = None
    informacoes_adicionais: Any = None
    lista_parcelas: Any = None
    total_pedido: Any = None

    # Returned by Omie
    codigo_pedido: Any = None
    codigo_pedido_integracao: Any = None
    codigo_status: Any = None
    descricao_status: Any = None
    numero_pedido: Any = None

    @classmethod
    def change_status(
        cls,
        integration_code: Any,
        stage: Any,
        connection: Optional[Connection] = None,
    ) -> "SalesOrder":
        """Move the order to another stage (``etapa``) of the sales flow"""
        params = {"codigo_pedido_integracao": integration_code, "etapa": stage}
        return cls._request_and_initialize("change_status", params, connection)

    @classmethod
    def status(
        cls, integration_code: Any, connection: Optional[Connection] = None
    ) -> "SalesOrder":
        """Get the current status of an order"""
        params = {"codigo_pedido_integracao": integration_code}
        return cls._request_and_initialize("status", params, connection)

    def _merge_section(self, name: str, fields: Dict[str, Any]) -> "SalesOrder":
        setattr(self, name, {**(getattr(self, name) or {}), **fields})
        return self

    def add_headers(self, **fields: Any) -> "SalesOrder":
        return self._merge_section("cabecalho", fields)

    def add_sales_items(self, **item: Any) -> "SalesOrder":
        """Append one item to the order lines"""
        self.det = [*(self.det or []), item]
        return self

    def add_shipping(self, **fields: Any) -> "SalesOrder":
        return self._merge_section("frete", fields)

    def add_additional_information(self, **fields: Any) -> "SalesOrder":
        return self._merge_section("informacoes_adicionais", fields)

    def add_installment(self, **fields: Any) -> "SalesOrder":
        """Fill the installments section, e.g. ``add_installment(parcela=[...])``"""
        return self._merge_section("lista_parcelas", fields)

    def add_total_order(self, **fields: Any) -> "SalesOrder":
        return self._merge_section("total_pedido", fields)
