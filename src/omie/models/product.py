"""Product model (Omie: Produto)"""

from types import MappingProxyType
from typing import Any, Optional

from omie.models.base import BaseResource
from omie.models.tax_recommendation import TaxRecommendation


class Product(BaseResource):
    """
    Product registered in Omie

    Endpoint reference: https://app.omie.com.br/api/v1/geral/produtos/
    """

    PATH = "/v1/geral/produtos/"
    CALLS = MappingProxyType({
        "list": "ListarProdutos",
        "create": "IncluirProduto",
        "update": "AlterarProduto",
        "find": "ConsultarProduto",
        "delete": "ExcluirProduto",
        "upsert": "UpsertProduto",
        "associate": "AssociarCodIntProduto",
    })
    ID_FIELD = "codigo_produto"
    INTEGRATION_FIELD = "codigo_produto_integracao"
    LIST_KEY = "produto_servico_cadastro"
    LIST_DEFAULTS = MappingProxyType({
        **BaseResource.LIST_DEFAULTS,
        "filtrar_apenas_omiepdv": "N",
    })

    ncm: Any = None
    valor_unitario: Any = None
    unidade: Any = None
    descricao_status: Any = None
    codigo_produto_integracao: Any = None
    codigo_produto: Any = None
    descricao: Any = None
    recomendacoes_fiscais: Optional[TaxRecommendation] = None
