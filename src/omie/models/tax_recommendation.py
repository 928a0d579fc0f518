"""Tax recommendation model"""

from typing import Any

from omie.models.base import OmieModel


class TaxRecommendation(OmieModel):
    """
    Tax recommendations embedded in a Product payload
    (``recomendacoes_fiscais``). It has no endpoint of its own.
    """

    origem_mercadoria: Any = None
    id_preco_tabelado: Any = None
    id_cest: Any = None
    cupom_fiscal: Any = None
    market_place: Any = None
    indicador_escala: Any = None
    cnpj_fabricante: Any = None
