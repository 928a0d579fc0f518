"""Company model (Omie: Cliente)"""

from types import MappingProxyType
from typing import Any, Dict, List

from pydantic import Field

from omie.models.base import BaseResource


class Company(BaseResource):
    """
    Company registered in Omie, used for clients and suppliers alike

    Endpoint reference: https://app.omie.com.br/api/v1/geral/clientes/
    """

    PATH = "/v1/geral/clientes/"
    CALLS = MappingProxyType({
        "list": "ListarClientes",
        "create": "IncluirCliente",
        "update": "AlterarCliente",
        "find": "ConsultarCliente",
        "delete": "ExcluirCliente",
        "upsert": "UpsertCliente",
        "associate": "AssociarCodIntCliente",
    })
    ID_FIELD = "codigo_cliente_omie"
    INTEGRATION_FIELD = "codigo_cliente_integracao"
    LIST_KEY = "clientes_cadastro"

    email: Any = None
    cnpj_cpf: Any = None
    razao_social: Any = None
    contato: Any = None
    nome_fantasia: Any = None
    codigo_cliente_integracao: Any = None
    codigo_cliente_omie: Any = None
    endereco: Any = None
    cidade: Any = None
    complemento: Any = None
    estado: Any = None
    endereco_numero: Any = None
    cep: Any = None
    codigo_pais: Any = None
    bairro: Any = None
    inscricao_estadual: Any = None
    # Entries shaped as {"tag": "value"}
    tags: Any = Field(default_factory=list)

    def _tag_entries(self) -> List[Any]:
        return self.tags if isinstance(self.tags, list) else []

    @property
    def tag_values(self) -> List[Any]:
        """Bare values of tags"""
        return [
            entry.get("tag") if isinstance(entry, dict) else entry
            for entry in self._tag_entries()
        ]

    def add_tag(self, tag: Any = None) -> "Company":
        """Append a tag unless it is None or already present"""
        if tag is not None and tag not in self.tag_values:
            self.tags = [*self._tag_entries(), {"tag": tag}]
        return self

    def to_payload(self) -> Dict[str, Any]:
        # Tags appended in place never mark the field as set
        payload = super().to_payload()
        if self._tag_entries():
            payload["tags"] = self.tags
        return payload
