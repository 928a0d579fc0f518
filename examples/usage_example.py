"""
Usage Examples for the Omie SDK
Demonstrates configuring the SDK and working with resources
"""

import logging

import omie
from omie import Company, ConfigError, ConfigLoader, OmieConfig, Product, SalesOrder


# =============================================================================
# Example 1: Programmatic Configuration
# =============================================================================

def programmatic_config_example() -> OmieConfig:
    """Configure the process-wide connection with explicit credentials"""
    connection = omie.configure(
        app_key="your-app-key",
        app_secret="your-app-secret",
        timeout=30000,
    )
    return connection.config


# =============================================================================
# Example 2: Environment Variables Configuration
# =============================================================================

def env_config_example() -> OmieConfig:
    """
    Load configuration from environment variables

    Set these environment variables before running:

    export OMIE_APP_KEY="your-app-key"
    export OMIE_APP_SECRET="your-app-secret"
    export OMIE_TIMEOUT="30000"
    """
    return omie.configure().config


# =============================================================================
# Example 3: Merged Configuration (File + Environment + Programmatic)
# =============================================================================

def merged_config_example() -> OmieConfig:
    """
    Merge configuration from multiple sources
    Priority: programmatic > environment > file
    """
    loader = ConfigLoader()
    config = loader.load(
        file="./config/omie.json",
        env=True,
        config={"timeout": 60000},
    )
    omie.configure(config)
    return config


# =============================================================================
# Example 4: Working with Resources
# =============================================================================

def resources_example() -> None:
    """Create a company, register a product and place an order"""
    company = Company(
        razao_social="Random Company",
        nome_fantasia="Random",
        cnpj_cpf="23.301.943/0001-50",
        codigo_cliente_integracao="CLI-0001",
    )
    company.add_tag("Cliente")
    company.save()
    print(f"Company saved with id {company.codigo_cliente_omie}")

    product = Product.find({"codigo_produto_integracao": "PRD-0001"})
    if product is None:
        product = Product.create({
            "codigo_produto_integracao": "PRD-0001",
            "descricao": "Produto de teste",
            "unidade": "UN",
            "ncm": "84799090",
            "valor_unitario": 200,
        })

    order = (
        SalesOrder()
        .add_headers(
            codigo_pedido_integracao="PED-0001",
            codigo_cliente=company.codigo_cliente_omie,
            data_previsao="04/03/2020",
            etapa="10",
        )
        .add_sales_items(
            ide={"codigo_item_integracao": "1"},
            produto={
                "codigo_produto": product.codigo_produto,
                "quantidade": 1,
                "valor_unitario": 200,
            },
        )
        .add_additional_information(codigo_categoria="1.01.01", codigo_conta_corrente=1)
    )
    order.save()

    for entry in Company.list({"registros_por_pagina": 20}):
        print(entry.codigo_cliente_omie, entry.razao_social)


# =============================================================================
# Example 5: Creating a Configuration Template
# =============================================================================

def create_config_template_example() -> None:
    """Create a template configuration file"""
    loader = ConfigLoader()
    loader.create_template("./config/omie.template.json")
    print("Configuration template created at ./config/omie.template.json")


# =============================================================================
# Run Examples
# =============================================================================

if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    print("=== Omie SDK Examples ===\n")

    print("1. Create Configuration Template:")
    create_config_template_example()
    print()

    print("2. Environment Configuration:")
    try:
        config = env_config_example()
        print(f"   credentials set: {config.has_credentials()}")
    except ConfigError as e:
        print(f"   {e}")
