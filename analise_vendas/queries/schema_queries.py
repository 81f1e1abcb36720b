# Columns every report may read, per table.
REQUIRED_COLUMNS = {
    "dim_cliente": ["cpf", "nome", "email", "data_nascimento", "bairro"],
    "dim_produto": ["id_produto", "sku", "nome_produto", "categoria"],
    "fato_vendas": [
        "numero_pedido",
        "id_produto",
        "cpf_cliente",
        "nome_entrega",
        "preco_venda",
        "valor_frete",
        "valor_total",
        "status_pedido",
        "data_criacao",
        "bairro_entrega",
        "metodo_pagamento",
    ],
}


def schema_probe_sql(table: str) -> str:
    # Returns no rows; fails in the engine when the table or a column is missing.
    columns = ",\n  ".join(REQUIRED_COLUMNS[table])
    return f"SELECT\n  {columns}\nFROM {table}\nWHERE 1 = 0;"
