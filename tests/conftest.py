from datetime import date, datetime

import pytest
from sqlalchemy import create_engine, text

DDL = [
    """
    CREATE TABLE dim_cliente (
      cpf VARCHAR PRIMARY KEY,
      nome VARCHAR,
      email VARCHAR,
      data_nascimento DATE,
      bairro VARCHAR
    )
    """,
    """
    CREATE TABLE dim_produto (
      id_produto INTEGER PRIMARY KEY,
      sku VARCHAR,
      nome_produto VARCHAR,
      categoria VARCHAR
    )
    """,
    """
    CREATE TABLE fato_vendas (
      numero_pedido VARCHAR,
      id_produto INTEGER,
      cpf_cliente VARCHAR,
      nome_entrega VARCHAR,
      preco_venda DECIMAL(10, 2),
      valor_frete DECIMAL(10, 2),
      valor_total DECIMAL(10, 2),
      status_pedido VARCHAR,
      data_criacao TIMESTAMP,
      bairro_entrega VARCHAR,
      metodo_pagamento VARCHAR
    )
    """,
]

INSERT_CLIENTE = text(
    "INSERT INTO dim_cliente (cpf, nome, email, data_nascimento, bairro) "
    "VALUES (:cpf, :nome, :email, :data_nascimento, :bairro)"
)
INSERT_PRODUTO = text(
    "INSERT INTO dim_produto (id_produto, sku, nome_produto, categoria) "
    "VALUES (:id_produto, :sku, :nome_produto, :categoria)"
)
INSERT_VENDA = text(
    "INSERT INTO fato_vendas (numero_pedido, id_produto, cpf_cliente, nome_entrega, preco_venda, "
    "valor_frete, valor_total, status_pedido, data_criacao, bairro_entrega, metodo_pagamento) "
    "VALUES (:numero_pedido, :id_produto, :cpf_cliente, :nome_entrega, :preco_venda, "
    ":valor_frete, :valor_total, :status_pedido, :data_criacao, :bairro_entrega, :metodo_pagamento)"
)


class SalesDB:
    def __init__(self, engine):
        self.engine = engine

    def add_customer(self, cpf, bairro="Centro", data_nascimento=date(1990, 1, 1), nome=None):
        with self.engine.begin() as conn:
            conn.execute(INSERT_CLIENTE, {
                "cpf": cpf,
                "nome": nome or f"Cliente {cpf}",
                "email": f"{cpf}@example.com",
                "data_nascimento": data_nascimento,
                "bairro": bairro,
            })

    def add_product(self, id_produto, categoria="Bolos", nome_produto=None):
        with self.engine.begin() as conn:
            conn.execute(INSERT_PRODUTO, {
                "id_produto": id_produto,
                "sku": f"SKU-{id_produto}",
                "nome_produto": nome_produto or f"Produto {id_produto}",
                "categoria": categoria,
            })

    def add_order(
        self,
        numero_pedido,
        cpf_cliente,
        lines,
        valor_total,
        valor_frete=0,
        status="Pedido Entregue",
        data_criacao=datetime(2024, 1, 15, 10, 0),
        nome_entrega=None,
        bairro_entrega="Centro",
        metodo_pagamento="Pix",
    ):
        """lines: list of (id_produto, preco_venda); order-level values repeat on each line."""
        rows = [
            {
                "numero_pedido": numero_pedido,
                "id_produto": id_produto,
                "cpf_cliente": cpf_cliente,
                "nome_entrega": nome_entrega if nome_entrega is not None else f"Cliente {cpf_cliente}",
                "preco_venda": preco_venda,
                "valor_frete": valor_frete,
                "valor_total": valor_total,
                "status_pedido": status,
                "data_criacao": data_criacao,
                "bairro_entrega": bairro_entrega,
                "metodo_pagamento": metodo_pagamento,
            }
            for id_produto, preco_venda in lines
        ]
        with self.engine.begin() as conn:
            conn.execute(INSERT_VENDA, rows)

    def scalar(self, sql, params=None):
        with self.engine.connect() as conn:
            return conn.execute(text(sql), params or {}).scalar()


@pytest.fixture
def engine(tmp_path):
    engine = create_engine(f"duckdb:///{tmp_path / 'vendas.duckdb'}")
    with engine.begin() as conn:
        for ddl in DDL:
            conn.execute(text(ddl))
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    return SalesDB(engine)


@pytest.fixture
def populated_db(db):
    """A small but varied dataset shared by the property tests."""
    bairros = ["Centro", "Centro", "Savassi", "Savassi", "Savassi", "Lourdes", "Funcionários", "Pampulha"]
    nascimentos = [
        date(2010, 6, 1),
        date(2004, 3, 20),
        date(2000, 12, 31),
        date(1996, 7, 7),
        date(1990, 1, 1),
        date(1988, 10, 18),
        date(1970, 5, 5),
        date(1955, 2, 28),
    ]
    for i, (bairro, nascimento) in enumerate(zip(bairros, nascimentos), start=1):
        db.add_customer(f"{i:03d}", bairro=bairro, data_nascimento=nascimento)

    db.add_product(1, categoria="Bolos")
    db.add_product(2, categoria="Doces")
    db.add_product(3, categoria="Salgados")
    db.add_product(4, categoria="Bebidas")

    db.add_order("P1", "001", [(1, 80), (2, 20)], valor_total=110, valor_frete=10,
                 data_criacao=datetime(2024, 1, 5), metodo_pagamento="Pix")
    db.add_order("P2", "001", [(3, 40)], valor_total=45, valor_frete=5,
                 data_criacao=datetime(2024, 2, 10), metodo_pagamento="Cartão de Crédito")
    db.add_order("P3", "002", [(1, 90), (4, 10), (2, 25)], valor_total=140, valor_frete=15,
                 data_criacao=datetime(2024, 2, 20), bairro_entrega="Savassi", metodo_pagamento="Pix")
    db.add_order("P4", "003", [(2, 30)], valor_total=1000, valor_frete=0,
                 status="Pedido Cancelado", data_criacao=datetime(2024, 2, 21), metodo_pagamento="Boleto")
    db.add_order("P5", "004", [(4, 12), (1, 70)], valor_total=500, valor_frete=0,
                 status="Pagamento devolvido", data_criacao=datetime(2024, 3, 1), metodo_pagamento="Boleto")
    db.add_order("P6", "002", [(3, 55)], valor_total=60, valor_frete=5,
                 data_criacao=datetime(2023, 12, 24), bairro_entrega="Savassi", metodo_pagamento="Pix")
    db.add_order("P7", "005", [(1, 85), (1, 85)], valor_total=180, valor_frete=10,
                 data_criacao=datetime(2024, 3, 3), bairro_entrega="Lourdes", metodo_pagamento="Cartão de Crédito")
    db.add_order("P8", "999", [(2, 15)], valor_total=20, valor_frete=5, nome_entrega="Consumidor Final",
                 data_criacao=datetime(2024, 3, 9), metodo_pagamento="Dinheiro")
    db.add_order("P9", "006", [(4, 8)], valor_total=8, valor_frete=0, status=None,
                 data_criacao=datetime(2024, 4, 2), bairro_entrega="Lourdes", metodo_pagamento="Pix")
    return db
