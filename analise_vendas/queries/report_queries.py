# Customers by neighborhood (top 10)
SQL_CUSTOMERS_BY_NEIGHBORHOOD = """
SELECT
  COALESCE(bairro, 'Não informado') AS bairro,
  COUNT(*)                          AS qtd_clientes,
  ROUND(CAST(100.0 * COUNT(*) / SUM(COUNT(*)) OVER () AS NUMERIC), 2) AS percentual
FROM dim_cliente
GROUP BY 1
ORDER BY qtd_clientes DESC, bairro
LIMIT 10;
"""


SQL_MONTHLY_NET_SALES = """
WITH pedidos AS (
  SELECT
    numero_pedido,
    valor_total,
    valor_frete,
    data_criacao,
    ROW_NUMBER() OVER (PARTITION BY numero_pedido ORDER BY id_produto) AS linha
  FROM fato_vendas
  WHERE COALESCE(status_pedido, '') NOT IN (:status_cancelado, :status_devolvido)
)
SELECT
  CAST(EXTRACT(MONTH FROM data_criacao) AS INTEGER) AS mes,
  ROUND(CAST(COALESCE(SUM(valor_total - valor_frete), 0) AS NUMERIC), 2) AS vendas_liquidas
FROM pedidos
WHERE linha = 1
  AND EXTRACT(YEAR FROM data_criacao) = :ano
GROUP BY 1
ORDER BY mes;
"""


SQL_TOP_PRODUCTS = """
SELECT
  f.id_produto,
  COALESCE(p.nome_produto, 'Desconhecido') AS nome_produto,
  COUNT(*)                                 AS qtd_vendida
FROM fato_vendas f
LEFT JOIN dim_produto p ON p.id_produto = f.id_produto
WHERE COALESCE(f.status_pedido, '') NOT IN (:status_cancelado, :status_devolvido)
GROUP BY f.id_produto, p.nome_produto
ORDER BY qtd_vendida DESC, f.id_produto
LIMIT 5;
"""


SQL_ORDERS_BY_PAYMENT_METHOD = """
WITH pedidos AS (
  SELECT
    numero_pedido,
    metodo_pagamento,
    ROW_NUMBER() OVER (PARTITION BY numero_pedido ORDER BY id_produto) AS linha
  FROM fato_vendas
  WHERE COALESCE(status_pedido, '') NOT IN (:status_cancelado, :status_devolvido)
)
SELECT
  COALESCE(metodo_pagamento, 'Não informado') AS metodo_pagamento,
  COUNT(*)                                    AS qtd_pedidos
FROM pedidos
WHERE linha = 1
GROUP BY 1
ORDER BY qtd_pedidos DESC, metodo_pagamento;
"""


SQL_CUSTOMER_SPEND = """
WITH pedidos AS (
  SELECT
    numero_pedido,
    cpf_cliente,
    nome_entrega,
    valor_total,
    valor_frete,
    ROW_NUMBER() OVER (PARTITION BY numero_pedido ORDER BY id_produto) AS linha
  FROM fato_vendas
  WHERE COALESCE(status_pedido, '') NOT IN (:status_cancelado, :status_devolvido)
    AND COALESCE(nome_entrega, '') <> :cliente_placeholder
)
SELECT
  cpf_cliente,
  MAX(nome_entrega)                                              AS cliente,
  COUNT(*)                                                       AS qtd_pedidos,
  ROUND(CAST(SUM(valor_total - valor_frete) AS NUMERIC), 2)      AS total_spent,
  ROUND(CAST(SUM(valor_total - valor_frete) / COUNT(*) AS NUMERIC), 2) AS avg_ticket
FROM pedidos
WHERE linha = 1
GROUP BY cpf_cliente
ORDER BY total_spent DESC, cpf_cliente;
"""


SQL_TOP_CATEGORIES_BY_REVENUE = """
SELECT
  p.categoria,
  ROUND(CAST(COALESCE(SUM(f.preco_venda), 0) AS NUMERIC), 2) AS receita_total
FROM dim_produto p
JOIN fato_vendas f ON f.id_produto = p.id_produto
WHERE COALESCE(f.status_pedido, '') NOT IN (:status_cancelado, :status_devolvido)
GROUP BY p.categoria
ORDER BY receita_total DESC, p.categoria
LIMIT 10;
"""


SQL_REPEAT_BUYER_RATE = """
WITH pedidos AS (
  SELECT
    numero_pedido,
    cpf_cliente,
    ROW_NUMBER() OVER (PARTITION BY numero_pedido ORDER BY id_produto) AS linha
  FROM fato_vendas
  WHERE COALESCE(status_pedido, '') NOT IN (:status_cancelado, :status_devolvido)
    AND COALESCE(nome_entrega, '') <> :cliente_placeholder
),
compras AS (
  SELECT cpf_cliente, COUNT(*) AS qtd_pedidos
  FROM pedidos
  WHERE linha = 1
  GROUP BY cpf_cliente
)
SELECT
  CASE WHEN qtd_pedidos > 1 THEN 'Recorrente' ELSE 'Compra única' END AS perfil,
  COUNT(*) AS qtd_clientes,
  ROUND(CAST(100.0 * COUNT(*) / SUM(COUNT(*)) OVER () AS NUMERIC), 2) AS percentual
FROM compras
GROUP BY 1
ORDER BY perfil DESC;
"""


SQL_NEIGHBORHOOD_CATEGORY_SALES = """
SELECT
  COALESCE(f.bairro_entrega, 'Não informado') AS bairro,
  p.categoria,
  COUNT(*)                                     AS qtd_vendas
FROM fato_vendas f
JOIN dim_produto p ON p.id_produto = f.id_produto
WHERE COALESCE(f.status_pedido, '') NOT IN (:status_cancelado, :status_devolvido)
GROUP BY 1, p.categoria
HAVING COUNT(*) > 1
ORDER BY bairro, qtd_vendas DESC, p.categoria;
"""


SQL_CATEGORY_AVERAGE_TICKET = """
SELECT
  p.categoria,
  ROUND(CAST(SUM(f.preco_venda) AS NUMERIC), 2)            AS receita_total,
  COUNT(*)                                                 AS qtd_vendas,
  ROUND(CAST(SUM(f.preco_venda) / COUNT(*) AS NUMERIC), 2) AS ticket_medio
FROM dim_produto p
JOIN fato_vendas f ON f.id_produto = p.id_produto
WHERE COALESCE(f.status_pedido, '') NOT IN (:status_cancelado, :status_devolvido)
GROUP BY p.categoria
ORDER BY ticket_medio DESC, p.categoria
LIMIT 10;
"""


# Age is whole years at :data_referencia; a birthday later in the year
# has not happened yet. A missing birth date gets its own bucket.
SQL_CUSTOMER_AGE_BUCKETS = """
WITH idades AS (
  SELECT
    EXTRACT(YEAR FROM CAST(:data_referencia AS DATE)) - EXTRACT(YEAR FROM data_nascimento)
    - CASE
        WHEN EXTRACT(MONTH FROM data_nascimento) * 100 + EXTRACT(DAY FROM data_nascimento)
           > EXTRACT(MONTH FROM CAST(:data_referencia AS DATE)) * 100
             + EXTRACT(DAY FROM CAST(:data_referencia AS DATE))
        THEN 1 ELSE 0
      END AS idade
  FROM dim_cliente
),
faixas AS (
  SELECT
    CASE
      WHEN idade IS NULL THEN 'Não informado'
      WHEN idade <= 17 THEN '0-17'
      WHEN idade BETWEEN 18 AND 23 THEN '18-23'
      WHEN idade BETWEEN 24 AND 29 THEN '24-29'
      WHEN idade BETWEEN 30 AND 35 THEN '30-35'
      ELSE '35+'
    END AS faixa_etaria,
    CASE
      WHEN idade IS NULL THEN 6
      WHEN idade <= 17 THEN 1
      WHEN idade BETWEEN 18 AND 23 THEN 2
      WHEN idade BETWEEN 24 AND 29 THEN 3
      WHEN idade BETWEEN 30 AND 35 THEN 4
      ELSE 5
    END AS ordem
  FROM idades
)
SELECT
  faixa_etaria,
  COUNT(*) AS qtd_clientes,
  ROUND(CAST(100.0 * COUNT(*) / SUM(COUNT(*)) OVER () AS NUMERIC), 2) AS percentual
FROM faixas
GROUP BY faixa_etaria, ordem
ORDER BY ordem;
"""


SQL_NET_SALES_HISTORY = """
WITH pedidos AS (
  SELECT
    numero_pedido,
    valor_total,
    valor_frete,
    data_criacao,
    ROW_NUMBER() OVER (PARTITION BY numero_pedido ORDER BY id_produto) AS linha
  FROM fato_vendas
  WHERE COALESCE(status_pedido, '') NOT IN (:status_cancelado, :status_devolvido)
)
SELECT
  CAST(EXTRACT(YEAR FROM data_criacao) AS INTEGER)  AS ano,
  CAST(EXTRACT(MONTH FROM data_criacao) AS INTEGER) AS mes,
  ROUND(CAST(COALESCE(SUM(valor_total - valor_frete), 0) AS NUMERIC), 2) AS vendas_liquidas
FROM pedidos
WHERE linha = 1
GROUP BY 1, 2
ORDER BY ano, mes;
"""
