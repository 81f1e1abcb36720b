from dataclasses import dataclass
from typing import Tuple

from analise_vendas.queries import report_queries as q


@dataclass(frozen=True)
class Report:
    numero: int
    slug: str
    titulo: str
    pergunta: str
    sql: str
    # Caller-supplied parameters ("ano", "data_referencia") the SQL binds.
    parametros: Tuple[str, ...] = ()
    # Shared bind parameters from config.get_filter_params().
    filtros: Tuple[str, ...] = ()
    percent_columns: Tuple[str, ...] = ()

    def describe(self) -> dict:
        return {
            "numero": self.numero,
            "slug": self.slug,
            "titulo": self.titulo,
            "pergunta": self.pergunta,
            "parametros": list(self.parametros),
        }


STATUS_FILTERS = ("status_cancelado", "status_devolvido")
CUSTOMER_FILTERS = STATUS_FILTERS + ("cliente_placeholder",)


REPORTS = (
    Report(
        numero=1,
        slug="customers-by-neighborhood",
        titulo="Customers by neighborhood",
        pergunta="Quais bairros concentram mais clientes cadastrados?",
        sql=q.SQL_CUSTOMERS_BY_NEIGHBORHOOD,
        percent_columns=("percentual",),
    ),
    Report(
        numero=2,
        slug="monthly-net-sales",
        titulo="Monthly net sales",
        pergunta="Qual foi a venda líquida (total menos frete) de cada mês do ano?",
        sql=q.SQL_MONTHLY_NET_SALES,
        parametros=("ano",),
        filtros=STATUS_FILTERS,
    ),
    Report(
        numero=3,
        slug="top-products",
        titulo="Top products by units sold",
        pergunta="Quais são os 5 produtos mais vendidos?",
        sql=q.SQL_TOP_PRODUCTS,
        filtros=STATUS_FILTERS,
    ),
    Report(
        numero=4,
        slug="orders-by-payment-method",
        titulo="Orders by payment method",
        pergunta="Quais formas de pagamento os clientes mais usam?",
        sql=q.SQL_ORDERS_BY_PAYMENT_METHOD,
        filtros=STATUS_FILTERS,
    ),
    Report(
        numero=5,
        slug="customer-spend",
        titulo="Customer spend and average ticket",
        pergunta="Quanto cada cliente gasta e qual é o seu ticket médio?",
        sql=q.SQL_CUSTOMER_SPEND,
        filtros=CUSTOMER_FILTERS,
    ),
    Report(
        numero=6,
        slug="top-categories-by-revenue",
        titulo="Top categories by revenue",
        pergunta="Quais categorias trazem mais receita?",
        sql=q.SQL_TOP_CATEGORIES_BY_REVENUE,
        filtros=STATUS_FILTERS,
    ),
    Report(
        numero=7,
        slug="repeat-buyer-rate",
        titulo="Repeat buyer rate",
        pergunta="Qual a porcentagem de clientes que compraram mais de uma vez?",
        sql=q.SQL_REPEAT_BUYER_RATE,
        filtros=CUSTOMER_FILTERS,
        percent_columns=("percentual",),
    ),
    Report(
        numero=8,
        slug="neighborhood-category-sales",
        titulo="Category sales by neighborhood",
        pergunta="Quais categorias vendem mais em cada bairro?",
        sql=q.SQL_NEIGHBORHOOD_CATEGORY_SALES,
        filtros=STATUS_FILTERS,
    ),
    Report(
        numero=9,
        slug="category-average-ticket",
        titulo="Average ticket by category",
        pergunta="Quais categorias têm o maior ticket médio?",
        sql=q.SQL_CATEGORY_AVERAGE_TICKET,
        filtros=STATUS_FILTERS,
    ),
    Report(
        numero=10,
        slug="customer-age-buckets",
        titulo="Customers by age bucket",
        pergunta="Qual a distribuição de idade dos clientes?",
        sql=q.SQL_CUSTOMER_AGE_BUCKETS,
        parametros=("data_referencia",),
        percent_columns=("percentual",),
    ),
    Report(
        numero=11,
        slug="net-sales-history",
        titulo="Net sales history",
        pergunta="Como a venda líquida evoluiu mês a mês ao longo do tempo?",
        sql=q.SQL_NET_SALES_HISTORY,
        filtros=STATUS_FILTERS,
    ),
)

REPORTS_BY_NUMBER = {r.numero: r for r in REPORTS}
REPORTS_BY_SLUG = {r.slug: r for r in REPORTS}


def find_report(key):
    """Look a report up by number (int or digit string) or slug; None if unknown."""
    if isinstance(key, int):
        return REPORTS_BY_NUMBER.get(key)
    key = str(key).strip()
    if key.isdigit():
        return REPORTS_BY_NUMBER.get(int(key))
    return REPORTS_BY_SLUG.get(key)
