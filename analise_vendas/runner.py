import logging
from datetime import date
from typing import Optional

import pandas as pd
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from analise_vendas.catalog import Report, find_report
from analise_vendas.config import get_filter_params
from analise_vendas.queries.schema_queries import REQUIRED_COLUMNS, schema_probe_sql

logger = logging.getLogger(__name__)


class ReportError(Exception):
    pass


class UnknownReportError(ReportError, LookupError):
    pass


class MissingParameterError(ReportError, ValueError):
    pass


class ReportDataError(ReportError):
    """The dataset could not produce the report (missing table/column, engine error)."""

    def __init__(self, report: Report, message: str):
        super().__init__(f"Report {report.numero} ({report.slug}) failed: {message}")
        self.report = report


def resolve_report(key) -> Report:
    report = find_report(key)
    if report is None:
        raise UnknownReportError(f"Unknown report: {key!r}")
    return report


def build_params(report: Report, ano: Optional[int] = None, data_referencia: Optional[date] = None) -> dict:
    provided = {
        "ano": ano,
        "data_referencia": data_referencia or date.today(),
    }
    params = {}
    for name in report.parametros:
        if provided[name] is None:
            raise MissingParameterError(f"Report {report.numero} ({report.slug}) requires '{name}'")
        params[name] = provided[name]

    filters = get_filter_params()
    params.update({name: filters[name] for name in report.filtros})
    return params


def check_schema(conn) -> None:
    for table in REQUIRED_COLUMNS:
        conn.execute(text(schema_probe_sql(table))).fetchall()


def format_percent(value) -> str:
    if value is None or pd.isna(value):
        return ""
    return f"{float(value):g}%"


def df_query(conn, sql: str, params: dict) -> pd.DataFrame:
    return pd.read_sql(text(sql), conn, params=params)


def run_report(engine, key, ano: Optional[int] = None, data_referencia: Optional[date] = None) -> pd.DataFrame:
    report = resolve_report(key)
    params = build_params(report, ano=ano, data_referencia=data_referencia)

    logger.info("Running report %s (%s) with %s", report.numero, report.slug, params)
    try:
        with engine.connect() as conn:
            check_schema(conn)
            df = df_query(conn, report.sql, params)
    # pandas re-raises engine errors from read_sql as its own DatabaseError.
    except (SQLAlchemyError, pd.errors.DatabaseError) as exc:
        logger.error("Report %s (%s) failed", report.numero, report.slug, exc_info=True)
        raise ReportDataError(report, str(exc.orig if getattr(exc, "orig", None) else exc)) from exc

    for column in report.percent_columns:
        df[column] = df[column].map(format_percent)

    logger.info("Report %s returned %d rows", report.slug, len(df))
    return df
