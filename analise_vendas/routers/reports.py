import json
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from analise_vendas.catalog import REPORTS
from analise_vendas.db import get_engine
from analise_vendas.runner import (
    MissingParameterError,
    ReportDataError,
    UnknownReportError,
    resolve_report,
    run_report,
)

router = APIRouter(prefix="/reports", tags=["reports"])


# =========================
# Catalog
# =========================
@router.get("")
def list_reports():
    return {"reports": [r.describe() for r in REPORTS]}


# =========================
# Single report
# =========================
@router.get("/{report_key}")
def get_report(
    report_key: str,
    ano: Optional[int] = Query(None, ge=1900, le=2100, description="Year (monthly-net-sales)"),
    data_referencia: Optional[date] = Query(None, description="YYYY-MM-DD, defaults to today (customer-age-buckets)"),
    engine=Depends(get_engine),
):
    data_referencia = data_referencia or date.today()
    try:
        report = resolve_report(report_key)
        df = run_report(engine, report.numero, ano=ano, data_referencia=data_referencia)
    except UnknownReportError as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    except MissingParameterError as exc:
        raise HTTPException(status_code=422, detail=str(exc))
    except ReportDataError as exc:
        raise HTTPException(status_code=500, detail=str(exc))

    return {
        **report.describe(),
        "params": {"ano": ano, "data_referencia": data_referencia},
        "columns": list(df.columns),
        "rows": json.loads(df.to_json(orient="records", date_format="iso", force_ascii=False)),
    }
