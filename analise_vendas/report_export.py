import argparse
import logging
import os
import sys
from datetime import date

import pandas as pd

from analise_vendas.catalog import REPORTS
from analise_vendas.db import get_engine
from analise_vendas.runner import ReportError, resolve_report, run_report

logger = logging.getLogger(__name__)

# Excel caps sheet names at 31 characters.
MAX_SHEET_NAME = 31


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Generate e-commerce analytic reports")
    parser.add_argument(
        "--report",
        dest="reports",
        action="append",
        help="Report number or slug (repeatable, default: all)",
    )
    parser.add_argument(
        "--ano",
        type=int,
        default=date.today().year,
        help="Year for the monthly net sales report",
    )
    parser.add_argument(
        "--data-referencia",
        type=date.fromisoformat,
        default=None,
        help="Reference date for customer ages (YYYY-MM-DD, default: today)",
    )
    parser.add_argument(
        "--output-dir",
        default="outputs",
        help="Directory for the Excel workbook",
    )
    return parser.parse_args(argv)


def run_selected(engine, keys=None, ano=None, data_referencia=None):
    """Run the selected reports in the given order; all of them when keys is empty."""
    selected = [resolve_report(k) for k in keys] if keys else list(REPORTS)
    return [
        (report, run_report(engine, report.numero, ano=ano, data_referencia=data_referencia))
        for report in selected
    ]


def sheet_name(report) -> str:
    return f"{report.numero:02d}_{report.slug}"[:MAX_SHEET_NAME]


def export_excel(results, out_xlsx: str) -> str:
    with pd.ExcelWriter(out_xlsx, engine="openpyxl") as writer:
        for report, df in results:
            df.to_excel(writer, index=False, sheet_name=sheet_name(report))
    return out_xlsx


def build_summary(results, preview_rows: int = 3) -> str:
    lines = []
    for report, df in results:
        lines.append(f"{report.numero}. {report.titulo} ({len(df)} rows)")
        lines.append(f"   {report.pergunta}")
        if len(df) == 0:
            lines.append("   (no data)")
            continue
        preview = df.head(preview_rows).to_string(index=False)
        lines.extend(f"   {line}" for line in preview.splitlines())
    return "\n".join(lines)


def main(argv=None):
    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    args = parse_args(argv)

    try:
        engine = get_engine()
        results = run_selected(
            engine,
            keys=args.reports,
            ano=args.ano,
            data_referencia=args.data_referencia,
        )
    except (ReportError, RuntimeError) as exc:
        print(f"[ERROR] {exc}", file=sys.stderr)
        return 1

    os.makedirs(args.output_dir, exist_ok=True)
    out_xlsx = os.path.join(args.output_dir, f"ecommerce_reports_{date.today().isoformat()}.xlsx")
    export_excel(results, out_xlsx)

    print(f"E-commerce reports (ano {args.ano})")
    print(build_summary(results))
    print(f"\nSaved Excel report: {out_xlsx}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
