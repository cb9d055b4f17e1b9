# app/importers/excel_writer.py
# -*- coding: utf-8 -*-
from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence
import pandas as pd

__all__ = ["xlsx_writer", "write_sheet", "autofit_columns"]

def xlsx_writer(path: Path | str) -> pd.ExcelWriter:
    # instansnummer "00" og routerstrenger skal forbli tekst
    return pd.ExcelWriter(
        str(path),
        engine="xlsxwriter",
        engine_kwargs={"options": {
            "strings_to_urls": False,
            "strings_to_numbers": False,
            "strings_to_formulas": False,
        }},
    )

def autofit_columns(ws, df: pd.DataFrame, max_width: int = 60, min_width: int = 6) -> None:
    if df is None or df.empty:
        return
    sample = df.head(500)
    def _disp_len(x) -> int:
        if pd.isna(x): return 0
        # flerlinjers memo: bredeste linje teller
        s = max(str(x).splitlines() or [""], key=len)
        base = len(s)
        if any(ord(ch) > 127 for ch in s): base = int(base * 1.1)
        return base
    for i, c in enumerate(df.columns):
        body_len = max((_disp_len(v) for v in sample[c].tolist()), default=0)
        w = min(max(_disp_len(c), body_len) + 2, max_width)
        ws.set_column(i, i, max(w, min_width))

def write_sheet(writer: pd.ExcelWriter, sheet_name: str, df: pd.DataFrame,
                wrap_cols: Optional[Sequence[str]] = None,
                freeze_header: bool = True, autofit: bool = True) -> None:
    out = df.copy() if df is not None else pd.DataFrame()
    out.to_excel(writer, index=False, sheet_name=sheet_name)
    try:
        book = writer.book
        ws = writer.sheets[sheet_name]
        if freeze_header and len(out.columns) > 0:
            ws.freeze_panes(1, 0)
        if autofit:
            autofit_columns(ws, out)
        fmt_wrap = book.add_format({"text_wrap": True, "valign": "top"})
        cols = list(out.columns)
        for c in (wrap_cols or []):
            if c in cols:
                ws.set_column(cols.index(c), cols.index(c), 60, fmt_wrap)
    except Exception:
        # formatering er kosmetisk, data er allerede skrevet
        pass
