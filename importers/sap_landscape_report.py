# app/importers/sap_landscape_report.py
# -*- coding: utf-8 -*-
"""
Tabellvisning av et parset landscape.

  projects.csv : Project, Systems, Memo
  systems.csv  : Project, Name, SystemID, Environment, Host, Instance,
                 Router, UUID, Memo
  sap_landscape.xlsx : arkene "Projects" og "Systems"

Alle kolonner skrives som tekst slik at instansnummer beholder ledende null.
"""
from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Sequence, Tuple
import logging
import pandas as pd

from .excel_writer import write_sheet, xlsx_writer
from .io_helpers import write_csv_no
from .sap_landscape_import import infer_environment
from .sap_landscape_models import ParsedProject

__all__ = ["projects_to_frames", "write_landscape_csv", "write_landscape_excel"]

logger = logging.getLogger(__name__)

PROJECT_COLS = ["Project", "Systems", "Memo"]
SYSTEM_COLS = ["Project", "Name", "SystemID", "Environment", "Host",
               "Instance", "Router", "UUID", "Memo"]


def projects_to_frames(projects: Sequence[ParsedProject],
                       include_memo: bool = True) -> Tuple[pd.DataFrame, pd.DataFrame]:
    prj_rows: List[Dict[str, str]] = []
    sys_rows: List[Dict[str, str]] = []
    for p in projects:
        prj_rows.append({
            "Project": p.name,
            "Systems": str(len(p.systems)),
            "Memo": (p.memo or "") if include_memo else "",
        })
        for s in p.systems:
            sys_rows.append({
                "Project": p.name,
                "Name": s.name,
                "SystemID": s.system_id,
                "Environment": infer_environment(s.name),
                "Host": s.server_host,
                "Instance": s.instance_number or "",
                "Router": s.router_string or "",
                "UUID": s.uuid,
                "Memo": (s.memo or "") if include_memo else "",
            })
    prj = pd.DataFrame(prj_rows, columns=PROJECT_COLS, dtype=str)
    sysdf = pd.DataFrame(sys_rows, columns=SYSTEM_COLS, dtype=str)
    if not include_memo:
        prj = prj.drop(columns=["Memo"])
        sysdf = sysdf.drop(columns=["Memo"])
    return prj, sysdf


def write_landscape_csv(projects: Sequence[ParsedProject], outdir: Path | str,
                        include_memo: bool = True) -> Tuple[Path, Path]:
    outdir = Path(outdir)
    prj, sysdf = projects_to_frames(projects, include_memo=include_memo)
    p1 = write_csv_no(prj, outdir / "projects.csv")
    p2 = write_csv_no(sysdf, outdir / "systems.csv")
    logger.info("[csv] Skrev %s og %s", p1, p2)
    return p1, p2


def write_landscape_excel(projects: Sequence[ParsedProject], path: Path | str,
                          include_memo: bool = True) -> Path:
    path = Path(path); path.parent.mkdir(parents=True, exist_ok=True)
    prj, sysdf = projects_to_frames(projects, include_memo=include_memo)
    with xlsx_writer(path) as xw:
        write_sheet(xw, "Projects", prj, wrap_cols=["Memo"])
        write_sheet(xw, "Systems", sysdf, wrap_cols=["Memo"])
    logger.info("[excel] Skrev %s", path)
    return path
