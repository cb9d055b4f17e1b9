# app/importers/sap_landscape_cli.py
# -*- coding: utf-8 -*-
"""
CLI for SAP Landscape-import.
Bruk:
  python -m importers.sap_landscape_cli --input SAPUILandscape.xml [--outdir out] [--csv] [--excel] [--plan]

Uten --csv/--excel/--plan skrives bare en oversikt over prosjekter og systemer.
Exit-kode 1 betyr at fila ikke inneholdt noen importerbare SAP-systemer.
"""
from __future__ import annotations

from pathlib import Path
import argparse
import json
import logging

from .io_helpers import read_landscape_bytes
from .sap_landscape_import import build_import_plan, infer_environment, plan_to_dicts
from .sap_landscape_parser import parse_sap_config
from .sap_landscape_report import write_landscape_csv, write_landscape_excel

logger = logging.getLogger(__name__)

def _print_overview(projects) -> None:
    for p in projects:
        print(f"{p.name}  ({len(p.systems)} systemer)")
        for s in p.systems:
            inst = s.instance_number or "--"
            print(f"  [{infer_environment(s.name)}] {s.name:30s} {s.system_id:5s} {s.server_host}/{inst}")

def main(argv=None) -> int:
    p = argparse.ArgumentParser(
        description="SAP GUI Landscape (XML) → prosjekter og SAP-credentials"
    )
    p.add_argument("--input", required=True, help="SAPUILandscape.xml eller .zip")
    p.add_argument("--outdir", type=str, default=".", help="Output-mappe for CSV/Excel/plan")
    p.add_argument("--csv", action="store_true", help="Skriv projects.csv og systems.csv")
    p.add_argument("--excel", action="store_true", help="Skriv sap_landscape.xlsx")
    p.add_argument("--plan", action="store_true", help="Skriv import_plan.json")
    p.add_argument("--no-memo", action="store_true", help="Utelat memo-tekst i eksport")
    p.add_argument("-v", "--verbose", action="store_true")
    args = p.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    )

    try:
        data = read_landscape_bytes(args.input)
    except (FileNotFoundError, RuntimeError) as e:
        print(f"Feil: {e}")
        return 2

    projects = parse_sap_config(data)
    if not projects:
        print("Fant ingen gyldige SAP-systemer i fila.")
        return 1

    _print_overview(projects)
    outdir = Path(args.outdir)
    include_memo = not args.no_memo
    if args.csv:
        write_landscape_csv(projects, outdir, include_memo=include_memo)
    if args.excel:
        write_landscape_excel(projects, outdir / "sap_landscape.xlsx", include_memo=include_memo)
    if args.plan:
        outdir.mkdir(parents=True, exist_ok=True)
        ops = plan_to_dicts(build_import_plan(projects))
        with open(outdir / "import_plan.json", "w", encoding="utf-8") as f:
            json.dump(ops, f, ensure_ascii=False, indent=2)
        logger.info("Skrev import_plan.json (%d operasjoner)", len(ops))

    total = sum(len(x.systems) for x in projects)
    print(f"Ferdig! {len(projects)} prosjekter, {total} systemer")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
