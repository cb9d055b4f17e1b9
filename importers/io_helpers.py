# app/importers/io_helpers.py
# -*- coding: utf-8 -*-
from __future__ import annotations

from pathlib import Path
import zipfile
import pandas as pd

__all__ = ["read_landscape_bytes", "write_csv_no"]

def read_landscape_bytes(path: Path | str) -> bytes:
    """Leser SAPUILandscape.xml direkte eller første .xml i en .zip."""
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Fant ikke fil: {p}")
    if p.suffix.lower() == ".zip":
        with zipfile.ZipFile(p, "r") as zf:
            names = [n for n in zf.namelist() if n.lower().endswith(".xml")]
            if not names:
                raise RuntimeError("Ingen .xml i zip-arkivet")
            return zf.read(names[0])
    return p.read_bytes()

def write_csv_no(df: pd.DataFrame, path: Path | str) -> Path:
    p = Path(path); p.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(p, index=False, sep=";", encoding="utf-8-sig")
    return p
