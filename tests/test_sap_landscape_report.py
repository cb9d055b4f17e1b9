import sys
import zipfile
from pathlib import Path

import pandas as pd
import pytest

# Sørg for at prosjektroten (der importers/ ligger) er på sys.path
ROOT = Path(__file__).resolve().parents[1]
root_str = str(ROOT)
if root_str not in sys.path:
    sys.path.insert(0, root_str)

from importers.io_helpers import read_landscape_bytes  # type: ignore[import]
from importers.sap_landscape_parser import parse_sap_config  # type: ignore[import]
from importers.sap_landscape_report import (  # type: ignore[import]
    projects_to_frames,
    write_landscape_csv,
    write_landscape_excel,
)
from importers.sap_landscape_cli import main as cli_main  # type: ignore[import]
from landscape_samples import MAX_SERVICE, MAX_SERVICE_WITH_ROUTER, ROUTER_STRING  # type: ignore[import]


def test_frames_keep_instance_as_text():
    prj, sysdf = projects_to_frames(parse_sap_config(MAX_SERVICE_WITH_ROUTER))
    assert prj["Project"].tolist() == ["7.MAx Service"]
    assert prj["Systems"].tolist() == ["2"]
    assert sysdf["Instance"].tolist() == ["00", "00"]
    assert sysdf["Environment"].tolist() == ["DEV", "QAS"]
    assert sysdf["Router"].tolist() == [ROUTER_STRING, ROUTER_STRING]


def test_frames_without_memo():
    prj, sysdf = projects_to_frames(parse_sap_config(MAX_SERVICE), include_memo=False)
    assert "Memo" not in prj.columns
    assert "Memo" not in sysdf.columns


def test_frames_for_empty_input_have_columns():
    prj, sysdf = projects_to_frames([])
    assert prj.empty and sysdf.empty
    assert "Instance" in sysdf.columns


def test_write_csv_roundtrip(tmp_path):
    p1, p2 = write_landscape_csv(parse_sap_config(MAX_SERVICE), tmp_path / "csv")
    assert p1.name == "projects.csv" and p2.name == "systems.csv"
    df = pd.read_csv(p2, dtype=str, sep=";", encoding="utf-8-sig", keep_default_na=False)
    assert df["Name"].tolist() == ["Max Service DEV", "Max Service QAS"]
    assert df["Instance"].tolist() == ["00", "00"]


def test_write_excel(tmp_path):
    out = write_landscape_excel(parse_sap_config(MAX_SERVICE), tmp_path / "x" / "sap_landscape.xlsx")
    assert out.exists() and out.stat().st_size > 0


def test_read_landscape_from_zip(tmp_path):
    z = tmp_path / "landscape.zip"
    with zipfile.ZipFile(z, "w") as zf:
        zf.writestr("readme.txt", "ikke denne")
        zf.writestr("SAPUILandscape.xml", MAX_SERVICE)
    assert len(parse_sap_config(read_landscape_bytes(z))) == 1


def test_read_landscape_errors(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_landscape_bytes(tmp_path / "mangler.xml")
    z = tmp_path / "tom.zip"
    with zipfile.ZipFile(z, "w") as zf:
        zf.writestr("readme.txt", "ingen xml")
    with pytest.raises(RuntimeError):
        read_landscape_bytes(z)


def test_cli_writes_exports_and_plan(tmp_path, capsys):
    src = tmp_path / "SAPUILandscape.xml"
    src.write_text(MAX_SERVICE_WITH_ROUTER, encoding="utf-8")
    out = tmp_path / "out"
    rc = cli_main(["--input", str(src), "--outdir", str(out), "--csv", "--plan", "--no-memo"])
    assert rc == 0
    assert (out / "projects.csv").exists()
    assert (out / "systems.csv").exists()
    plan = (out / "import_plan.json").read_text(encoding="utf-8")
    assert '"op": "create_project"' in plan
    assert "7.MAx Service" in capsys.readouterr().out


def test_cli_exit_codes(tmp_path):
    empty = tmp_path / "tom.xml"
    empty.write_text("<Landscape/>", encoding="utf-8")
    assert cli_main(["--input", str(empty)]) == 1
    assert cli_main(["--input", str(tmp_path / "mangler.xml")]) == 2
