import csv
import json
from pathlib import Path

from apps.cli.run import main

WORDS = ["столи", "стуль", "слони", "столб", "колос", "книга"]


def _dictionary(tmp_path: Path) -> Path:
    p = tmp_path / "words.txt"
    p.write_text("\n".join(WORDS) + "\n", encoding="utf-8")
    return p


def test_main_writes_csv_and_manifest(tmp_path: Path, capsys):
    outdir = tmp_path / "out"
    code = main(["--dict", str(_dictionary(tmp_path)), "--sample", "2", "--seed", "1",
                 "--outdir", str(outdir), "--progress", "off"])
    assert code == 0

    csvs = list(outdir.glob("run_*.csv"))
    manifests = list(outdir.glob("run_*_manifest.json"))
    assert len(csvs) == 1 and len(manifests) == 1

    with csvs[0].open(newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 2
    assert {r["answer"] for r in rows} <= set(WORDS)

    manifest = json.loads(manifests[0].read_text(encoding="utf-8"))
    assert manifest["summary"]["games"] == 2
    assert manifest["config"]["sample"] == 2
    assert manifest["dictionary"]["count"] == len(WORDS)

    out = capsys.readouterr().out
    assert "words=6" in out
    assert "Wrote:" in out


def test_main_reports_missing_dictionary(tmp_path: Path, capsys):
    code = main(["--dict", str(tmp_path / "missing.txt"), "--outdir", str(tmp_path / "out"),
                 "--progress", "off"])
    assert code == 2
    assert "Cannot load dictionary" in capsys.readouterr().err
    assert not (tmp_path / "out").exists()
