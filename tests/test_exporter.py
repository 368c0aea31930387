"""
Тесты для ResultExporter.
"""

import json

import pandas as pd
import pytest

from word_scanner.components.exporter import ResultExporter, format_variants
from word_scanner.interfaces.scanner import WordRecord


@pytest.fixture
def words():
    return [
        WordRecord("gatto", 3, {"Gatto": 2, "gatto": 1}),
        WordRecord("cane", 1, {"cane": 1}),
    ]


@pytest.fixture
def exporter(tmp_path):
    return ResultExporter(output_dir=str(tmp_path), sheet_name="Parole")


class TestRows:

    def test_to_rows(self, exporter, words):
        rows = exporter.to_rows(words)

        assert len(rows) == 2
        assert rows[0][0] in words[0].variants
        assert rows[0][1] == 3
        assert rows[1] == ("cane", 1)

    def test_to_dataframe(self, exporter, words):
        df = exporter.to_dataframe(words)

        assert list(df.columns) == ["Word", "#", "Variants"]
        assert len(df) == 2
        assert df["#"].tolist() == [3, 1]
        assert df["Variants"].tolist() == ["Gatto:2; gatto:1", "cane:1"]

    def test_to_dataframe_empty(self, exporter):
        df = exporter.to_dataframe([])
        assert list(df.columns) == ["Word", "#", "Variants"]
        assert df.empty

    def test_format_variants(self):
        assert format_variants({"b": 1, "A": 2}) == "A:2; b:1"


class TestExport:

    def test_export_to_csv(self, exporter, words, tmp_path):
        path = exporter.export_to_csv(words, tmp_path / "parole")

        assert path == tmp_path / "parole.csv"
        df = pd.read_csv(path)
        assert df["#"].tolist() == [3, 1]

    def test_export_to_excel(self, exporter, words, tmp_path):
        path = exporter.export_to_excel(words, tmp_path / "parole.xlsx")

        df = pd.read_excel(path, sheet_name="Parole")
        assert df["Word"].tolist()[1] == "cane"
        assert df["#"].tolist() == [3, 1]

    def test_export_to_json(self, exporter, words, tmp_path):
        path = exporter.export_to_json(words, tmp_path / "sub" / "parole")

        assert path.suffix == ".json"
        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["metadata"]["unique_words"] == 2
        assert data["metadata"]["total_occurrences"] == 4
        assert data["words"][0] == {"word": "gatto", "count": 3, "variants": {"Gatto": 2, "gatto": 1}}

    @pytest.mark.parametrize("method", ["export_to_csv", "export_to_excel", "export_to_json"])
    def test_empty_list_is_skipped(self, exporter, tmp_path, method):
        assert getattr(exporter, method)([], tmp_path / "vuoto") is None
        assert list(tmp_path.iterdir()) == []

    def test_export_all_formats(self, exporter, words, tmp_path):
        exported = exporter.export_all_formats(words, "scan")

        assert set(exported) == {"excel", "csv", "json"}
        for path in exported.values():
            assert path.exists()
            assert path.parent == tmp_path
            assert path.name.startswith("scan_")
