"""
Tests for catalogue ingestion (CSV and in-memory rows).
"""

import csv

import pandas as pd
import pytest

from catalogs.catalogue_loader import (
    MIN_FIELDS, load_catalogue, records_from_frame, records_from_rows,
)

HEADER = ["id", "hip", "hd", "hr", "gl", "bf", "proper", "ra", "dec", "dist",
          "pmra", "pmdec", "rv", "mag", "absmag", "spect"]


def make_row(id="1", name="", ra="6.75", dec="-16.7", dist="2.64",
             mag="-1.46", absmag="1.42", spect=""):
    row = [""] * MIN_FIELDS
    row[0], row[6], row[7], row[8], row[9] = id, name, ra, dec, dist
    row[13], row[14], row[15] = mag, absmag, spect
    return row


def write_csv(path, rows):
    with open(path, "w", newline="", encoding="utf-8") as f:
        csv.writer(f).writerows(rows)


class TestRowAcceptance:

    def test_valid_row(self):
        records = records_from_rows([make_row(id="32263", name="Sirius", spect="A1V")])
        assert len(records) == 1
        r = records[0]
        assert r.id == 32263
        assert r.name == "Sirius"
        assert r.right_ascension == 6.75
        assert r.declination == -16.7
        assert r.apparent_magnitude == -1.46
        assert r.absolute_magnitude == 1.42
        assert r.distance == 2.64
        assert r.spectral_class == "A1V"

    def test_header_row_is_dropped(self):
        records = records_from_rows([HEADER, make_row()])
        assert len(records) == 1

    @pytest.mark.parametrize("field", ["mag", "ra", "dec"])
    def test_missing_required_field(self, field):
        assert records_from_rows([make_row(**{field: ""})]) == []

    @pytest.mark.parametrize("field", ["mag", "ra", "dec"])
    def test_non_numeric_required_field(self, field):
        assert records_from_rows([make_row(**{field: "abc"})]) == []

    def test_non_numeric_id_is_dropped(self):
        assert records_from_rows([make_row(id="x1")]) == []

    def test_zero_values_are_present(self):
        records = records_from_rows([make_row(ra="0", dec="0", mag="0")])
        assert len(records) == 1
        assert records[0].right_ascension == 0.0

    def test_short_row_is_dropped(self):
        assert records_from_rows([["1", "", "", "", "", "", "Sol", "0", "0"]]) == []


class TestOptionalFields:

    def test_missing_name_and_class_are_none(self):
        r = records_from_rows([make_row(name="  ", spect="")])[0]
        assert r.name is None
        assert r.spectral_class is None

    def test_missing_numeric_optionals_are_zero(self):
        r = records_from_rows([make_row(dist="", absmag="n/a")])[0]
        assert r.distance == 0.0
        assert r.absolute_magnitude == 0.0

    def test_native_numbers_and_none(self):
        row = [7, None, None, None, None, None, None, 1.5, 20.0, 10.0,
               None, None, None, 3.2, 1.0, None]
        r = records_from_rows([row])[0]
        assert r.id == 7
        assert r.apparent_magnitude == 3.2
        assert r.name is None
        assert r.spectral_class is None


class TestReporting:

    def test_warning_when_enabled(self, capsys):
        records_from_rows([HEADER, make_row(), make_row(mag="")], report_malformed=True)
        assert "skipped 1 malformed catalog rows" in capsys.readouterr().out

    def test_header_is_not_counted_as_malformed(self, capsys):
        records_from_rows([HEADER, make_row(), make_row(id="2")], report_malformed=True)
        assert "malformed" not in capsys.readouterr().out

    def test_bad_first_row_is_still_counted(self, capsys):
        records_from_rows([make_row(mag=""), make_row()], report_malformed=True)
        assert "skipped 1 malformed catalog rows" in capsys.readouterr().out

    def test_silent_by_default(self, capsys):
        records_from_rows([HEADER, make_row()])
        assert "malformed" not in capsys.readouterr().out

    def test_empty_input(self):
        assert records_from_rows([]) == []
        assert records_from_frame(pd.DataFrame()) == []


class TestLoadCatalogue:

    def test_reads_csv_file(self, tmp_path):
        path = tmp_path / "stars.csv"
        write_csv(path, [
            HEADER,
            make_row(id="0", name="Sol", ra="0", dec="0", dist="0", mag="-26.7", spect="G2V"),
            make_row(id="32263", name="Sirius", spect="A1V"),
            make_row(id="5", mag=""),
        ])
        records = load_catalogue(path)
        assert [r.id for r in records] == [0, 32263]
        assert records[1].name == "Sirius"
        assert records[0].spectral_class == "G2V"

    def test_missing_file_gives_empty_catalog(self, tmp_path, capsys):
        assert load_catalogue(tmp_path / "nope.csv") == []
        assert "Catalog file not found" in capsys.readouterr().out

    def test_rows_longer_than_first_line_are_kept(self, tmp_path, capsys):
        path = tmp_path / "stars.csv"
        write_csv(path, [
            HEADER,
            make_row(id="1", name="Sirius"),
            make_row(id="2", name="Canopus", ra="6.4", dec="-52.7", mag="-0.74",
                     spect="A9II") + ["extra"],
        ])
        records = load_catalogue(path, report_malformed=True)
        assert [r.id for r in records] == [1, 2]
        assert records[1].apparent_magnitude == -0.74
        assert records[1].spectral_class == "A9II"
        assert "malformed" not in capsys.readouterr().out

    def test_quoted_names_with_commas(self, tmp_path):
        path = tmp_path / "stars.csv"
        write_csv(path, [make_row(name="Alpha, Beta")])
        assert load_catalogue(path)[0].name == "Alpha, Beta"
