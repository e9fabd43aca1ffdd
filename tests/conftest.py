from pathlib import Path

import pandas as pd
import pyreadstat
import pytest

_CONFIG_ENV_VARS = (
    "DATA_IMPORTER_ENCODING",
    "DATA_IMPORTER_PREVIEW_ROWS",
    "DATA_IMPORTER_APPLY_VALUE_FORMATS",
    "GOOGLE_APPLICATION_CREDENTIALS",
)


@pytest.fixture(autouse=True)
def _isolated_config_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep the developer's environment and config file out of the tests.

    ConfigLoader reads environment variables and ./data_importer.toml, so every
    test runs with those variables unset and from an empty working directory.
    """
    for name in _CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    workdir = tmp_path / "cwd"
    workdir.mkdir()
    monkeypatch.chdir(workdir)


@pytest.fixture
def heights_frame() -> pd.DataFrame:
    return pd.DataFrame(
        {
            "id": [1, 2, 3],
            "height": [1.75, 1.62, 1.80],
            "name": ["Ann", "Bo", "Cy"],
        }
    )


@pytest.fixture
def csv_file(tmp_path: Path) -> Path:
    path = tmp_path / "heights.csv"
    path.write_text("id,height,name\n1,1.75,Ann\n2,1.62,Bo\n3,1.80,Cy\n")
    return path


@pytest.fixture
def xlsx_file(tmp_path: Path, heights_frame: pd.DataFrame) -> Path:
    path = tmp_path / "survey.xlsx"
    scores = pd.DataFrame(
        {
            "id": [1, 2],
            "score": [10, 12],
            "taken": pd.to_datetime(["2024-01-05", "2024-02-11"]),
        }
    )
    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        heights_frame.to_excel(writer, sheet_name="people", index=False)
        scores.to_excel(writer, sheet_name="scores", index=False)
    return path


@pytest.fixture
def sav_file(tmp_path: Path) -> Path:
    path = tmp_path / "survey.sav"
    frame = pd.DataFrame(
        {
            "id": [1.0, 2.0, 3.0],
            "sex": [1.0, 2.0, 1.0],
            "comment": ["fine", "good", "ok"],
        }
    )
    pyreadstat.write_sav(
        frame,
        str(path),
        file_label="Health survey",
        column_labels=["Respondent", "Sex of respondent", "Free text"],
        variable_value_labels={"sex": {1.0: "Male", 2.0: "Female"}},
    )
    return path


@pytest.fixture
def dta_file(tmp_path: Path) -> Path:
    path = tmp_path / "survey.dta"
    frame = pd.DataFrame(
        {
            "id": [1, 2, 3],
            "income": [1200.5, 980.0, 1430.25],
            "region": ["north", "south", "east"],
        }
    )
    pyreadstat.write_dta(
        frame,
        str(path),
        column_labels=["Respondent", "Monthly income", "Region"],
    )
    return path


@pytest.fixture
def xpt_file(tmp_path: Path) -> Path:
    path = tmp_path / "dm.xpt"
    frame = pd.DataFrame(
        {
            "USUBJID": ["S-001", "S-002"],
            "AGE": [34.0, 51.0],
        }
    )
    pyreadstat.write_xport(
        frame,
        str(path),
        table_name="DM",
        column_labels=["Subject", "Age"],
    )
    return path
