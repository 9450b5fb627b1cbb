import explore_data
from bankruptcy.data import ZERO_VARIANCE_COL


def test_explore_report(workbook, capsys):
    explore_data.main(workbook)
    out = capsys.readouterr().out
    assert "Dataset Shape: (1000, 13)" in out
    assert "Target Distribution" in out
    assert "Correlations with Target" in out
    assert ZERO_VARIANCE_COL in out.split("Constant Columns:")[1].split("Correlations")[0]
    assert "Duplicate Rows" in out
