from typer.testing import CliRunner
from timecard.cli import app

runner = CliRunner()


def test_pay_prints_breakdown():
    result = runner.invoke(app, ["pay", "8", "10", "9.5", "--rate", "20", "--tax", "10"])
    assert result.exit_code == 0
    assert "585.00" in result.output
    assert "540.00" in result.output


def test_pay_extended_policy():
    result = runner.invoke(app, ["pay", "10", "--rate", "20", "--policy", "extended"])
    assert result.exit_code == 0
    assert "2.5×" in result.output


def test_parse_saved_model_output(tmp_path):
    f = tmp_path / "out.txt"
    f.write_text('Sure! {"hours": [8, "x", 30]}')
    result = runner.invoke(app, ["parse", str(f)])
    assert result.exit_code == 0
    assert "24.00" in result.output
    assert "Row 2: skipped" in result.output


def test_parse_failure_shows_raw_text(tmp_path):
    f = tmp_path / "out.txt"
    f.write_text("no json here")
    result = runner.invoke(app, ["parse", str(f)])
    assert result.exit_code == 1
    assert "no-json-bounds" in result.output
    assert "no json here" in result.output


def test_doctor_reports_missing_api_key():
    # conftest blanks OPENAI_API_KEY and sets an allow-list
    result = runner.invoke(app, ["doctor"])
    assert result.exit_code == 1
    assert "OPENAI_API_KEY is not set" in result.output
    assert "ALLOWED_USER_IDS is empty" not in result.output
