import sys
import typer
from pathlib import Path
from timecard.config import settings
from timecard.logging import logger, get_run_id
from timecard.domain.exceptions import ExtractionFailedError
from timecard.extraction.pipeline import extract_and_sanitize
from timecard.payroll.calculator import compute_pay
from timecard.payroll.models import OvertimePolicy, PayParameters

app = typer.Typer(no_args_is_help=True)

@app.callback()
def main():
    """
    Timecard Pay CLI.
    """
    pass


def _config_problems() -> list[str]:
    """Configuration problems that would break extraction requests."""
    problems = []
    if not (settings.OPENAI_API_KEY and settings.OPENAI_API_KEY.get_secret_value()):
        problems.append("OPENAI_API_KEY is not set; add it to .env")
    if not settings.allowed_user_ids:
        problems.append("ALLOWED_USER_IDS is empty; every extraction request will be rejected")
    log_file = settings.REQUEST_LOG_FILE
    if log_file is not None and not log_file.parent.is_dir():
        problems.append(f"REQUEST_LOG_FILE directory {log_file.parent} does not exist")
    return problems


@app.command(name="doctor")
def doctor():
    """
    Check configuration and environment health.
    """
    logger.info("Running doctor check...")

    print(f"\n🩺 Timecard Pay Doctor (Python {sys.version.split()[0]}, run {get_run_id()})\n")
    print(f"  Vision model:       {settings.OPENAI_MODEL_VISION}")
    print(f"  Allowed users:      {len(settings.allowed_user_ids)}")
    print(f"  Period threshold:   {settings.PAYROLL_PERIOD_THRESHOLD}h")
    print(f"  Request log file:   {settings.REQUEST_LOG_FILE or 'logger only'}\n")

    problems = _config_problems()
    if problems:
        for msg in problems:
            print(f"  ❌ {msg}")
        print()
        raise typer.Exit(code=1)
    print("  ✅ Configuration looks good\n")


@app.command(name="parse")
def parse(path: Path = typer.Argument(..., exists=True, dir_okay=False, help="File holding raw model output")):
    """Clean saved model output into hours."""
    try:
        result = extract_and_sanitize(path.read_text(encoding="utf-8"))
    except ExtractionFailedError as e:
        logger.error(f"Extraction failed ({e.reason}): {e.detail}")
        print(f"❌ {e.message} ({e.reason})")
        if e.detail:
            print(f"   {e.detail}")
        print("\nRaw text:\n")
        print(e.raw_text)
        print("\nEnter the hours manually with `timecard pay`.")
        raise typer.Exit(code=1)

    print(f"Hours ({len(result.hours)} rows, confidence {result.confidence:.0%}):")
    for i, h in enumerate(result.hours, 1):
        print(f"  {i:>2}. {h:.2f}")
    if result.warnings:
        print("\nWarnings:")
        for w in result.warnings:
            print(f"  ⚠️  {w}")


@app.command(name="pay")
def pay(
    hours: list[float] = typer.Argument(..., help="Hours worked per day, in order"),
    rate: float = typer.Option(settings.DEFAULT_PAY_RATE, min=0, help="Pay rate per hour"),
    tax: float = typer.Option(0.0, min=0, help="Tax percent"),
    policy: OvertimePolicy = typer.Option(OvertimePolicy.STANDARD, help="Overtime policy"),
    threshold: float = typer.Option(settings.PAYROLL_PERIOD_THRESHOLD, min=0, help="Period overtime threshold (hours)"),
):
    """Compute the pay breakdown for a list of daily hours."""
    if any(h < 0 for h in hours):
        print("❌ Hours must be non-negative")
        raise typer.Exit(code=1)

    result = compute_pay(hours, PayParameters(
        pay_rate=rate, tax_percent=tax, overtime_policy=policy, period_threshold_hours=threshold,
    ))

    print(f"Policy {policy.value} ({result.multiplier}×) • Threshold {result.threshold:.1f}h\n")
    print(f"  {'Day':>3}  {'Hours':>6}  {'Regular':>7}  {'Overtime':>8}")
    for i, row in enumerate(result.rows, 1):
        print(f"  {i:>3}  {row.hours:>6.2f}  {row.regular_hours:>7.2f}  {row.overtime_hours:>8.2f}")

    t = result.totals
    print(f"\n{'─' * 40}")
    print(f"  Regular pay     {t.regular_pay:>12.2f}")
    print(f"  Regular tax     {t.regular_tax:>12.2f}")
    print(f"  Overtime pay    {t.overtime_pay:>12.2f}")
    print(f"  Overtime tax    {t.overtime_tax:>12.2f}")
    print(f"  Gross subtotal  {t.gross_subtotal:>12.2f}")
    print(f"  Net total       {t.net_total:>12.2f}")


@app.command(name="serve")
def serve(host: str = "127.0.0.1", port: int = 8000):
    """Run the HTTP API."""
    import uvicorn
    from timecard.api.app import create_app
    uvicorn.run(create_app(), host=host, port=port)


if __name__ == "__main__":
    app()
