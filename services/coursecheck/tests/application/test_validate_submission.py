from coursecheck.application.checks import FULL_CHECKS, MINIMAL_CHECKS, Check
from coursecheck.application.validate_submission import (
    render_report,
    validate_submission,
)
from coursecheck.domain.outcome import CheckOutcome


def test_clean_submission_passes(clean_repo, runner, console):
    report = validate_submission(clean_repo, "lab03", runner=runner, console=console)
    assert report.exit_code == 0
    assert not report.diagnostics
    assert report.checks_run == [c.name for c in FULL_CHECKS]
    assert runner.subcommands() == ["ls-files", "build", "clippy", "test", "fmt"]


def test_every_check_runs_after_failures(tmp_path, runner, console):
    runner.respond("build", exit_code=101)
    report = validate_submission(tmp_path, "lab03", runner=runner, console=console)
    assert report.exit_code == 1
    assert report.checks_run == [c.name for c in FULL_CHECKS]
    assert report.diagnostics.codes() == [
        "GITIGNORE_MISSING",
        "LAB_FOLDER_MISSING",
        "COMMAND_FAILED",
    ]
    assert runner.subcommands() == ["ls-files", "build", "clippy", "test", "fmt"]


def test_later_check_runs_when_first_fails(clean_repo, runner, console):
    seen: list[str] = []

    def failing(ctx):
        seen.append("failing")
        return ctx.diagnostics.add("first failed")

    def probe(ctx):
        seen.append("probe")
        return CheckOutcome.SUCCESS

    report = validate_submission(
        clean_repo,
        "lab03",
        checks=[Check("failing", failing), Check("probe", probe)],
        runner=runner,
        console=console,
    )
    assert seen == ["failing", "probe"]
    assert report.outcome is CheckOutcome.FAILURE
    assert len(report.diagnostics) == 1


def test_invalid_lab_aborts_before_checks(clean_repo, runner, console):
    report = validate_submission(clean_repo, "lab99", runner=runner, console=console)
    assert report.exit_code == 1
    assert report.checks_run == []
    assert report.diagnostics.codes() == ["LAB_NAME_INVALID"]
    assert runner.calls == []


def test_minimal_set_skips_tool_checks(clean_repo, runner, console):
    report = validate_submission(
        clean_repo, "lab03", checks=MINIMAL_CHECKS, runner=runner, console=console
    )
    assert report.exit_code == 0
    assert runner.subcommands() == ["ls-files"]


def test_repeated_runs_are_identical(clean_repo, runner, console):
    first = validate_submission(clean_repo, "lab03", runner=runner, console=console)
    second = validate_submission(clean_repo, "lab03", runner=runner, console=console)
    assert list(first.diagnostics) == list(second.diagnostics) == []
    assert first.exit_code == second.exit_code == 0


def test_render_report(tmp_path, runner, console):
    report = validate_submission(
        tmp_path, "lab03", checks=MINIMAL_CHECKS, runner=runner, console=console
    )
    render_report(report, console)
    assert console.lines[0] == "some problems were found:"
    assert console.lines[1] == "error: .gitignore doesn't exist"
    assert console.verdicts == [False]
