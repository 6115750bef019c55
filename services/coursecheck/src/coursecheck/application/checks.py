from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from coursecheck.application.context import Context, cargo_program, git_program
from coursecheck.application.tools import run_tool
from coursecheck.domain.outcome import CheckOutcome

GITIGNORE_NAME = ".gitignore"
GITIGNORE_MARKER = "target"
GITIGNORE_HELP = (
    "you need to have a file like this: "
    "https://github.com/xTachyon/rust_course_helper/blob/main/.gitignore"
)

BUILD_ARTIFACT_EXTENSIONS = (
    ".exe",
    ".dll",
    ".pdb",
    ".lib",
    ".obj",
    ".so",
    ".dylib",
    ".a",
    ".o",
    ".rlib",
    ".rmeta",
    ".d",
)
MAX_LISTED_FILES = 20
ARTIFACTS_HELP = "remove target directories and all build artifacts"

CheckFn = Callable[[Context], CheckOutcome]


@dataclass(frozen=True)
class Check:
    name: str
    func: CheckFn

    def __call__(self, ctx: Context) -> CheckOutcome:
        return self.func(ctx)


def check_gitignore(ctx: Context) -> CheckOutcome:
    gitignore_path = ctx.repo_path / GITIGNORE_NAME
    if not gitignore_path.exists():
        return ctx.diagnostics.add(
            ".gitignore doesn't exist",
            path=gitignore_path,
            help=GITIGNORE_HELP,
            code="GITIGNORE_MISSING",
        )
    try:
        text = gitignore_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        return ctx.diagnostics.add(
            f"can't read file: {exc}",
            path=gitignore_path,
            code="GITIGNORE_UNREADABLE",
        )
    if not any(GITIGNORE_MARKER in line for line in text.splitlines()):
        return ctx.diagnostics.add(
            f"{GITIGNORE_MARKER} folder doesn't exist in .gitignore",
            path=gitignore_path,
            help=GITIGNORE_HELP,
            code="GITIGNORE_NO_TARGET",
        )
    return CheckOutcome.SUCCESS


def split_tracked_files(output: str) -> list[str]:
    return [path for path in output.split("\0") if path]


def find_build_artifacts(tracked: list[str]) -> list[str]:
    return [line for line in tracked if line.endswith(BUILD_ARTIFACT_EXTENSIONS)]


def format_bad_files(bad_files: list[str]) -> str:
    text = "build files were found in the repo. bad files: " + "\n".join(
        bad_files[:MAX_LISTED_FILES]
    )
    if len(bad_files) > MAX_LISTED_FILES:
        text += f"\n..and {len(bad_files) - MAX_LISTED_FILES} more"
    return text


def check_committed_files(ctx: Context) -> CheckOutcome:
    result = run_tool(
        ctx,
        git_program(),
        ["ls-files", "-z"],
        "can't list tracked files",
        cwd=ctx.repo_path,
        announce=False,
    )
    if isinstance(result, CheckOutcome):
        return result
    bad_files = find_build_artifacts(split_tracked_files(result.stdout))
    if not bad_files:
        return CheckOutcome.SUCCESS
    return ctx.diagnostics.add(
        format_bad_files(bad_files),
        path=ctx.repo_path,
        help=ARTIFACTS_HELP,
        code="BUILD_ARTIFACTS_COMMITTED",
    )


def check_lab_folder(ctx: Context) -> CheckOutcome:
    if not ctx.lab_path.exists():
        return ctx.diagnostics.add(
            "lab folder doesn't exist", path=ctx.lab_path, code="LAB_FOLDER_MISSING"
        )
    return CheckOutcome.SUCCESS


def _run_cargo(ctx: Context, args: list[str], description: str) -> CheckOutcome:
    result = run_tool(ctx, cargo_program(), args, description, cwd=ctx.lab_path)
    if isinstance(result, CheckOutcome):
        return result
    return CheckOutcome.SUCCESS


def check_compiler_warnings(ctx: Context) -> CheckOutcome:
    return _run_cargo(ctx, ["build", "--all", "-q"], "code has compiler warnings")


def check_clippy(ctx: Context) -> CheckOutcome:
    return _run_cargo(ctx, ["clippy", "--all", "-q"], "code has clippy warnings")


def check_tests(ctx: Context) -> CheckOutcome:
    return _run_cargo(ctx, ["test", "--all", "-q"], "code has failed tests")


def check_fmt(ctx: Context) -> CheckOutcome:
    return _run_cargo(ctx, ["fmt", "--all", "--check", "-q"], "code is not formatted")


GITIGNORE = Check("gitignore", check_gitignore)
COMMITTED_FILES = Check("committed-files", check_committed_files)
LAB_FOLDER = Check("lab-folder", check_lab_folder)
COMPILER_WARNINGS = Check("compiler-warnings", check_compiler_warnings)
CLIPPY = Check("clippy", check_clippy)
TESTS = Check("tests", check_tests)
FMT = Check("fmt", check_fmt)

MINIMAL_CHECKS: tuple[Check, ...] = (GITIGNORE, COMMITTED_FILES)
FULL_CHECKS: tuple[Check, ...] = (
    GITIGNORE,
    COMMITTED_FILES,
    LAB_FOLDER,
    COMPILER_WARNINGS,
    CLIPPY,
    TESTS,
    FMT,
)

CHECK_SETS: dict[str, tuple[Check, ...]] = {
    "minimal": MINIMAL_CHECKS,
    "full": FULL_CHECKS,
}
DEFAULT_CHECK_SET = "full"
