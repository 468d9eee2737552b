from pathlib import Path

from invoke import Collection, Context, task

PROJECT_ROOT = Path(__file__).resolve().parent
PYPROJECT = PROJECT_ROOT.joinpath("pyproject.toml")
TARGETS = f"{PROJECT_ROOT.joinpath('spotify_catalog')} {PROJECT_ROOT.joinpath('tests')}"

LINTERS = {
    "black": f"black --config {PYPROJECT} {TARGETS}",
    "isort": f"isort --settings-file {PYPROJECT} {TARGETS}",
    "mypy": f"mypy --config-file {PYPROJECT} {TARGETS}",
    "pylint": f"pylint --rcfile {PYPROJECT} {TARGETS}",
}


@task(name="run_all", help={"tool": "Run a single linter: black, isort, mypy or pylint"})
def run_all(ctx: Context, tool: str = "", ignore_failures: bool = True) -> None:
    for name, cmd in LINTERS.items():
        if tool and name != tool:
            continue
        print(f"\n=== Running '{name}' ===\n")
        ctx.run(cmd, pty=True, echo=True, warn=ignore_failures)


@task(name="pytest")
def pytest(ctx: Context, keyword: str = "") -> None:
    cmd = f"pytest --config-file={PYPROJECT} {PROJECT_ROOT.joinpath('tests')}"
    if keyword:
        cmd += f" -k '{keyword}'"
    ctx.run(cmd, pty=True, echo=True)


ns = Collection()
ns.add_collection(Collection("lint", run_all))
ns.add_collection(Collection("tests", pytest))
