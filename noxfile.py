"""Nox-UV sessions for local testing and site workflows.

Nox-UV uses UV for fast virtual environment creation and package installation.

Usage:
    nox -s fm          # Validate and autofix page front matter
    nox -s build       # Production build through go-interview
    nox -s serve       # Dev server with drafts and live reload
    nox -s test        # Run tests across multiple Python versions
    nox -s lint        # Run Ruff linting across multiple Python versions
    nox -s typecheck   # Run MyPy type checking across multiple Python versions
"""

import nox
import nox_uv

# Use nox-uv for faster environment creation
nox_uv.register()

nox.options.sessions = ["test", "lint", "fm"]
nox.options.reuse_existing_virtualenvs = True
nox.options.default_venv_backend = "uv"


@nox.session(python="3.12")
def fm(session: nox.Session) -> None:
    """Validate and autofix front matter of every content page."""
    session.install("-e", ".")
    session.run("go-interview", "check", "--fix")


@nox.session(python="3.12")
def build(session: nox.Session) -> None:
    """Check front matter, then run a minified production build.

    Requires Hugo on PATH.
    """
    session.install("-e", ".")
    session.run("go-interview", "check")
    session.run("go-interview", "build", *session.posargs)


@nox.session(python="3.12")
def serve(session: nox.Session) -> None:
    """Serve the site locally with drafts and live reload.

    Access at http://localhost:1313
    """
    session.install("-e", ".")
    session.run("go-interview", "serve", *session.posargs)


@nox.session(python=["3.11", "3.12", "3.13"])
def test(session: nox.Session) -> None:
    """Run the test suite with coverage reporting."""
    session.install("-e", ".[dev]")
    session.run(
        "pytest",
        "-v",
        "--cov=src",
        "--cov-report=xml",
        "--cov-report=term-missing:skip-covered",
        "--cov-fail-under=85",
        "tests/",
    )


@nox.session(python=["3.11", "3.12", "3.13"])
def lint(session: nox.Session) -> None:
    """Run Ruff linting and format checks."""
    session.install("-e", ".[dev]")
    session.run("ruff", "check", ".", "--config=pyproject.toml")
    session.run("ruff", "format", "--check")


@nox.session(python=["3.11", "3.12", "3.13"])
def typecheck(session: nox.Session) -> None:
    """Run MyPy type checking."""
    session.install("-e", ".[dev]")
    session.run("mypy", "src", "--config-file=pyproject.toml")
