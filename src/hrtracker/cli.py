"""Typer CLI entrypoint for the candidate tracker."""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Iterator, List, Optional, TypeVar

import typer
from pydantic import ValidationError

from .config import ConfigManager
from .container import create_container
from .core import Interview, TrackerError
from .logging import configure_logging
from .schemas import AppConfig, ApplicationStatus, Candidate, InterviewStatus
from .session import TrackerSession, parse_date, parse_datetime
from .storage import RosterLoadError, RosterRepository

T = TypeVar("T")

app = typer.Typer(help="Recruitment candidate roster and interview scheduling CLI.")


@dataclass
class _State:
    data: Optional[Path]
    config: Optional[Path]
    log_level: Optional[str]


@app.callback()
def main_options(
    ctx: typer.Context,
    data: Optional[Path] = typer.Option(None, dir_okay=False, help="Roster JSON path."),
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path."),
    log_level: Optional[str] = typer.Option(None, help="Log level for structured logging."),
) -> None:
    ctx.obj = _State(data=data, config=config, log_level=log_level)


@app.command()
def add(
    ctx: typer.Context,
    name: str = typer.Option(..., help="Candidate full name."),
    student_id: str = typer.Option(..., "--id", help="Student ID."),
    phone: str = typer.Option("", help="Phone number."),
    email: str = typer.Option("", help="Email address."),
    course: str = typer.Option("", help="Course of study."),
    status: ApplicationStatus = typer.Option(ApplicationStatus.PENDING, help="Application status."),
    tag: Optional[List[str]] = typer.Option(None, help="Tag label (repeatable)."),
) -> None:
    """Add a candidate to the roster."""
    with _session(ctx) as (session, _):
        candidate = _build_candidate(
            name=name,
            student_id=student_id,
            phone=phone,
            email=email,
            course=course,
            application_status=status,
            tags=tag or [],
        )
        session.add_candidate(candidate)
    typer.echo(f"New candidate added: {candidate}")


@app.command()
def edit(
    ctx: typer.Context,
    index: int = typer.Argument(..., help="Candidate index in the listing."),
    name: Optional[str] = typer.Option(None),
    student_id: Optional[str] = typer.Option(None, "--id"),
    phone: Optional[str] = typer.Option(None),
    email: Optional[str] = typer.Option(None),
    course: Optional[str] = typer.Option(None),
    status: Optional[ApplicationStatus] = typer.Option(None),
    interview_status: Optional[InterviewStatus] = typer.Option(None),
    tag: Optional[List[str]] = typer.Option(None, help="Replace tags (repeatable)."),
) -> None:
    """Edit the candidate at INDEX."""
    changes: dict[str, Any] = {
        key: value
        for key, value in {
            "name": name,
            "student_id": student_id,
            "phone": phone,
            "email": email,
            "course": course,
            "application_status": status,
            "interview_status": interview_status,
            "tags": tag or None,
        }.items()
        if value is not None
    }
    if not changes:
        raise typer.BadParameter("At least one field to edit must be provided")
    with _session(ctx) as (session, _):
        edited = _guard_validation(lambda: session.edit_candidate(index, **changes))
    typer.echo(f"Edited candidate: {edited}")


@app.command()
def delete(
    ctx: typer.Context,
    index: int = typer.Argument(..., help="Candidate index in the listing."),
) -> None:
    """Delete the candidate at INDEX and cancel their interview."""
    with _session(ctx) as (session, _):
        removed = session.delete_candidate(index)
    typer.echo(f"Deleted candidate: {removed}")


@app.command("list")
def list_candidates(
    ctx: typer.Context,
    find: Optional[List[str]] = typer.Option(None, help="Name keyword (repeatable)."),
) -> None:
    """List candidates, optionally filtered by name keywords."""
    with _session(ctx, save=False) as (session, _):
        if session.model.has_no_candidates:
            typer.echo("There are no candidates in the system")
            return
        shown = session.find_candidates(find) if find else session.list_candidates()
    typer.echo(f"{len(shown)} candidates listed")
    for position, candidate in enumerate(shown, start=1):
        typer.echo(_format_candidate(position, candidate))


@app.command()
def sort(
    ctx: typer.Context,
    by: Optional[str] = typer.Option(None, help="Sort key, defaults to display.default_sort."),
    reverse: bool = typer.Option(False, help="Sort in descending order."),
) -> None:
    """Reorder the roster."""
    with _session(ctx) as (session, app_config):
        key = by or app_config.display.default_sort
        if not key:
            raise typer.BadParameter("No sort key given and no default configured", param_hint="'--by'")
        try:
            ordered = session.sort_candidates(key, reverse=reverse)
        except KeyError as exc:
            raise typer.BadParameter(str(exc.args[0]), param_hint="'--by'") from exc
    typer.echo(f"Sorted {len(ordered)} candidates by {key}")
    for position, candidate in enumerate(ordered, start=1):
        typer.echo(_format_candidate(position, candidate))


@app.command()
def schedule(
    ctx: typer.Context,
    index: int = typer.Argument(..., help="Candidate index in the listing."),
    at: str = typer.Option(..., help="Start date-time, e.g. 2030-12-23T10:00."),
) -> None:
    """Schedule a 30-minute interview for the candidate at INDEX."""
    try:
        start = parse_datetime(at)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="'--at'") from exc
    with _session(ctx) as (session, _):
        interview = session.schedule_interview(index, start)
    typer.echo(
        f"Scheduled interview for {interview.candidate} on "
        f"{interview.date.isoformat()} at {interview.start_time.strftime('%H:%M')}"
    )


@app.command()
def unschedule(
    ctx: typer.Context,
    index: int = typer.Argument(..., help="Interview index in the listing."),
) -> None:
    """Cancel the interview at INDEX."""
    with _session(ctx) as (session, _):
        session.list_interviews()
        cancelled = session.unschedule_interview(index)
    typer.echo(f"Cancelled interview: {cancelled}")


@app.command()
def interviews(
    ctx: typer.Context,
    on: Optional[str] = typer.Option(None, help="Only show interviews on this date (YYYY-MM-DD)."),
) -> None:
    """List scheduled interviews."""
    try:
        day = parse_date(on) if on else None
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="'--on'") from exc
    with _session(ctx, save=False) as (session, _):
        shown = session.list_interviews(on=day)
    typer.echo(f"{len(shown)} interviews listed")
    for position, interview in enumerate(shown, start=1):
        typer.echo(_format_interview(position, interview))


@contextmanager
def _session(ctx: typer.Context, *, save: bool = True) -> Iterator[tuple[TrackerSession, AppConfig]]:
    """Load the roster, yield a session, and persist it when the command succeeds."""
    state: _State = ctx.obj
    app_config = _load_app_config(state.config)
    configure_logging(state.log_level or app_config.logging.level)

    container = create_container(settings=app_config.to_settings())
    repository: RosterRepository = (
        container.repository(path=state.data) if state.data else container.repository()
    )
    try:
        model = repository.load()
    except RosterLoadError as exc:
        for error in exc.errors:
            typer.echo(error, err=True)
        typer.echo(f"Refusing to modify inconsistent roster at {repository.path}", err=True)
        raise typer.Exit(code=1) from exc
    except ValueError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc

    session = container.session(model=model)
    try:
        yield session, app_config
    except TrackerError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc
    if save:
        repository.save(model)


def _load_app_config(path: Optional[Path]) -> AppConfig:
    if path is None:
        return AppConfig()
    try:
        return ConfigManager(path).load()
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="'--config'") from exc


def _build_candidate(**fields: Any) -> Candidate:
    return _guard_validation(lambda: Candidate(**fields))


def _guard_validation(build: Callable[[], T]) -> T:
    try:
        return build()
    except ValidationError as exc:
        messages = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in exc.errors()
        )
        raise typer.BadParameter(messages) from exc


def _format_candidate(position: int, candidate: Candidate) -> str:
    tags = ", ".join(candidate.tag_labels())
    return (
        f"{position}. {candidate} | {candidate.phone} | {candidate.email} | "
        f"{candidate.course} | application: {candidate.application_status.value} | "
        f"interview: {candidate.interview_status.value}"
        + (f" | tags: {tags}" if tags else "")
    )


def _format_interview(position: int, interview: Interview) -> str:
    return (
        f"{position}. {interview.candidate} {interview.date.isoformat()} "
        f"{interview.start_time.strftime('%H:%M')}-{interview.end.strftime('%H:%M')}"
    )


def main() -> None:
    app()


if __name__ == "__main__":
    main()
