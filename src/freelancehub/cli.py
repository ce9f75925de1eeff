"""Typer CLI entrypoint for the listing engine."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

import typer
import yaml
from pydantic import ValidationError

from .config import BAAS_KEY_ENV, BAAS_URL_ENV, BaasSettings
from .container import create_container
from .core import convert_salary, freelancer_card, search_faq
from .core.filtering import category_counts
from .core.presentation import (
    render_category_counts,
    render_faq,
    render_freelancer_card,
    render_listing_card,
)
from .data import sample_listings
from .data.faq import faq_items
from .errors import FreelanceHubError
from .logging import configure_logging
from .pipeline import ListingLoader, ListingLoadError
from .routes import guard, resolve
from .schemas import AuthUser, CurrencyCode, FilterState, FreelancerFilter, Profile, UserType
from .schemas.config import load_config

app = typer.Typer(help="Freelancer marketplace listing CLI.")

_VIEWERS = ("guest", "no-profile", "client", "freelancer")


def _load_settings(config: Path | None) -> dict[str, Any]:
    if not config:
        return {}
    with config.open("r", encoding="utf-8") as handle:
        loaded = yaml.safe_load(handle) or {}
    if not isinstance(loaded, dict):
        raise typer.BadParameter("Config file must be a YAML object", param_name="config")
    try:
        return load_config(loaded).to_settings()
    except ValidationError as exc:
        raise typer.BadParameter(f"Invalid config: {exc.error_count()} error(s)", param_name="config") from exc


def _currency(value: str | None) -> CurrencyCode | None:
    if value is None:
        return None
    try:
        return CurrencyCode(value.upper())
    except ValueError as exc:
        choices = ", ".join(code.value for code in CurrencyCode)
        raise typer.BadParameter(f"Unsupported currency {value!r}; choose one of {choices}") from exc


@app.command()
def listings(
    search: str = typer.Option("", help="Case-insensitive text matched against title and company."),
    category: str = typer.Option("", help="Exact category to keep."),
    location: str = typer.Option("", help="Exact location to keep."),
    currency: Optional[str] = typer.Option(None, help="Display currency (USD, EUR, GBP, JPY, INR, ZAR)."),
    input_path: Optional[Path] = typer.Option(None, "--input", exists=True, readable=True, dir_okay=False, help="Listings JSONL path."),
    output: Optional[Path] = typer.Option(None, dir_okay=False, resolve_path=True, help="Output JSON path."),
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path."),
    log_level: str = typer.Option("INFO", help="Log level for structured logging."),
) -> None:
    """Filter listings and print them with salaries in the chosen currency."""
    settings = _load_settings(config)
    target = _currency(currency)

    configure_logging(log_level)

    container = create_container(settings=settings)
    pipeline = container.listing_pipeline()
    state = FilterState(search_query=search, selected_category=category, selected_location=location)
    cards = pipeline.run(state=state, currency=target, listings_path=input_path, output_path=output)

    for card in cards:
        typer.echo(render_listing_card(card))
        typer.echo("")
    typer.echo(f"{len(cards)} listing(s) shown.")
    if output:
        typer.echo(f"Results saved to {output}.")


@app.command()
def convert(
    salary: str = typer.Argument(..., help='Salary range such as "$45-60/hr".'),
    source: str = typer.Option("USD", "--from", help="Currency the range is quoted in."),
    target: str = typer.Option("USD", "--to", help="Currency to convert into."),
    strict: bool = typer.Option(False, help="Fail on malformed ranges instead of printing zeros."),
) -> None:
    """Convert a single salary range."""
    source_code = _currency(source)
    target_code = _currency(target)
    try:
        typer.echo(convert_salary(salary, source_code, target_code, strict=strict))
    except FreelanceHubError as exc:
        notice = exc.to_notice()
        typer.echo(f"{notice.title}: {notice.description}", err=True)
        raise typer.Exit(code=1) from exc


@app.command()
def categories(
    input_path: Optional[Path] = typer.Option(None, "--input", exists=True, readable=True, dir_okay=False, help="Listings JSONL path."),
) -> None:
    """Show how many listings each category holds."""
    if input_path is None:
        items = sample_listings()
    else:
        try:
            items = ListingLoader().load(input_path)
        except ListingLoadError as exc:
            for error in exc.errors:
                typer.echo(f"skipped {error}", err=True)
            items = exc.partial
    typer.echo(render_category_counts(category_counts(items)))


@app.command()
def faq(
    search: str = typer.Option("", help="Case-insensitive text matched against questions and answers."),
) -> None:
    """Show help-page questions, grouped by category."""
    typer.echo(render_faq(search_faq(faq_items(), search)))


@app.command()
def freelancers(
    email: str = typer.Option(..., help="Client account email."),
    password: str = typer.Option(..., prompt=True, hide_input=True, help="Client account password."),
    location: str = typer.Option("", help="Substring matched against the freelancer's location."),
    service: str = typer.Option("", help="Substring matched against the services offered."),
    env_file: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="Env file holding the backend URL and key."),
    log_level: str = typer.Option("INFO", help="Log level for structured logging."),
) -> None:
    """Sign in as a client and list verified freelancers from the hosted backend."""
    configure_logging(log_level)
    baas = BaasSettings.from_env(env_file)
    if baas is None:
        typer.echo(f"Set {BAAS_URL_ENV} and {BAAS_KEY_ENV} to reach the backend.", err=True)
        raise typer.Exit(code=1)

    container = create_container(baas=baas)
    try:
        session = container.session()
        session.sign_in({"email": email, "password": password})
        found = container.profiles().browse_freelancers(FreelancerFilter(location=location, service=service))
    except FreelanceHubError as exc:
        notice = exc.to_notice()
        typer.echo(f"{notice.title}: {notice.description}", err=True)
        raise typer.Exit(code=1) from exc
    finally:
        container.shutdown_resources()

    for profile in found:
        typer.echo(render_freelancer_card(freelancer_card(profile)))
        typer.echo("")
    typer.echo(f"{len(found)} freelancer(s) found.")


class _Viewer:
    def __init__(self, user: AuthUser | None, profile: Profile | None) -> None:
        self.user = user
        self.profile = profile


def _viewer(kind: str) -> _Viewer:
    if kind == "guest":
        return _Viewer(None, None)
    user = AuthUser(id="cli-user", email="cli@example.com")
    if kind == "no-profile":
        return _Viewer(user, None)
    return _Viewer(user, Profile(id=user.id, full_name="CLI User", user_type=UserType(kind)))


@app.command()
def route(
    url: str = typer.Argument(..., help="Path with optional query string, e.g. /request-booking?freelancer=42."),
    viewer: str = typer.Option("guest", "--as", help=f"Who is asking: {', '.join(_VIEWERS)}."),
) -> None:
    """Resolve a URL and report where the access guards send the viewer."""
    if viewer not in _VIEWERS:
        raise typer.BadParameter(f"Choose one of {', '.join(_VIEWERS)}", param_name="as")
    match = resolve(url)
    redirect = guard(match, _viewer(viewer))
    if redirect is None:
        params = ", ".join(f"{key}={value}" for key, value in match.params.items())
        typer.echo(f"{match.route.name}" + (f" ({params})" if params else ""))
        return
    typer.echo(f"redirect {redirect.path}")
    if redirect.notice:
        typer.echo(f"{redirect.notice.title}: {redirect.notice.description}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
