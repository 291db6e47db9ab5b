"""CLI 엔트리포인트."""

import asyncio
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from index_builder.builder import IndexGenerator, write_index
from index_builder.config import settings
from index_builder.models import (
    ConnectivityReport,
    GeneratedIndex,
    RepositoryMetadata,
    ValidationVerdict,
)
from index_builder.quality import CHECK_WEIGHTS, QualityValidator
from index_builder.sources import GitHubRepositorySource, load_listing
from index_builder.themes import ThemeDetector
from index_builder.wiring import RepoConnector

console = Console()

app = typer.Typer(
    name="index-builder",
    help="저장소 메타데이터로 테마를 고르고 인덱스 페이지를 생성/검증합니다.",
    no_args_is_help=True,
)


def _render_verdict(verdict: ValidationVerdict, recommendations: list[str]) -> None:
    """검증 결과를 Rich로 렌더링한다."""
    table = Table(show_header=True, header_style="bold cyan", expand=True)
    table.add_column("검사", style="bold")
    table.add_column("가중치", justify="right", width=8)
    table.add_column("결과", justify="center", width=6)
    table.add_column("메시지")

    for name, weight in CHECK_WEIGHTS.items():
        result = getattr(verdict.results, name)
        table.add_row(
            name,
            str(weight),
            "[green]PASS[/green]" if result.passed else "[red]FAIL[/red]",
            result.message,
        )

    console.print(table)
    color = "green" if verdict.passed else "red"
    console.print(
        Panel(
            "\n".join(recommendations),
            title=f"[{color}]{verdict.verdict} ({verdict.score}/100)[/{color}]",
            border_style=color,
        )
    )


def _render_build_summary(built: list[GeneratedIndex], output: Path) -> None:
    """생성 결과 요약 테이블을 출력한다."""
    table = Table(show_header=True, header_style="bold cyan", expand=True)
    table.add_column("#", style="dim", width=3)
    table.add_column("저장소", style="bold")
    table.add_column("테마", width=14)
    table.add_column("점수", justify="right", width=8)
    table.add_column("보상", justify="right", width=10)

    for i, item in enumerate(built, 1):
        score_color = "green" if item.verdict.passed else "yellow"
        table.add_row(
            str(i),
            item.repository.name,
            item.theme.value,
            f"[{score_color}]{item.verdict.score}/100[/]",
            f"{item.award.amount} {item.award.currency}",
        )

    console.print(table)
    console.print(f"[dim]출력 디렉토리: {output}[/dim]")


def _render_connectivity(report: ConnectivityReport) -> None:
    """연결 점검 결과를 출력한다."""
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("사이트", style="bold")
    table.add_column("상태", justify="center")
    table.add_column("HTTP", justify="right")
    table.add_column("오류", style="dim")

    colors = {"online": "green", "offline": "yellow", "error": "red"}
    for name, result in report.results.items():
        color = colors.get(result.status, "dim")
        table.add_row(
            name,
            f"[{color}]{result.status}[/{color}]",
            str(result.http_status or "-"),
            result.error or "",
        )

    console.print(table)
    console.print(f"online {report.online}/{report.total}")


@app.command()
def detect(
    name: Annotated[str, typer.Argument(help="저장소 이름")],
    description: Annotated[
        str | None, typer.Option("--description", "-d", help="저장소 설명")
    ] = None,
    topics: Annotated[
        list[str] | None, typer.Option("--topic", "-t", help="토픽 (여러 번 지정 가능)")
    ] = None,
    keywords: Annotated[
        list[str] | None, typer.Option("--keyword", "-k", help="키워드 (여러 번 지정 가능)")
    ] = None,
) -> None:
    """메타데이터로 테마를 감지합니다."""
    metadata = RepositoryMetadata(
        name=name,
        description=description,
        topics=topics or [],
        keywords=keywords or [],
    )
    detector = ThemeDetector()
    theme = detector.detect(metadata)
    info = detector.get_theme_info(theme)

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("테마")
    table.add_column("점수", justify="right")
    for label, score in detector.score_all(metadata).items():
        style = "bold green" if label == theme else ("" if score else "dim")
        table.add_row(f"[{style}]{label.value}[/]" if style else label.value, str(score))

    console.print(table)
    console.print(f"{info.icon} [bold]{theme.value}[/bold] - {info.description}")


@app.command()
def validate(
    path: Annotated[
        Path,
        typer.Argument(exists=True, dir_okay=False, readable=True, help="검증할 HTML 파일"),
    ],
    as_json: Annotated[bool, typer.Option("--json", help="판정을 JSON으로 출력")] = False,
) -> None:
    """HTML 페이지의 품질을 검증합니다."""
    validator = QualityValidator(settings.domain_markers)
    try:
        html = path.read_text(encoding="utf-8")
    except Exception as e:
        console.print(f"[red]오류 발생: {e}[/red]")
        raise typer.Exit(1) from e

    verdict = validator.validate(html)

    if as_json:
        console.print_json(verdict.model_dump_json(by_alias=True))
    else:
        _render_verdict(verdict, validator.get_recommendations(verdict))

    if not verdict.passed:
        raise typer.Exit(1)


async def _fetch_repositories(names: list[str]) -> list[RepositoryMetadata]:
    """GitHub에서 저장소 메타데이터를 병렬로 가져온다. 실패한 저장소는 건너뛴다."""
    return await GitHubRepositorySource().fetch_many(names)


@app.command()
def build(
    listing: Annotated[
        Path | None,
        typer.Argument(help="저장소 목록 JSON (기본값: 설정의 listing_path)"),
    ] = None,
    repos: Annotated[
        list[str] | None,
        typer.Option("--repo", "-r", help="GitHub 저장소 (owner/repo, 여러 번 지정 가능)"),
    ] = None,
    output: Annotated[
        Path | None, typer.Option("--output", "-o", help="출력 디렉토리")
    ] = None,
) -> None:
    """저장소별 인덱스 페이지를 생성합니다."""
    output = output or settings.output_dir
    try:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console,
            transient=True,
        ) as progress:
            task = progress.add_task("저장소 메타데이터 수집 중...", total=None)
            if repos:
                repositories = asyncio.run(_fetch_repositories(repos))
            else:
                repositories = load_listing(listing or settings.listing_path)
            progress.remove_task(task)

            task = progress.add_task("인덱스 페이지 생성 중...", total=None)
            generator = IndexGenerator()
            built = []
            for metadata in repositories:
                item = generator.generate_index(metadata)
                write_index(item, output)
                built.append(item)
            progress.remove_task(task)
    except KeyboardInterrupt:
        console.print("\n[dim]중단됨[/dim]")
        raise typer.Exit(0) from None
    except Exception as e:
        console.print(f"[red]오류 발생: {e}[/red]")
        raise typer.Exit(1) from e

    if not built:
        console.print("[yellow]생성할 저장소가 없습니다.[/yellow]")
        return

    _render_build_summary(built, output)


@app.command()
def probe(
    base_url: Annotated[
        str | None, typer.Option("--base-url", "-u", help="사이트 기본 URL")
    ] = None,
) -> None:
    """형제 사이트 연결 상태를 점검합니다."""
    connector = RepoConnector(base_url=base_url)
    try:
        report = asyncio.run(connector.connect_all())
    except KeyboardInterrupt:
        console.print("\n[dim]중단됨[/dim]")
        raise typer.Exit(0) from None

    _render_connectivity(report)


if __name__ == "__main__":
    app()
