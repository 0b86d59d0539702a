from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import click

from algoevo.importer.raw_processor import process_raw_directory
from algoevo.knowledge import case_technology_coverage, load_knowledge_base
from algoevo.matrix import build_matrix
from algoevo.matrix.assembler import MATRIX_VIEWS
from algoevo.matrix.export import coverage_to_frame, matrix_to_frame
from algoevo.storage.case_store import init_case_store
from algoevo.system.config_loader import load_system_config
from algoevo.system.logger import init_logger
from algoevo.validation import has_errors, verify_knowledge_base


def _setup(cfg: dict) -> None:
    log_cfg = cfg["logging_cfg"]
    init_logger("algoevo", log_dir=log_cfg.log_dir if log_cfg.to_file else None, level=log_cfg.level)


@click.group()
def cli() -> None:
    """AlgoEvo knowledge base command line interface."""


@cli.command()
@click.option("--host", default=None, help="Bind address, defaults to api.host")
@click.option("--port", default=None, type=int, help="Port, defaults to api.port")
def serve(host: Optional[str], port: Optional[int]) -> None:
    """Run the HTTP API with uvicorn."""
    import uvicorn

    from algoevo.api.server import create_app

    cfg = load_system_config()
    _setup(cfg)
    api_cfg = cfg["api_cfg"]
    uvicorn.run(create_app(cfg), host=host or api_cfg.host, port=port or api_cfg.port)


@cli.command(name="verify-data")
def verify_data() -> None:
    """Check the knowledge base and imported cases for consistency problems."""
    cfg = load_system_config()
    _setup(cfg)
    kb = load_knowledge_base()
    store_issues: list = []
    imported = init_case_store(cfg["storage_cfg"].imported_cases_path).load_valid(store_issues)
    violations = verify_knowledge_base(kb, imported, store_issues)

    summary = kb.summary()
    click.echo(
        f"Modules: {summary['modules']}  Technologies: {summary['technologies']}  "
        f"Cases: {summary['cases']}  Imported: {len(imported)}"
    )
    for violation in violations:
        click.echo(str(violation))
    errors = sum(1 for v in violations if v.severity == "error")
    click.echo(f"Errors: {errors}  Warnings: {len(violations) - errors}")
    if has_errors(violations):
        raise SystemExit(1)


@cli.command(name="export-matrix")
@click.option("--view", type=click.Choice(MATRIX_VIEWS), default="integrated", show_default=True)
@click.option("--out", "out_path", required=True, type=click.Path(dir_okay=False), help="Output CSV path")
@click.option("--with-desc", is_flag=True, default=False, help="Also export cell descriptions")
@click.option("--coverage", is_flag=True, default=False, help="Export case technology coverage instead")
def export_matrix(view: str, out_path: str, with_desc: bool, coverage: bool) -> None:
    """Write an evolution matrix (or case coverage) to CSV."""
    cfg = load_system_config()
    _setup(cfg)
    kb = load_knowledge_base()
    cases = [*kb.cases, *init_case_store(cfg["storage_cfg"].imported_cases_path).load_valid()]

    if coverage:
        df = coverage_to_frame(case_technology_coverage(cases))
    else:
        evolution = build_matrix(view, kb.baseline, kb.technologies, cases)
        df = matrix_to_frame(evolution, with_desc=with_desc)

    out = Path(out_path)
    out.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(out, index=False, encoding="utf-8")
    click.echo(f"Wrote {len(df)} rows to {out}")


@cli.command(name="process-import")
@click.option("--raw-dir", default=None, help="Directory with raw snippets")
@click.option("--out-dir", default=None, help="Directory for generated Markdown")
@click.option("--log-path", default=None, help="Error log file")
def process_import(raw_dir: Optional[str], out_dir: Optional[str], log_path: Optional[str]) -> None:
    """Convert raw technology/case snippets into Markdown files."""
    cfg = load_system_config()
    _setup(cfg)
    storage_cfg = cfg["storage_cfg"]
    ok, skipped, failed = process_raw_directory(
        raw_dir or storage_cfg.import_raw_dir,
        out_dir or storage_cfg.import_processed_dir,
        log_path or storage_cfg.import_log_path,
    )
    click.echo(f"Processed: {ok}, skipped: {skipped}, failed: {failed}")


@cli.command()
@click.argument("name")
def enrich(name: str) -> None:
    """Look a technology up in external sources."""
    from algoevo.enrichment.external import fetch_technology_data

    cfg = load_system_config()
    _setup(cfg)
    result = fetch_technology_data(name, cfg["enrichment_cfg"])
    if result is None:
        click.echo(f"No enrichment data found for {name!r}")
        raise SystemExit(1)
    click.echo(json.dumps(result, ensure_ascii=False, indent=2))


def main() -> None:
    cli()
