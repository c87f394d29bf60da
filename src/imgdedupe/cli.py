from pathlib import Path
from typing import Optional

import typer

from .config import ConfigurationError, Settings
from .dedup.distance import DEFAULT_THRESHOLD
from .dedup.items import ProcessedItem
from .dedup.model import deduplicate_directory
from .dedup.signature import get_signature
from .logging import get_logger
from .output.manifest import build_manifest, write_manifest_json
from .output.relocate import move_groups

app = typer.Typer(help="imgdedupe – group near-duplicate images under predictable names", no_args_is_help=True)

_ASCII_FALLBACKS = {
    "✅": "[OK]",
    "📁": "[DIR]",
    "🖼️": "[IMG]",
    "⚠️": "[WARN]",
    "🔄": "[DUP]",
    "📋": "[LIST]",
    "📦": "[MOVE]",
}


def safe_echo(message: str) -> None:
    """Echo message with an ASCII fallback for consoles without Unicode support."""
    try:
        typer.echo(message)
    except UnicodeEncodeError:
        fallback_message = message
        for symbol, replacement in _ASCII_FALLBACKS.items():
            fallback_message = fallback_message.replace(symbol, replacement)
        try:
            typer.echo(fallback_message)
        except UnicodeEncodeError:
            print("Output contains unsupported characters")


@app.command()
def dedupe(
    directory: Path = typer.Argument(..., exists=True, file_okay=False, readable=True, help="Directory of images to deduplicate"),
    out: Optional[Path] = typer.Option(None, "--out", "-o", help="Output directory for renamed images [default: <directory>-deduped]"),
    threshold: int = typer.Option(DEFAULT_THRESHOLD, help="Fingerprints differing in fewer bits than this are duplicates"),
    signature: str = typer.Option("phash", help="Image signature: phash, dhash or constant"),
    transitive: bool = typer.Option(False, "--transitive/--greedy", help="Merge chains of similar images into one group"),
    prefer_largest: bool = typer.Option(False, "--prefer-largest", help="Use the highest-resolution image as each group's canonical member"),
    write_manifest: bool = typer.Option(True, "--write-manifest/--no-write-manifest", help="Write JSON manifest file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show filenames and fingerprints during processing"),
) -> None:
    """
    Find near-duplicate images in DIRECTORY and move them into the output directory.

    Each group of duplicates is named after its canonical member's fingerprint;
    the other members get a ``<canonical>-<rank>-<fingerprint>`` name.
    """
    logger = get_logger(__name__)

    settings = Settings(
        source_dir=directory,
        output_dir=out,
        threshold=threshold,
        signature=signature,
        transitive=transitive,
        prefer_largest=prefer_largest,
        write_manifest=write_manifest,
        verbose=verbose,
    )

    try:
        settings.validate()
    except ConfigurationError as exc:
        logger.error(f"Invalid configuration: {exc}")
        raise typer.Exit(code=2) from exc

    output_dir = settings.resolved_output_dir()
    image_signature = get_signature(settings.signature, settings.threshold)

    def report(item: ProcessedItem) -> None:
        safe_echo(f"{item.source_path}: {item.fingerprint}")

    logger.info(f"Scanning {directory} with {image_signature!r}")
    run = deduplicate_directory(
        directory,
        signature=image_signature,
        transitive=settings.transitive,
        prefer_largest=settings.prefer_largest,
        exclude=output_dir,
        on_item=report if settings.verbose else None,
    )

    if not run.groups:
        if run.failures:
            logger.warning(f"None of the {len(run.failures)} supported images could be decoded")
            safe_echo(f"⚠️  Skipped (decode failures): {len(run.failures)}")
            for failure in run.failures:
                safe_echo(f"   {failure.path}")
        else:
            logger.warning("No supported images found")
            safe_echo(f"⚠️  No supported images found in {directory}")
        return

    logger.info(f"Moving {run.processed_count} images into {output_dir}")
    relocation = move_groups(run.named_groups, output_dir)

    manifest_path = None
    if settings.write_manifest:
        manifest = build_manifest(directory, output_dir, image_signature, run, relocation)
        manifest_path = write_manifest_json(manifest, output_dir)

    safe_echo("\n✅ Deduplication complete!")
    safe_echo(f"📁 Source: {directory}")
    safe_echo(f"🖼️  Images processed: {run.processed_count}")
    if run.failures:
        safe_echo(f"⚠️  Skipped (decode failures): {len(run.failures)}")
    safe_echo(f"🔄 Duplicate groups: {run.duplicate_group_count}")
    safe_echo(f"📋 Total duplicates: {run.duplicate_count}")
    safe_echo(f"📦 Moved: {len(relocation.moved)} to {output_dir}")
    if relocation.failures:
        safe_echo(f"⚠️  Move failures: {len(relocation.failures)}")
    if manifest_path is not None:
        safe_echo(f"📋 Manifest: {manifest_path.name}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
