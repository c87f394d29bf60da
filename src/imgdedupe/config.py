from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .dedup.distance import DEFAULT_THRESHOLD, FINGERPRINT_BITS
from .dedup.signature import SIGNATURES


class ConfigurationError(Exception):
    """Raised when settings cannot be used to start a run."""


@dataclass
class Settings:
    source_dir: Path = Path(".")
    output_dir: Optional[Path] = None
    threshold: int = DEFAULT_THRESHOLD
    signature: str = "phash"
    transitive: bool = False
    prefer_largest: bool = False
    write_manifest: bool = True
    verbose: bool = False

    def resolved_output_dir(self) -> Path:
        """Output directory, defaulting to a ``<source>-deduped`` sibling."""
        if self.output_dir is not None:
            return self.output_dir
        source = self.source_dir.resolve()
        return source.parent / f"{source.name}-deduped"

    def validate(self) -> None:
        if not self.source_dir.is_dir():
            raise ConfigurationError(f"Source is not a directory: {self.source_dir}")

        source = self.source_dir.resolve()
        output = self.resolved_output_dir().resolve()
        if output == source:
            raise ConfigurationError(
                f"Output directory must differ from the source directory: {self.source_dir}"
            )
        if output in source.parents:
            raise ConfigurationError(
                f"Source directory must not be inside the output directory: {output}"
            )

        # at 0 nothing is similar, not even an image to itself
        if not 1 <= self.threshold <= FINGERPRINT_BITS:
            raise ConfigurationError(
                f"Threshold must be between 1 and {FINGERPRINT_BITS}, got {self.threshold}"
            )

        if self.signature not in SIGNATURES:
            valid = ", ".join(sorted(SIGNATURES))
            raise ConfigurationError(f"Unknown signature '{self.signature}' (valid: {valid})")
