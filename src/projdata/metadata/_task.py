"""Up-to-date aware generation task.

The task declares its inputs (metadata, render options, format version) and
its output file. A run is skipped when the SHA-256 of the canonical inputs
matches the hash recorded by the previous run and the output file still has
the content that run wrote.
"""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

import orjson

from ._generator import generate_project_data, validate_metadata
from ._models import RenderOptions

if TYPE_CHECKING:
    from jinja2 import Environment
    from structlog.typing import FilteringBoundLogger

    from ._models import ProjectMetadata


@dataclass(frozen=True, slots=True)
class GenerationOutcome:
    """Result of running a GenerateProjectDataTask.

    Attributes:
        path: The output file.
        up_to_date: True if the run was skipped because nothing changed.
        inputs_hash: SHA-256 of the task inputs.
    """

    path: Path
    up_to_date: bool
    inputs_hash: str


def _sha256(data: bytes) -> str:
    return hashlib.sha256(data).hexdigest()


def _read_state(state_file: Path) -> dict[str, Any]:  # pyright: ignore[reportExplicitAny]
    """Read the previous run's record, or an empty dict if unusable."""
    try:
        data = orjson.loads(state_file.read_bytes())
    except (OSError, orjson.JSONDecodeError):
        return {}
    return data if isinstance(data, dict) else {}


class GenerateProjectDataTask:
    """Generate the metadata file, skipping the work when nothing changed."""

    def __init__(
        self,
        metadata: ProjectMetadata,
        output_dir: Path,
        *,
        state_file: Path,
        options: RenderOptions | None = None,
        env: Environment | None = None,
        logger: FilteringBoundLogger | None = None,
    ) -> None:
        self.metadata: ProjectMetadata = metadata
        self.options: RenderOptions = options if options is not None else RenderOptions()
        self.output_dir: Path = output_dir
        self.state_file: Path = state_file
        self._env: Environment | None = env
        self._logger: FilteringBoundLogger | None = logger

    @property
    def output_file(self) -> Path:
        return self.output_dir / self.options.file_name()

    def inputs(self) -> dict[str, object]:
        """Return the declared task inputs."""
        from projdata.templating import FORMAT_VERSION  # noqa: PLC0415

        return {
            "metadata": self.metadata.model_dump(mode="json"),
            "options": self.options.model_dump(mode="json"),
            "format_version": FORMAT_VERSION,
        }

    def inputs_hash(self) -> str:
        """Return the SHA-256 of the canonical encoding of the inputs."""
        return _sha256(orjson.dumps(self.inputs(), option=orjson.OPT_SORT_KEYS))

    def is_up_to_date(self, inputs_hash: str | None = None) -> bool:
        """Check the previous run's record against the current state.

        Args:
            inputs_hash: Precomputed inputs hash, computed if omitted.

        Returns:
            True if the inputs are unchanged and the output is intact.
        """
        if inputs_hash is None:
            inputs_hash = self.inputs_hash()

        state = _read_state(self.state_file)
        if state.get("inputs_hash") != inputs_hash:
            return False
        if state.get("output") != str(self.output_file):
            return False

        try:
            output_hash = _sha256(self.output_file.read_bytes())
        except OSError:
            return False
        return state.get("output_hash") == output_hash

    def run(self, *, force: bool = False) -> GenerationOutcome:
        """Run the task.

        Metadata is validated before the up-to-date check, so an invalid
        version fails even when a previous record exists.

        Args:
            force: Regenerate even if the output is up to date.

        Returns:
            The outcome of the run.

        Raises:
            ValidationError: If the metadata or options are invalid.
            OSError: If the output or state file cannot be written.
        """
        validate_metadata(self.metadata, self.options)

        inputs_hash = self.inputs_hash()
        output_file = self.output_file

        if not force and self.is_up_to_date(inputs_hash):
            if self._logger is not None:
                self._logger.info("project_data_up_to_date", path=str(output_file))
            return GenerationOutcome(
                path=output_file, up_to_date=True, inputs_hash=inputs_hash
            )

        generate_project_data(
            self.metadata,
            output_file,
            options=self.options,
            env=self._env,
            logger=self._logger,
        )
        self._write_state(inputs_hash, _sha256(output_file.read_bytes()))

        return GenerationOutcome(
            path=output_file, up_to_date=False, inputs_hash=inputs_hash
        )

    def _write_state(self, inputs_hash: str, output_hash: str) -> None:
        state = {
            "inputs_hash": inputs_hash,
            "output": str(self.output_file),
            "output_hash": output_hash,
        }
        self.state_file.parent.mkdir(parents=True, exist_ok=True)
        _ = self.state_file.write_bytes(
            orjson.dumps(state, option=orjson.OPT_INDENT_2 | orjson.OPT_SORT_KEYS)
        )
