"""Sample model: named snippets loaded from a JSON document.

Decouples what text is shown from how it gets highlighted. A sample only
carries a formatter id; the registry turns that id into a Formatter at
render time, falling back to its default for ids it does not know.

Document shape:
    {
      "samples": [
        {"name": "Decorators", "formatter": "lavendeux",
         "text": ["255 @hex", "8 @oct"]},
        ...
      ],
      "example": ["x = 0xFFA & 0xFF0", "x - 55"]
    }

    "text" and "example" are either a single string or a list of lines
    (joined with newlines). "formatter" may be omitted. A bare list of
    sample entries is accepted as well.

Example:
    >>> batch = load_bundled_samples()
    >>> html = get_sample_html(batch)

"""

from __future__ import annotations

import json
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import TYPE_CHECKING, Any

from lilac.config import get_render_config
from lilac.errors import SampleError
from lilac.utils.logger import get_logger
from lilac.utils.text import join_lines

if TYPE_CHECKING:
    from lilac.formatters.base import Formatter
    from lilac.formatters.registry import FormatterRegistry

logger = get_logger(__name__)

BUNDLED_SAMPLES = "samples.json"


@dataclass(frozen=True, slots=True)
class Sample:
    """A named snippet and the id of the formatter meant for it.

    Attributes:
        name: Display name
        text: Raw source text
        formatter: Formatter id (resolved through a registry when rendered)

    """

    name: str
    text: str
    formatter: str

    @classmethod
    def from_dict(
        cls,
        entry: Any,
        index: int | None = None,
        default_formatter: str | None = None,
    ) -> Sample:
        """Build a sample from one decoded JSON record.

        Args:
            entry: The record (expected to be a JSON object)
            index: Position in the source document, for error messages
            default_formatter: Id used when the record names none; None uses
                the active RenderConfig

        Raises:
            SampleError: If the record cannot be interpreted as a sample
        """
        if not isinstance(entry, Mapping):
            raise SampleError(f"expected an object, got {type(entry).__name__}", index=index)

        name = entry.get("name")
        if not isinstance(name, str) or not name:
            raise SampleError("missing or empty 'name'", index=index)

        if "text" not in entry:
            raise SampleError("missing 'text'", index=index, name=name)
        try:
            text = join_lines(entry["text"])
        except TypeError as e:
            raise SampleError(f"bad 'text': {e}", index=index, name=name) from e

        formatter = entry.get("formatter")
        if formatter is None:
            formatter = default_formatter or get_render_config().default_formatter
        elif not isinstance(formatter, str):
            raise SampleError(
                f"'formatter' must be a string, got {type(formatter).__name__}",
                index=index,
                name=name,
            )

        return cls(name=name, text=text, formatter=formatter)

    def to_html(self, formatter: Formatter) -> str:
        """Render this sample through the given formatter."""
        return formatter.format(self.text)


@dataclass(frozen=True, slots=True)
class SampleBatch:
    """Result of loading a sample document.

    Attributes:
        samples: Successfully loaded samples, in document order
        errors: One SampleError per skipped entry
        example: Joined ``example`` entry, if the document has one

    """

    samples: tuple[Sample, ...] = ()
    errors: tuple[SampleError, ...] = ()
    example: str | None = None

    @property
    def ok(self) -> bool:
        """True if no entry was skipped."""
        return not self.errors

    def get(self, name: str) -> Sample | None:
        """Find a sample by display name."""
        for sample in self.samples:
            if sample.name == name:
                return sample
        return None

    def __iter__(self) -> Iterator[Sample]:
        return iter(self.samples)

    def __len__(self) -> int:
        return len(self.samples)


def load_samples(document: str | bytes | Mapping[str, Any] | list[Any]) -> SampleBatch:
    """Parse a sample document into a batch.

    Malformed entries are skipped, logged and reported in
    SampleBatch.errors; the rest of the batch still loads. With
    RenderConfig.strict_samples the first malformed entry is raised instead.

    Args:
        document: JSON text, or an already-decoded object/list

    Returns:
        SampleBatch with samples, per-entry errors and the example text

    Raises:
        SampleError: If the document is not JSON or holds no sample list
    """
    config = get_render_config()

    if isinstance(document, (str, bytes)):
        try:
            data = json.loads(document)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise SampleError(f"sample document is not valid JSON: {e}") from e
    else:
        data = document

    example: str | None = None
    if isinstance(data, Mapping):
        entries = data.get("samples")
        if "example" in data:
            try:
                example = join_lines(data["example"])
            except TypeError as e:
                logger.warning("Ignoring malformed 'example' entry: %s", e)
    else:
        entries = data

    if not isinstance(entries, list):
        raise SampleError("sample document has no 'samples' list")

    samples: list[Sample] = []
    errors: list[SampleError] = []
    for index, entry in enumerate(entries):
        try:
            samples.append(
                Sample.from_dict(entry, index=index, default_formatter=config.default_formatter)
            )
        except SampleError as e:
            if config.strict_samples:
                raise
            logger.warning("Skipping malformed sample entry: %s", e)
            errors.append(e)

    return SampleBatch(samples=tuple(samples), errors=tuple(errors), example=example)


def load_samples_file(path: Path | str) -> SampleBatch:
    """Read a UTF-8 sample document from disk and load it.

    Raises:
        OSError: If the file cannot be read
        SampleError: As for load_samples()
    """
    try:
        content = Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise SampleError(f"sample file {path} is not valid UTF-8: {e}") from e
    return load_samples(content)


def load_bundled_samples() -> SampleBatch:
    """Load the samples shipped with the package (lilac/data/samples.json)."""
    content = resources.files("lilac.data").joinpath(BUNDLED_SAMPLES).read_text(encoding="utf-8")
    return load_samples(content)


def render_samples(
    samples: Iterable[Sample],
    registry: FormatterRegistry | None = None,
) -> list[str]:
    """Render each sample through its resolved formatter.

    Args:
        samples: Samples (or a SampleBatch) in display order
        registry: Formatter registry; None uses the cached built-in one

    Returns:
        One HTML fragment per sample, in the same order
    """
    if registry is None:
        from lilac.formatters.registry import get_default_registry

        registry = get_default_registry()

    return [sample.to_html(registry.resolve(sample.formatter)) for sample in samples]


def get_sample_html(
    samples: Iterable[Sample],
    registry: FormatterRegistry | None = None,
    *,
    separator: str | None = None,
) -> str:
    """Render samples and join the fragments for display.

    Args:
        samples: Samples (or a SampleBatch) in display order
        registry: Formatter registry; None uses the cached built-in one
        separator: Joiner; None uses RenderConfig.separator
    """
    if separator is None:
        separator = get_render_config().separator
    return separator.join(render_samples(samples, registry))


def get_example_sample(
    source: SampleBatch | str | bytes | Mapping[str, Any] | list[Any],
) -> str:
    """Return the joined example text ("" when the document has none).

    Args:
        source: A loaded SampleBatch, or a document as accepted by load_samples()

    Raises:
        SampleError: If a document is given and it cannot be loaded
    """
    batch = source if isinstance(source, SampleBatch) else load_samples(source)
    return batch.example or ""


__all__ = [
    "BUNDLED_SAMPLES",
    "Sample",
    "SampleBatch",
    "get_example_sample",
    "get_sample_html",
    "load_bundled_samples",
    "load_samples",
    "load_samples_file",
    "render_samples",
]
