"""Read and write presentation documents as YAML."""

from pathlib import Path
from typing import Any

from pydantic import ValidationError
from yaml import SafeDumper
from yaml.nodes import ScalarNode

from ..exceptions import InputNotFoundError, SlideFactoryError
from ..models import PresentationDocument


class _DocumentDumper(SafeDumper):
    pass


def _represent_str(dumper: SafeDumper, value: str) -> ScalarNode:
    # Multi-line strings (code blocks mostly) are emitted as literal blocks
    if "\n" in value:
        return dumper.represent_scalar("tag:yaml.org,2002:str", value, style="|")
    return dumper.represent_scalar("tag:yaml.org,2002:str", value)


_DocumentDumper.add_representer(str, _represent_str)


def document_to_dict(document: PresentationDocument) -> dict[str, Any]:
    return document.model_dump(mode="json", exclude_none=True)


def dump_document(document: PresentationDocument) -> str:
    from yaml import dump

    return dump(
        document_to_dict(document),
        Dumper=_DocumentDumper,
        allow_unicode=True,
        sort_keys=False,
        default_flow_style=False,
        width=float("inf"),
    )


def load_document(text: str) -> PresentationDocument:
    """Validate a YAML document.

    Missing or empty `title` and `subtitle` fields are treated as unset. Top-level \
    keys outside of the document schema are ignored.

    Args:
        text: YAML content.

    Raises:
        SlideFactoryError: Raised if the YAML is invalid or doesn't follow the \
            document schema.

    Returns:
        The validated document.
    """
    from yaml import YAMLError, safe_load

    try:
        content = safe_load(text)
    except YAMLError as e:
        msg = f"invalid YAML document: {e}"
        raise SlideFactoryError(msg) from e
    try:
        return PresentationDocument.model_validate(content or {})
    except ValidationError as e:
        msg = f"invalid presentation document:\n{e}"
        raise SlideFactoryError(msg) from e


def load_document_path(path: Path) -> PresentationDocument:
    try:
        text = path.read_text(encoding="utf8")
    except (OSError, UnicodeDecodeError) as e:
        msg = (
            f"could not read content file {path} ({e}). Run `parse` first to "
            "generate it from the outline"
        )
        raise InputNotFoundError(msg) from e
    return load_document(text)
