from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Tuple

import yaml

@dataclass(frozen=True)
class ExtensionConfig:
    disabled: bool = False
    disabled_functions: Tuple[str, ...] = ()   # directive ids that are never registered
    language: str = "en"                       # magic word language
    interwiki_prefixes: Tuple[str, ...] = ()   # "wikipedia" makes [[wikipedia:Foo]] external

@dataclass(frozen=True)
class RenderConfig:
    input_dir: Path
    output_dir: Path
    extension: ExtensionConfig = field(default_factory=ExtensionConfig)
    extra_pages: Tuple[str, ...] = ()          # titles that exist besides the input pages
    dry_run: bool = False

def _str_tuple(key: str, v: Any) -> Tuple[str, ...]:
    if v is None:
        return ()
    if isinstance(v, str):
        v = [v]
    if not isinstance(v, (list, tuple)):
        raise ValueError(f"Malformed config: '{key}' must be a list of strings")
    out = []
    for x in v:
        s = str(x).strip()
        if s:
            out.append(s)
    return tuple(out)

def config_from_mapping(data: Dict[str, Any]) -> ExtensionConfig:
    """
    Build an ExtensionConfig from a plain mapping. Unknown keys are ignored.
    """
    disabled = data.get("disabled", False)
    if not isinstance(disabled, bool):
        raise ValueError("Malformed config: 'disabled' must be true or false")

    language = data.get("language", "en")
    if not isinstance(language, str) or not language.strip():
        raise ValueError("Malformed config: 'language' must be a non-empty string")

    return ExtensionConfig(
        disabled=disabled,
        disabled_functions=tuple(
            s.lower() for s in _str_tuple("disabled_functions", data.get("disabled_functions"))
        ),
        language=language.strip().lower(),
        interwiki_prefixes=tuple(
            s.lower() for s in _str_tuple("interwiki_prefixes", data.get("interwiki_prefixes"))
        ),
    )

def load_config(path: Path | None) -> ExtensionConfig:
    if path is None:
        return ExtensionConfig()
    path = Path(path).expanduser()
    if not path.exists():
        return ExtensionConfig()
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Malformed config {path}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"Malformed config {path}: top-level must be a mapping")
    return config_from_mapping(data)
