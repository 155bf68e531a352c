import json
import tomllib
from pathlib import Path

import yaml

from simulator.errors import ParseError
from simulator.model import Model

FORMAT_ALIASES = {
    "json": "json",
    "yaml": "yaml",
    "yml": "yaml",
    "toml": "toml",
}


def normalize_format(fmt):
    key = str(fmt).lower().lstrip(".")
    if key not in FORMAT_ALIASES:
        raise ParseError("FormatNotProvided", f"unsupported model format: {fmt!r} (use json, yaml or toml)")
    return FORMAT_ALIASES[key]


def infer_format(path):
    """Guess the model format from the file extension."""
    suffix = Path(path).suffix
    if not suffix:
        raise ParseError("FormatNotProvided", f"cannot infer model format of {path}: no extension")
    return normalize_format(suffix)


def _decode(text, fmt):
    try:
        if fmt == "json":
            return json.loads(text)
        if fmt == "yaml":
            return yaml.safe_load(text)
        return tomllib.loads(text)
    except (json.JSONDecodeError, yaml.YAMLError, tomllib.TOMLDecodeError) as e:
        raise ParseError("SyntaxNotValid", f"{fmt} deserializer failed: {e}") from e


def parse(text, fmt, name=None):
    """Turn model text into a validated Model."""
    fmt = normalize_format(fmt)
    data = _decode(text, fmt)
    return Model.from_dict(data, name=name)


def load_model(path, fmt=None):
    path = Path(path)
    if fmt is None:
        fmt = infer_format(path)
    with open(path, "r", encoding="utf-8") as f:
        text = f.read()
    return parse(text, fmt, name=path.stem)


def dump(model, fmt="json"):
    """Serialize a model back into its canonical document (JSON or YAML)."""
    fmt = normalize_format(fmt)
    data = model.to_dict()
    if fmt == "json":
        return json.dumps(data, indent=2, ensure_ascii=False)
    if fmt == "yaml":
        return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)
    raise ParseError("FormatNotProvided", "toml export is not supported")
