import logging
import tomllib
from dataclasses import dataclass, fields
from pathlib import Path

from .errors import make_config_error

logger = logging.getLogger(__name__)

DEFAULT_OPTIONS_FILE = "jailconf.toml"


@dataclass(frozen=True)
class ParserOptions:
    """
    Parser switches loaded from the ``[parser]`` table of jailconf.toml.

    Examples in jailconf.toml:

        [parser]
        global_parameters = false   # reject parameters outside a block
        keep_comments = false       # drop comments from the Document
    """

    global_parameters: bool = True
    keep_comments: bool = True


def load_options(path: Path) -> ParserOptions:
    """
    Load parser options from a TOML file.

    Raises:
        ConfigError: If the file is not valid TOML or an option is unknown
            or of the wrong type
    """
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise make_config_error(f"Invalid TOML: {e}", path) from e

    parser_data = data.get("parser", {})
    if not isinstance(parser_data, dict):
        raise make_config_error("[parser] must be a table", path)

    known = {f.name: f for f in fields(ParserOptions)}
    for key, value in parser_data.items():
        if key not in known:
            raise make_config_error(f"Unknown parser option: {key!r}", path)
        if not isinstance(value, bool):
            raise make_config_error(
                f"Parser option {key!r} must be a boolean, got {type(value).__name__}",
                path,
            )

    logger.info(f"Loaded parser options from {path}")
    return ParserOptions(**parser_data)


def resolve_options(path: Path | None = None) -> ParserOptions:
    """
    Find parser options for a CLI run.

    An explicit ``path`` must exist. Without one, ``jailconf.toml`` in the
    current directory is used if present, else the defaults.
    """
    if path is not None:
        if not path.exists():
            raise make_config_error(f"Options file not found: {path}")
        return load_options(path)

    default_path = Path.cwd() / DEFAULT_OPTIONS_FILE
    if default_path.exists():
        return load_options(default_path)

    logger.debug(f"No {DEFAULT_OPTIONS_FILE} found, using default parser options")
    return ParserOptions()
