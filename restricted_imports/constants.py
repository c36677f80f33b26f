from typing import Final

from wcmatch import glob


CONFIG_FILENAMES: Final[tuple[str, ...]] = (
    ".restricted-imports.yaml",
    ".restricted-imports.yml",
    ".restricted-imports.json",
)
YAML_SUFFIXES: Final[tuple[str, ...]] = (".yaml", ".yml")

RESTRICTIONS_KEY: Final[str] = "restrictions"

MESSAGE_ID_RESTRICTED: Final[str] = "restricted"

NEGATION_PREFIX: Final[str] = "!"
EXTGLOB_OPEN: Final[str] = "("

GLOB_FLAGS: Final[int] = (
    glob.GLOBSTAR | glob.EXTGLOB | glob.DOTGLOB | glob.BRACE | glob.FORCEUNIX
)
